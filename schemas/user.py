"""User collection schema."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from schemas.base import CamelModel


class User(BaseModel):
    """Users collection model."""
    user_id: str = Field(..., description="Unique user identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Lower-cased, unique email address")
    password_hash: str = Field(..., description="Salted password hash")
    img: Optional[str] = Field(None, description="Avatar URL")
    status: str = Field("active", description="Account status")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class PublicUser(CamelModel):
    """User fields safe to return to clients and embed in tokens."""
    id: str = Field(..., alias="_id")
    name: str
    email: str
    img: Optional[str] = None
    status: str = "active"

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        return cls(
            id=user.user_id,
            name=user.name,
            email=user.email,
            img=user.img,
            status=user.status,
        )


class SignupRequest(CamelModel):
    name: str = Field("", description="Display name")
    email: str = Field("", description="Email address")
    password: str = Field("", description="Plain-text password")
    img: Optional[str] = Field(None, description="Avatar URL")


class SigninRequest(CamelModel):
    email: str = ""
    password: str = ""


class AuthResponse(CamelModel):
    token: str
    user: PublicUser
