"""Users collection access."""

import uuid
from typing import Optional

from pymongo.errors import DuplicateKeyError

from models.database import get_users_collection
from schemas.user import User
from utils.helpers import utc_now
from utils.logger import setup_logger

logger = setup_logger(__name__)


class EmailAlreadyExists(Exception):
    """Raised when signing up with an email that is already registered."""


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository:
    """Reads and writes user documents."""

    def __init__(self, collection):
        self.collection = collection

    async def create_user(
        self,
        name: str,
        email: str,
        password_hash: str,
        img: Optional[str] = None,
    ) -> User:
        timestamp = utc_now()
        user = User(
            user_id=str(uuid.uuid4()),
            name=name,
            email=normalize_email(email),
            password_hash=password_hash,
            img=img,
            status="active",
            created_at=timestamp,
            updated_at=timestamp,
        )
        try:
            await self.collection.insert_one(user.model_dump())
        except DuplicateKeyError as e:
            raise EmailAlreadyExists(user.email) from e

        logger.info(f"Created user: {user.user_id}")
        return user

    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        document = await self.collection.find_one({"user_id": user_id}, {"_id": 0})
        return User(**document) if document else None

    async def get_user_by_email(self, email: str) -> Optional[User]:
        document = await self.collection.find_one(
            {"email": normalize_email(email)}, {"_id": 0}
        )
        return User(**document) if document else None


def get_user_repository() -> UserRepository:
    return UserRepository(get_users_collection())
