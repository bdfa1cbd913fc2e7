"""Request dependencies shared by the routers."""

from typing import Any, Dict, Optional

import jwt
from fastapi import Header, HTTPException

from services.auth_service import build_user_context, decode_access_token
from utils.logger import setup_logger

logger = setup_logger(__name__)


async def get_current_user(authorization: Optional[str] = Header(None)) -> Dict[str, Any]:
    """Resolve the caller from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        raise HTTPException(status_code=401, detail="You are not authenticated!")

    parts = authorization.split(" ")
    token = parts[1].strip() if len(parts) > 1 else ""
    if not token:
        raise HTTPException(status_code=401, detail="You are not authenticated")

    try:
        decoded = decode_access_token(token)
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Token verification error: {e}")
        raise HTTPException(status_code=401, detail="Invalid token")

    user = build_user_context(decoded)
    if not user:
        logger.warning("User context missing from decoded token")
        raise HTTPException(status_code=401, detail="User context missing")
    return user


def current_user_id(user: Dict[str, Any]) -> str:
    return user.get("_id") or user.get("userId")
