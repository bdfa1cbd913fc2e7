"""Password hashing and access-token handling."""

from datetime import timedelta
from typing import Any, Dict, Optional

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from config.settings import DEV_JWT_SECRET, settings
from schemas.user import PublicUser
from utils.helpers import utc_now
from utils.logger import setup_logger

logger = setup_logger(__name__)

if settings.token_secret == DEV_JWT_SECRET:
    logger.warning("JWT_SECRET is not configured; using the development signing secret")


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    return check_password_hash(password_hash, password)


def create_access_token(user: PublicUser) -> str:
    """Sign a token carrying the public user profile."""
    now = utc_now()
    payload = {
        "user": user.model_dump(by_alias=True),
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expire_days),
    }
    return jwt.encode(payload, settings.token_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Verify signature and expiry.

    Raises jwt.ExpiredSignatureError or jwt.InvalidTokenError.
    """
    return jwt.decode(token, settings.token_secret, algorithms=[settings.jwt_algorithm])


def build_user_context(decoded: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Resolve the caller from a decoded token.

    Tokens from older clients carry the id under different keys, so
    ``user._id``, ``user.userId``, ``userId``, ``_id`` and ``sub`` are
    accepted in that order. Returns None when no id is present.
    """
    if not decoded:
        return None

    token_user = decoded.get("user") or {}
    user_id = None
    for candidate in (
        token_user.get("_id"),
        token_user.get("userId"),
        decoded.get("userId"),
        decoded.get("_id"),
        decoded.get("sub"),
    ):
        if candidate:
            user_id = candidate
            break

    if not user_id:
        return None

    context = {**token_user, "_id": user_id}
    if not context.get("userId"):
        context["userId"] = user_id
    return context
