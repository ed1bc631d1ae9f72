"""
Bloglist API - Passwords, Tokens and the Current User
======================================================

What:  bcrypt password hashing, signed bearer tokens (PyJWT) and the FastAPI
       dependency that turns an Authorization header into a User.
Who:   UserService uses the hashing and token helpers for registration and
       login; the blog routes depend on get_current_user.

Token format:
    HS256 JWT with claims {"username", "id", "iat", "exp"}. Tokens expire
    settings.access_token_expire_seconds after issue.

Failure messages (all 401):
    "token missing"  - no Authorization: Bearer header
    "token expired"  - signature valid but exp has passed
    "token invalid"  - anything else, including a token for a deleted user
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.config import settings
from bloglist.database import get_db_session
from bloglist.exceptions import AuthenticationError
from bloglist.models.user import User

logger = logging.getLogger(__name__)

# auto_error=False: we raise our own AuthenticationError so the 401 body has
# the same shape as every other error
bearer_scheme = HTTPBearer(auto_error=False)


# ══════════════════════════════════════════════════════════════════════════
# Passwords
# ══════════════════════════════════════════════════════════════════════════

def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of password. CPU-bound: call via asyncio.to_thread."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Compare a submitted password with a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or over-long password
        logger.warning("Password check failed on an unusable hash or password")
        return False


# ══════════════════════════════════════════════════════════════════════════
# Tokens
# ══════════════════════════════════════════════════════════════════════════

def create_access_token(
    username: str,
    user_id: uuid.UUID,
    expires_in: Optional[int] = None,
) -> str:
    """Issue a signed token asserting the username/id pair."""
    now = datetime.now(timezone.utc)
    lifetime = settings.access_token_expire_seconds if expires_in is None else expires_in
    payload = {
        "username": username,
        "id": str(user_id),
        "iat": now,
        "exp": now + timedelta(seconds=lifetime),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify a token's signature and expiry and return its claims.

    Raises:
        AuthenticationError: "token expired" or "token invalid"
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError(message="token expired")
    except jwt.InvalidTokenError as e:
        logger.info("Rejected bearer token: %s", e)
        raise AuthenticationError(message="token invalid")

    if not payload.get("id") or not payload.get("username"):
        raise AuthenticationError(message="token invalid")
    return payload


# ══════════════════════════════════════════════════════════════════════════
# Request Dependency
# ══════════════════════════════════════════════════════════════════════════

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db_session),
) -> User:
    """
    Resolve the bearer token on the request to a stored User.

    Shares the request's database session with the route handler (FastAPI
    caches get_db_session per request).
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(message="token missing")

    payload = decode_access_token(credentials.credentials)

    try:
        user_id = uuid.UUID(str(payload["id"]))
    except ValueError:
        raise AuthenticationError(message="token invalid")

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise AuthenticationError(message="token invalid")
    return user
