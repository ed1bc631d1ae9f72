"""
Bloglist API - User Service
============================

What:  Registration, user listing and password login.
Who:   Called by bloglist.routes.users and bloglist.routes.login.

Login Flow (POST /api/login):
    ┌──────────┐    ┌──────────────┐    ┌──────────────┐    ┌──────────┐
    │ username │───▶│ SELECT user  │───▶│ bcrypt check │───▶│ sign JWT │
    │ password │    │ by username  │    │ (worker thr.)│    │          │
    └──────────┘    └──────────────┘    └──────────────┘    └──────────┘

    Unknown user and wrong password produce the same 401 message, so the
    endpoint cannot be used to discover which usernames exist.
"""

import asyncio
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from bloglist.exceptions import AuthenticationError, DatabaseError, ValidationError
from bloglist.models.user import User
from bloglist.schemas.user import (
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserResponse,
)
from bloglist.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

DUPLICATE_USERNAME_MESSAGE = "expected `username` to be unique"
MISSING_CREDENTIALS_MESSAGE = "username and password are required"
BAD_CREDENTIALS_MESSAGE = "invalid username or password"


class UserService:
    """
    Responsibilities:
        - list_users(): every user with summaries of the blogs they own
        - create_user(): uniqueness check, bcrypt hash, insert
        - login(): credential check and token issue
    """

    async def list_users(self, db: AsyncSession) -> List[UserResponse]:
        try:
            result = await db.execute(
                select(User)
                .options(selectinload(User.blogs))
                .order_by(User.created_at)
            )
            return [UserResponse.model_validate(user) for user in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing users: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve users. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def create_user(self, db: AsyncSession, data: UserCreate) -> UserResponse:
        """
        Register a new user.

        Uniqueness is checked twice: a SELECT for the friendly message, and the
        unique constraint (IntegrityError) for a concurrent registration that
        slips between the SELECT and the INSERT.

        Raises:
            ValidationError: username already taken (→ 400)
        """
        try:
            existing = await db.execute(
                select(User.id).where(User.username == data.username)
            )
            if existing.scalar_one_or_none() is not None:
                raise ValidationError(message=DUPLICATE_USERNAME_MESSAGE, field="username")

            password_hash = await asyncio.to_thread(hash_password, data.password)
            user = User(
                username=data.username,
                name=data.name,
                password_hash=password_hash,
            )
            db.add(user)
            await db.flush()
            logger.info("User %s registered (%s)", user.username, user.id)

            # A brand-new user owns no blogs; building the response by hand
            # avoids lazy-loading the empty collection
            return UserResponse(
                id=user.id,
                username=user.username,
                name=user.name,
                blogs=[],
            )
        except IntegrityError:
            logger.info("Duplicate username rejected by constraint: %s", data.username)
            raise ValidationError(message=DUPLICATE_USERNAME_MESSAGE, field="username")
        except SQLAlchemyError as e:
            logger.error("Database error creating user: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the user. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def login(self, db: AsyncSession, credentials: LoginRequest) -> LoginResponse:
        """
        Check a username/password pair and issue a bearer token.

        Raises:
            ValidationError: username or password missing (→ 400)
            AuthenticationError: unknown user or wrong password (→ 401)
        """
        if not credentials.username or not credentials.password:
            raise ValidationError(message=MISSING_CREDENTIALS_MESSAGE)

        try:
            result = await db.execute(
                select(User).where(User.username == credentials.username)
            )
            user = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error during login: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not log in. Please try again.",
                context={"error_type": type(e).__name__},
            )

        password_ok = user is not None and await asyncio.to_thread(
            verify_password, credentials.password, user.password_hash
        )
        if not password_ok:
            logger.info("Failed login for username %r", credentials.username)
            raise AuthenticationError(message=BAD_CREDENTIALS_MESSAGE)

        token = create_access_token(username=user.username, user_id=user.id)
        logger.info("User %s logged in", user.username)
        return LoginResponse(token=token, username=user.username, name=user.name)


user_service = UserService()
