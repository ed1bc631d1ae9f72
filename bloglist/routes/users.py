"""
Bloglist API - User Route Handlers
===================================

GET /api/users lists users with the blogs they own; POST /api/users
registers a new account. Neither requires a token.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.database import get_db_session
from bloglist.schemas.common import ErrorResponse
from bloglist.schemas.user import UserCreate, UserResponse
from bloglist.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List users and their blogs",
)
async def list_users(
    db: AsyncSession = Depends(get_db_session),
) -> List[UserResponse]:
    return await user_service.list_users(db)


@router.post(
    "",
    status_code=201,
    response_model=UserResponse,
    responses={
        400: {
            "description": "Invalid or duplicate username, or password too short",
            "model": ErrorResponse,
        },
    },
    summary="Register a new user",
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    return await user_service.create_user(db, payload)
