"""
Bloglist API - Login Route
===========================

POST /api/login exchanges a username/password pair for a bearer token:

    → {"username": "root", "password": "sekret"}
    ← {"token": "<jwt>", "username": "root", "name": "Superuser"}

Clients send the token back as `Authorization: Bearer <jwt>`.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.database import get_db_session
from bloglist.schemas.common import ErrorResponse
from bloglist.schemas.user import LoginRequest, LoginResponse
from bloglist.services.user_service import user_service

router = APIRouter(prefix="/api", tags=["Login"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "username or password missing", "model": ErrorResponse},
        401: {"description": "invalid username or password", "model": ErrorResponse},
    },
    summary="Log in and receive a bearer token",
)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    return await user_service.login(db, payload)
