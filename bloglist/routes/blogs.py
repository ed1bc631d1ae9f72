"""
Bloglist API - Blog Route Handlers
===================================

What:  /api/blogs CRUD plus the /api/blogs/stats aggregate view.
How:   Extracts path/body data, resolves the bearer-token user where needed,
       delegates to BlogService, returns JSON.

Auth:
    POST and DELETE require `Authorization: Bearer <token>` (get_current_user).
    Reads and the likes update are public.

Ids are UUIDs; a malformed id fails FastAPI's path validation and is
answered with 400 by the RequestValidationError handler in main.py.
"""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.database import get_db_session
from bloglist.models.user import User
from bloglist.schemas.blog import (
    BlogCreate,
    BlogLikesUpdate,
    BlogResponse,
    BlogStatsResponse,
)
from bloglist.schemas.common import ErrorResponse
from bloglist.security import get_current_user
from bloglist.services.blog_service import blog_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/blogs", tags=["Blogs"])


@router.get(
    "",
    response_model=List[BlogResponse],
    summary="List all blogs",
)
async def list_blogs(
    db: AsyncSession = Depends(get_db_session),
) -> List[BlogResponse]:
    return await blog_service.list_blogs(db)


# Registered before /{blog_id} so "stats" is not parsed as an id
@router.get(
    "/stats",
    response_model=BlogStatsResponse,
    summary="Aggregate statistics over all blogs",
    description=(
        "Total likes, the most liked blog, the author with the most blogs and "
        "the author with the most likes. Null fields mean there are no blogs."
    ),
)
async def blog_stats(
    db: AsyncSession = Depends(get_db_session),
) -> BlogStatsResponse:
    return await blog_service.blog_stats(db)


@router.get(
    "/{blog_id}",
    response_model=BlogResponse,
    responses={
        400: {"description": "Malformed blog id", "model": ErrorResponse},
        404: {"description": "Blog not found", "model": ErrorResponse},
    },
    summary="Get a single blog by ID",
)
async def get_blog(
    blog_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> BlogResponse:
    return await blog_service.get_blog(db, blog_id)


@router.post(
    "",
    status_code=201,
    response_model=BlogResponse,
    responses={
        400: {"description": "Missing title or url", "model": ErrorResponse},
        401: {"description": "Token missing, invalid or expired", "model": ErrorResponse},
    },
    summary="Create a blog owned by the logged-in user",
)
async def create_blog(
    payload: BlogCreate,
    db: AsyncSession = Depends(get_db_session),
    user: User = Depends(get_current_user),
) -> BlogResponse:
    return await blog_service.create_blog(db, payload, user)


@router.put(
    "/{blog_id}",
    response_model=BlogResponse,
    responses={
        400: {"description": "Malformed id or likes", "model": ErrorResponse},
        404: {"description": "Blog not found", "model": ErrorResponse},
    },
    summary="Update a blog's like count",
)
async def update_blog(
    blog_id: UUID,
    payload: BlogLikesUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> BlogResponse:
    return await blog_service.update_likes(db, blog_id, payload.likes)


@router.delete(
    "/{blog_id}",
    status_code=204,
    responses={
        401: {"description": "Token missing, invalid or expired", "model": ErrorResponse},
        403: {"description": "Blog belongs to another user", "model": ErrorResponse},
        404: {"description": "Blog not found", "model": ErrorResponse},
    },
    summary="Delete a blog (owner only)",
)
async def delete_blog(
    blog_id: UUID,
    db: AsyncSession = Depends(get_db_session),
    user: User = Depends(get_current_user),
) -> Response:
    await blog_service.delete_blog(db, blog_id, user)
    return Response(status_code=204)
