"""
Bloglist API - Blog Service
============================

What:  Business logic for blog CRUD, the ownership check on delete, and the
       aggregate statistics endpoint.
Who:   Called by the handlers in bloglist.routes.blogs.

Design Decision:
    BlogService is stateless: each call receives the request's AsyncSession.
    Owners are loaded eagerly (selectinload) because async sessions cannot
    lazy-load relationships when the response is serialized.

Error Handling:
    Missing rows become NotFoundError, ownership violations become
    PermissionDeniedError, SQLAlchemy failures are logged and wrapped in
    DatabaseError. Our own exceptions propagate untouched.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from bloglist.exceptions import DatabaseError, NotFoundError, PermissionDeniedError
from bloglist.models.blog import Blog
from bloglist.models.user import User
from bloglist.schemas.blog import (
    BlogCreate,
    BlogOwner,
    BlogResponse,
    BlogStatsResponse,
)
from bloglist.services import list_helper

logger = logging.getLogger(__name__)

BLOG_GONE_MESSAGE = "Blog has already been removed from the server"


def _to_response(blog: Blog, owner: Optional[User] = None) -> BlogResponse:
    owner = owner if owner is not None else blog.user
    return BlogResponse(
        id=blog.id,
        title=blog.title,
        author=blog.author,
        url=blog.url,
        likes=blog.likes,
        user=BlogOwner.model_validate(owner) if owner is not None else None,
    )


class BlogService:
    """
    Responsibilities:
        - list_blogs() / get_blog(): reads, owner summary included
        - create_blog(): insert owned by the authenticated user
        - update_likes(): the only mutable field
        - delete_blog(): owner-only delete
        - blog_stats(): list_helper aggregations over every blog
    """

    async def _fetch(self, db: AsyncSession, blog_id: UUID) -> Blog:
        result = await db.execute(
            select(Blog)
            .where(Blog.id == blog_id)
            .options(selectinload(Blog.user))
        )
        blog = result.scalar_one_or_none()
        if blog is None:
            raise NotFoundError(
                resource="blog",
                resource_id=str(blog_id),
                message=BLOG_GONE_MESSAGE,
            )
        return blog

    async def list_blogs(self, db: AsyncSession) -> List[BlogResponse]:
        try:
            result = await db.execute(
                select(Blog)
                .options(selectinload(Blog.user))
                .order_by(Blog.created_at)
            )
            return [_to_response(blog) for blog in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing blogs: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve blogs. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_blog(self, db: AsyncSession, blog_id: UUID) -> BlogResponse:
        """
        Raises:
            NotFoundError: no blog with this id (→ 404)
        """
        try:
            blog = await self._fetch(db, blog_id)
            return _to_response(blog)
        except SQLAlchemyError as e:
            logger.error("Database error fetching blog %s: %s", blog_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the blog. Please try again.",
                context={"blog_id": str(blog_id)},
            )

    async def create_blog(self, db: AsyncSession, data: BlogCreate, user: User) -> BlogResponse:
        """
        Persist a new blog owned by user.

        The foreign key is set directly rather than through the relationship so
        the user's blogs collection is never touched (and never lazy-loaded).
        """
        try:
            blog = Blog(
                title=data.title,
                author=data.author,
                url=data.url,
                likes=data.likes,
                user_id=user.id,
            )
            db.add(blog)
            await db.flush()
            logger.info("Blog %s created by %s", blog.id, user.username)
            return _to_response(blog, owner=user)
        except SQLAlchemyError as e:
            logger.error("Database error creating blog: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the blog. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def update_likes(self, db: AsyncSession, blog_id: UUID, likes: int) -> BlogResponse:
        try:
            blog = await self._fetch(db, blog_id)
            blog.likes = likes
            await db.flush()
            logger.info("Blog %s likes set to %d", blog.id, likes)
            return _to_response(blog)
        except SQLAlchemyError as e:
            logger.error("Database error updating blog %s: %s", blog_id, str(e))
            raise DatabaseError(
                message="Could not update the blog. Please try again.",
                context={"blog_id": str(blog_id)},
            )

    async def delete_blog(self, db: AsyncSession, blog_id: UUID, user: User) -> None:
        """
        Delete a blog on behalf of user.

        Ownership rule:
            blog.user_id set and different from user.id → PermissionDeniedError
            blog.user_id unset → any authenticated user may delete it

        Raises:
            NotFoundError: no blog with this id (→ 404)
            PermissionDeniedError: user is not the owner (→ 403)
        """
        try:
            blog = await self._fetch(db, blog_id)

            if blog.user_id is not None and blog.user_id != user.id:
                logger.warning(
                    "User %s tried to delete blog %s owned by %s",
                    user.id, blog.id, blog.user_id,
                )
                raise PermissionDeniedError(context={"blog_id": str(blog_id)})

            await db.delete(blog)
            await db.flush()
            logger.info("Blog %s deleted by %s", blog_id, user.username)
        except SQLAlchemyError as e:
            logger.error("Database error deleting blog %s: %s", blog_id, str(e))
            raise DatabaseError(
                message="Could not delete the blog. Please try again.",
                context={"blog_id": str(blog_id)},
            )

    async def blog_stats(self, db: AsyncSession) -> BlogStatsResponse:
        blogs = [blog.model_dump() for blog in await self.list_blogs(db)]
        return BlogStatsResponse(
            total_likes=list_helper.total_likes(blogs),
            favorite_blog=list_helper.favorite_blog(blogs),
            most_blogs=list_helper.most_blogs(blogs),
            most_likes=list_helper.most_likes(blogs),
        )


# Stateless, so one shared instance
blog_service = BlogService()
