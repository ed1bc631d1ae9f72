"""
Bloglist API - Blog Request/Response Schemas
=============================================

What:  Pydantic models defining the blog endpoints' API contract.
How:   FastAPI validates request bodies against these models (failures become
       400 responses, see main.py) and serializes responses through them.

Design Decision:
    Schemas are separate from SQLAlchemy models so the owner's password hash
    or other internal columns can never leak through a blog response; the
    owner is exposed only as a BlogOwner summary.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class BlogCreate(BaseModel):
    """Body of POST /api/blogs. The owner comes from the bearer token, not the body."""
    title: str = Field(min_length=1, max_length=500, description="Blog title")
    author: Optional[str] = Field(default=None, max_length=255, description="Author name")
    url: str = Field(min_length=1, description="Link to the blog post")
    likes: int = Field(default=0, ge=0, description="Initial like count (defaults to 0)")


class BlogLikesUpdate(BaseModel):
    """Body of PUT /api/blogs/{id}. Only the like count is updatable."""
    likes: int = Field(ge=0, description="New like count")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class BlogOwner(BaseModel):
    id: uuid.UUID
    username: str
    name: Optional[str] = None

    model_config = {"from_attributes": True}


class BlogResponse(BaseModel):
    """
    Full representation of a blog.

    user is null for blogs without an owner.
    """
    id: uuid.UUID = Field(description="Unique blog identifier (UUID)")
    title: str
    author: Optional[str] = None
    url: str
    likes: int = 0
    user: Optional[BlogOwner] = Field(default=None, description="Owning user summary")

    model_config = {"from_attributes": True}


class AuthorBlogCount(BaseModel):
    author: Optional[str]
    blogs: int


class AuthorLikes(BaseModel):
    author: Optional[str]
    likes: int


class BlogStatsResponse(BaseModel):
    """
    Aggregates over every stored blog.

    All fields except total_likes are null when there are no blogs.
    """
    total_likes: int = Field(description="Sum of likes across all blogs")
    favorite_blog: Optional[BlogResponse] = Field(
        default=None, description="Blog with the most likes (first one on ties)"
    )
    most_blogs: Optional[AuthorBlogCount] = Field(
        default=None, description="Author with the most blogs"
    )
    most_likes: Optional[AuthorLikes] = Field(
        default=None, description="Author whose blogs have the most likes in total"
    )
