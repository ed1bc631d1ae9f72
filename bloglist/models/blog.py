"""
Bloglist API - Blog SQLAlchemy Model
=====================================

What:  ORM model representing the `blogs` table.
Who:   Used by BlogService for CRUD and by Alembic for schema management.

Ownership:
    user_id is nullable so that blogs created before accounts existed (or whose
    owner was removed) remain readable. Once set, it is the only user allowed
    to delete the blog; see BlogService.delete_blog.

    ondelete="SET NULL": removing a user orphans their blogs instead of
    cascading the delete.
"""

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bloglist.database import Base

if TYPE_CHECKING:
    from bloglist.models.user import User


class Blog(Base):
    """
    A blog post link shared by a user.

    Query Patterns:
        - List all blogs with owner: SELECT ... ORDER BY created_at
          (owner loaded with selectinload, one extra query for all owners)
        - Get single blog: SELECT ... WHERE id = :uuid
        - A user's blogs: SELECT ... WHERE user_id = :uuid → idx_blogs_user_id
    """

    __tablename__ = "blogs"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
    )

    author: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        default=None,
    )

    # Why TEXT: URLs have no practical length limit worth enforcing here
    url: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    likes: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        comment="Owning user; decides who may delete the blog",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    user: Mapped[Optional["User"]] = relationship(back_populates="blogs")

    __table_args__ = (
        Index("idx_blogs_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<Blog(id={self.id}, title='{self.title}', likes={self.likes})>"
