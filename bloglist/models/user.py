"""
Bloglist API - User SQLAlchemy Model
=====================================

What:  ORM model representing the `users` table.
Who:   Used by UserService (registration, listing, login) and by the
       bearer-token dependency to resolve the current user.

Table Design Rationale:
    - username: unique at the database level, so two concurrent registrations
      of the same name cannot both succeed even if the service-level check races
    - password_hash: bcrypt output (60 chars); the plain password is never stored
    - blogs: not a column; derived from blogs.user_id through the relationship
"""

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List

from sqlalchemy import DateTime, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bloglist.database import Base

if TYPE_CHECKING:
    from bloglist.models.blog import Blog


class User(Base):
    """A registered account that can own blogs."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    username: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        comment="Login name: 3+ chars, letters, digits and underscores only",
    )

    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        default=None,
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="bcrypt hash, never serialized",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    blogs: Mapped[List["Blog"]] = relationship(
        back_populates="user",
        order_by="Blog.created_at",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
