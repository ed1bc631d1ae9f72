"""
Bloglist API - User and Login Schemas
======================================

What:  Pydantic models for registration, user listing and login.

Validation lives here, declaratively:
    - username: required, at least 3 characters, letters/digits/underscore
    - password: required, at least 4 characters

    Uniqueness of the username cannot be checked by a schema; UserService
    enforces it against the database.
"""

import re
import uuid
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

USERNAME_RE = re.compile(r"^[a-zA-Z0-9_]+$")
USERNAME_CHARS_MESSAGE = "Only letters, numbers, and underscores are allowed"
MIN_PASSWORD_LENGTH = 4

# bcrypt only looks at the first 72 bytes and current releases reject longer input
MAX_PASSWORD_BYTES = 72


class UserCreate(BaseModel):
    username: str = Field(
        min_length=3,
        max_length=64,
        description="Unique login name (letters, numbers and underscores)",
    )
    name: Optional[str] = Field(default=None, max_length=255)
    password: Optional[str] = Field(
        default=None,
        validate_default=True,
        description=f"Plain-text password, at least {MIN_PASSWORD_LENGTH} characters",
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not USERNAME_RE.match(v):
            raise ValueError(USERNAME_CHARS_MESSAGE)
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: Optional[str]) -> str:
        """Missing and too-short passwords get the same message."""
        if v is None or len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes long"
            )
        return v


class UserBlogSummary(BaseModel):
    id: uuid.UUID
    title: str
    author: Optional[str] = None
    url: str

    model_config = {"from_attributes": True}


class UserResponse(BaseModel):
    """Public view of a user; never includes the password hash."""
    id: uuid.UUID
    username: str
    name: Optional[str] = None
    blogs: List[UserBlogSummary] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    # Both optional so a missing field produces the login-specific 400 message
    # from UserService.login instead of a generic schema error
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    token: str = Field(description="Bearer token for the Authorization header")
    username: str
    name: Optional[str] = None
