"""
Bloglist API - Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Environment variables are set BEFORE any bloglist import so the
       settings singleton and the engine pick up the test values.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests (no DB)
    ├── db_tables: fresh SQLite schema (create_all / drop_all) per test
    ├── test_client: HTTPX AsyncClient talking to the app over ASGI
    ├── root_user: a saved user "root" with password "sekret"
    ├── auth_headers: Authorization header carrying root's token
    ├── initial_blogs: two saved blogs owned by root
    └── blogs_in_db / users_in_db: read the tables back after a request
"""

import os
import tempfile

# Override settings for testing BEFORE any app imports
_TEST_DB_DIR = tempfile.mkdtemp(prefix="bloglist_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.db"
os.environ["SECRET_KEY"] = "test-secret-not-real"
os.environ["BCRYPT_ROUNDS"] = "4"  # bcrypt minimum; keeps the suite fast
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_REQUESTS"] = "100000"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import select  # noqa: E402

from bloglist.database import Base, async_session_factory, engine  # noqa: E402
from bloglist.models.blog import Blog  # noqa: E402
from bloglist.models.user import User  # noqa: E402
from bloglist.security import create_access_token, hash_password  # noqa: E402

INITIAL_BLOGS = [
    {
        "title": "Understanding MongoDB with Mongoose",
        "author": "Jane Smith",
        "url": "https://example.com/mongoose-guide",
        "likes": 27,
    },
    {
        "title": "Introduction to Node.js",
        "author": "Arto Hellas",
        "url": "https://fullstackopen.com/nodejs",
        "likes": 120,
    },
]


# ══════════════════════════════════════════════════════════════════════════
# Service Unit Test Fixtures (no database)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_blog(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = blog
            result = await blog_service.get_blog(mock_db_session, blog_id)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.delete = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Database-Backed Fixtures (SQLite via aiosqlite)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    # Pooled connections are bound to this test's event loop
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(db_tables):
    """
    HTTPX AsyncClient configured to talk to the FastAPI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from bloglist.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def _save_user(username: str, password: str, name: str = None) -> User:
    async with async_session_factory() as session:
        user = User(username=username, name=name, password_hash=hash_password(password))
        session.add(user)
        await session.commit()
        return user


@pytest_asyncio.fixture
async def root_user(db_tables) -> User:
    return await _save_user("root", "sekret", name="Superuser")


@pytest_asyncio.fixture
async def other_user(db_tables) -> User:
    return await _save_user("theblackmamba08", "sekret")


@pytest.fixture
def auth_headers(root_user):
    token = create_access_token(username=root_user.username, user_id=root_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(other_user):
    token = create_access_token(username=other_user.username, user_id=other_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def initial_blogs(root_user):
    """The INITIAL_BLOGS records, saved and owned by root."""
    async with async_session_factory() as session:
        for data in INITIAL_BLOGS:
            session.add(Blog(user_id=root_user.id, **data))
            # One flush per blog keeps created_at (and list order) distinct
            await session.flush()
        await session.commit()


@pytest.fixture
def blogs_in_db():
    async def _blogs_in_db():
        async with async_session_factory() as session:
            result = await session.execute(select(Blog).order_by(Blog.created_at))
            return list(result.scalars().all())
    return _blogs_in_db


@pytest.fixture
def users_in_db():
    async def _users_in_db():
        async with async_session_factory() as session:
            result = await session.execute(select(User).order_by(User.created_at))
            return list(result.scalars().all())
    return _users_in_db
