"""
Bloglist API - Application Package
===================================

What: Marks the `bloglist` directory as a Python package.
Who:  Imported by uvicorn (`bloglist.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← ownership, login, aggregation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes translate HTTP into service calls; services raise the exceptions in
    `bloglist.exceptions`, which the handlers in `bloglist.main` turn into
    status codes.
"""

__version__ = "1.0.0"
