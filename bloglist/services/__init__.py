# Services package init
"""
Bloglist API - Services Layer
==============================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
How:   Services receive the request's AsyncSession, apply business rules and
       return Pydantic response models. They raise bloglist.exceptions errors
       and never build HTTP responses themselves.

Service Inventory:
    - BlogService: blog CRUD, owner-only delete, statistics
    - UserService: registration, listing, password login
    - list_helper: pure aggregations (total likes, favorite blog,
      most blogs / most likes per author)
"""
