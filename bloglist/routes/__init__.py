# Routes package init
"""
Bloglist API - API Routes Package
==================================

Route Inventory:
    - blogs.py:   GET    /api/blogs            (list blogs)
                  GET    /api/blogs/stats      (aggregate statistics)
                  GET    /api/blogs/{id}       (single blog)
                  POST   /api/blogs            (create, bearer token required)
                  PUT    /api/blogs/{id}       (update likes)
                  DELETE /api/blogs/{id}       (delete, owner only)
    - users.py:   GET    /api/users            (list users with their blogs)
                  POST   /api/users            (register)
    - login.py:   POST   /api/login            (password login → bearer token)
    - health.py:  GET    /health               (service health check)

Design Principle:
    Routes are THIN: extract the request data, call the service, pick the
    status code. Business rules live in bloglist.services.

Error bodies:
    Every error is {"error": <code>, "message": <text>, "details", "request_id"}.
    Clients show "message"; "error" is a machine code such as "not_found".
"""
