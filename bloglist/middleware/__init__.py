# Middleware package init
"""
Bloglist API - Middleware Package
==================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Rate Limit] → [Access Log] → [CORS] → Route Handler

    The request id is assigned first so every response, a 429 or an
    unexpected 500 included, carries it in the body and the X-Request-ID
    header. Rate limiting follows, so rejected requests cost nothing else.
"""
