"""
FastAPI dependencies for request processing.

Dependencies provide reusable objects that are injected into API endpoints,
and can be swapped out in tests through `app.dependency_overrides`.
"""
