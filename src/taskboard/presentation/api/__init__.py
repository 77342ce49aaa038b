"""REST API presentation layer for Taskboard.

Structure:
    api/
    ├── app.py                # FastAPI application factory and startup policy
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Error taxonomy to HTTP responses
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from taskboard.presentation.api.app import create_app

__all__ = ["create_app"]
