from taskboard.presentation.api.routers.auth import router as auth_router
from taskboard.presentation.api.routers.profile import router as profile_router
from taskboard.presentation.api.routers.status import router as status_router
from taskboard.presentation.api.routers.tasks import router as tasks_router

__all__ = [
    "auth_router",
    "profile_router",
    "status_router",
    "tasks_router",
]
