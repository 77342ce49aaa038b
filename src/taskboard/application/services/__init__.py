from taskboard.application.services.authentication_service import (
    AuthenticationService,
)
from taskboard.application.services.profile_service import ProfileService
from taskboard.application.services.task_service import TaskService

__all__ = ["AuthenticationService", "ProfileService", "TaskService"]
