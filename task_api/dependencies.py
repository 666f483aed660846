from fastapi import Request

from .services import TaskService


def get_task_service(request: Request) -> TaskService:
    """Dependency returning the service created with the application."""
    return request.app.state.task_service
