from .envelope import ErrorResponse, TaskListResponse, TaskResponse
from .health import HealthResponse
from .task import TaskCreate, TaskUpdate

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "TaskCreate",
    "TaskListResponse",
    "TaskResponse",
    "TaskUpdate",
]
