from typing import List, Optional

from pydantic import BaseModel

from ..errors import ErrorCode
from ..models import Task


class TaskResponse(BaseModel):
    success: bool = True
    data: Task


class TaskListResponse(BaseModel):
    success: bool = True
    data: List[Task]


class ErrorResponse(BaseModel):
    """Body of every failed request."""
    success: bool = False
    error: str
    code: Optional[ErrorCode] = None
