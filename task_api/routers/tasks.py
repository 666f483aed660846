from typing import Optional

from fastapi import APIRouter, Body, Depends, Response, status

from ..dependencies import get_task_service
from ..schemas import ErrorResponse, TaskCreate, TaskListResponse, TaskResponse, TaskUpdate
from ..services import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Task not found"}}
VALIDATION_RESPONSE = {400: {"model": ErrorResponse, "description": "Invalid request body"}}


@router.get("", response_model=TaskListResponse)
def list_tasks(service: TaskService = Depends(get_task_service)):
    """List all tasks in creation order."""
    return TaskListResponse(data=service.list_tasks())


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses=VALIDATION_RESPONSE,
)
def create_task(
    task: TaskCreate,
    service: TaskService = Depends(get_task_service),
):
    """Create a new task."""
    return TaskResponse(data=service.create_task(task))


@router.get("/{task_id}", response_model=TaskResponse, responses=NOT_FOUND_RESPONSE)
def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """Get a specific task by ID."""
    return TaskResponse(data=service.get_task(task_id))


@router.patch(
    "/{task_id}",
    response_model=TaskResponse,
    responses={**NOT_FOUND_RESPONSE, **VALIDATION_RESPONSE},
)
def update_task(
    task_id: str,
    task_update: Optional[TaskUpdate] = Body(default=None),
    service: TaskService = Depends(get_task_service),
):
    """Partially update a task. Only the provided fields change."""
    return TaskResponse(data=service.update_task(task_id, task_update))


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """Delete a specific task."""
    service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
