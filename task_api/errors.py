from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable codes carried in the error envelope."""
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class TaskApiError(Exception):
    """Base error that maps onto an HTTP status and an error envelope."""

    status_code = 500
    code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskApiError):
    status_code = 400
    code = ErrorCode.VALIDATION_ERROR


class TaskNotFoundError(TaskApiError):
    status_code = 404
    code = ErrorCode.NOT_FOUND

    def __init__(self, task_id: str):
        super().__init__("Task not found")
        self.task_id = task_id
