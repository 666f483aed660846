import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .errors import ErrorCode, TaskApiError, TaskValidationError
from .routers import tasks
from .schemas import ErrorResponse, HealthResponse
from .schemas.health import HealthCheck
from .services import TaskService

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

_LOCATION_ROOTS = ("body", "path", "query")


def _error_response(status_code: int, message: str, code: Optional[ErrorCode] = None) -> JSONResponse:
    body = ErrorResponse(error=message, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))


def _validation_message(errors: Sequence[Dict[str, Any]]) -> str:
    """Describe the first pydantic error in one line, e.g. ``title is required``."""
    if not errors:
        return "Invalid request"
    error = errors[0]
    error_type = error.get("type")
    if error_type == "json_invalid":
        return "Invalid JSON body"

    fields: List[str] = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_ROOTS]
    if not fields:
        if error_type == "missing":
            return "request body is required"
        return "request body must be a JSON object"

    field = ".".join(fields)
    if error_type == "missing":
        return f"{field} is required"
    ctx_error = (error.get("ctx") or {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    return f"{field}: {error.get('msg', 'invalid value')}"


async def task_api_error_handler(request: Request, exc: TaskApiError) -> JSONResponse:
    logger.warning("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    return _error_response(exc.status_code, exc.message, exc.code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await task_api_error_handler(request, TaskValidationError(_validation_message(exc.errors())))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = ErrorCode.NOT_FOUND if exc.status_code == status.HTTP_404_NOT_FOUND else None
    response = _error_response(exc.status_code, str(exc.detail), code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        ErrorCode.INTERNAL_ERROR,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 %s %s starting", config.APP_NAME, config.APP_VERSION)
    yield
    logger.info("👋 %s shutting down (%d tasks in memory)", config.APP_NAME, app.state.task_service.task_count)


def create_app(task_service: Optional[TaskService] = None) -> FastAPI:
    """Build the application around a task service (a fresh one by default)."""
    app = FastAPI(
        title=config.APP_NAME,
        description="In-memory task tracking API",
        version=config.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.task_service = task_service if task_service is not None else TaskService()
    app.state.started_at = time.monotonic()

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials="*" not in config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TaskApiError, task_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(tasks.router)

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health_check(request: Request):
        service: TaskService = request.app.state.task_service
        return HealthResponse(
            timestamp=datetime.now(timezone.utc),
            version=config.APP_VERSION,
            uptime=round(time.monotonic() - request.app.state.started_at, 3),
            checks={"store": HealthCheck(tasks=service.task_count)},
        )

    return app


app = create_app()
