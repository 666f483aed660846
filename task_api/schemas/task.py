from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _as_text(value: Any) -> str:
    """Render a JSON value as text the way a browser client would."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if item is None else _as_text(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def _is_truthy(value: Any) -> bool:
    # objects and arrays are truthy even when empty
    if isinstance(value, (dict, list)):
        return True
    return bool(value)


class TaskCreate(BaseModel):
    """Schema for creating new tasks.

    ``title`` must be a non-blank string and is stored trimmed. A
    ``description`` that is not a string falls back to ``""``.
    """
    model_config = ConfigDict(extra="ignore")

    title: str
    description: str = ""

    @field_validator("title", mode="before")
    @classmethod
    def _require_title(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("title is required")
        return value.strip()

    @field_validator("description", mode="before")
    @classmethod
    def _default_description(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""


class TaskUpdate(BaseModel):
    """Schema for partially updating existing tasks.

    Provided fields are coerced rather than rejected: ``title`` and
    ``description`` become strings, ``completed`` becomes a boolean by
    truthiness. Only fields present in the body count as provided, so an
    explicit ``null`` still overwrites (``completed: null`` means false).
    """
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> str:
        title = _as_text(value).strip()
        if not title:
            raise ValueError("title must not be blank")
        return title

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("completed", mode="before")
    @classmethod
    def _coerce_completed(cls, value: Any) -> bool:
        return _is_truthy(value)
