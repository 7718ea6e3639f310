# todoapp/models.py
"""Task table model and the wire schemas exchanged with clients."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField, field_validator
from pydantic.alias_generators import to_camel
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

BLANK_DESCRIPTION_MESSAGE = "Task description cant be empty"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalise to UTC, reading timestamps without an offset as UTC already."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Priority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Task(SQLModel, table=True):
    """Task database table."""
    id: Optional[int] = Field(default=None, primary_key=True)
    description: str = Field(index=True)
    is_reminder_set: bool = Field(default=False)
    is_task_open: bool = Field(default=True)
    created_on: datetime = Field(
        default_factory=_utcnow, sa_type=DateTime(timezone=True)
    )
    priority: Priority = Field(default=Priority.LOW)


class _WireModel(BaseModel):
    """Base for JSON schemas: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _require_text(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError(BLANK_DESCRIPTION_MESSAGE)
    return value


class TaskDTO(_WireModel):
    """Read-only projection of a Task returned to clients."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    description: str
    is_reminder_set: bool = False
    is_task_open: bool = True
    created_on: datetime
    priority: Priority = Priority.LOW

    @field_validator("created_on")
    @classmethod
    def created_on_utc(cls, v: datetime) -> datetime:
        return _as_utc(v)


class TaskCreateRequest(_WireModel):
    """Schema for creating a task. Description is required, rest have defaults."""
    description: str = PydanticField(..., description="Unique, non-blank task text")
    is_reminder_set: bool = False
    is_task_open: bool = True
    created_on: datetime = PydanticField(default_factory=_utcnow)
    priority: Priority = Priority.LOW

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: str) -> str:
        return _require_text(v)

    @field_validator("created_on")
    @classmethod
    def created_on_utc(cls, v: datetime) -> datetime:
        return _as_utc(v)


class TaskUpdateRequest(_WireModel):
    """Schema for patching a task. Every field is optional; None means absent."""
    description: Optional[str] = None
    is_reminder_set: Optional[bool] = None
    is_task_open: Optional[bool] = None
    created_on: Optional[datetime] = None
    priority: Optional[Priority] = None

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _require_text(v)

    @field_validator("created_on")
    @classmethod
    def created_on_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(v)

    def changes(self) -> dict[str, Any]:
        """Return only the fields the client actually supplied, keyed by attribute name."""
        return self.model_dump(exclude_none=True)
