# taskboard/schemas/task.py
from pydantic import BaseModel, Field, field_validator
from datetime import datetime, timezone
from typing import Optional

from taskboard.models.task import TaskState
from taskboard.utils.dates import parse_iso_datetime, to_iso, to_unix

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000

INVALID_STATUS_MESSAGE = (
    "Invalid task status. Must be one of: " + ", ".join(TaskState.values())
)
INVALID_DUE_DATE_MESSAGE = (
    'Invalid due date format. Please use ISO 8601 format (e.g., "2023-05-01T12:00:00Z")'
)


def _check_title_length(v: str) -> str:
    if len(v) > TITLE_MAX_LENGTH:
        raise ValueError(f"Task title cannot exceed {TITLE_MAX_LENGTH} characters")
    return v


def _check_description(v: Optional[str]) -> Optional[str]:
    if v and len(v) > DESCRIPTION_MAX_LENGTH:
        raise ValueError(f"Task description cannot exceed {DESCRIPTION_MAX_LENGTH} characters")
    return v


def _check_status(v):
    if v not in TaskState.values():
        raise ValueError(INVALID_STATUS_MESSAGE)
    return v


def _parse_due_at(v):
    if v is None or v == "":
        return None
    try:
        parsed = parse_iso_datetime(v).astimezone(timezone.utc)
        # Must survive storage as Unix seconds and display as ISO
        to_iso(to_unix(parsed))
    except (TypeError, ValueError, OverflowError, OSError):
        raise ValueError(INVALID_DUE_DATE_MESSAGE)
    return parsed


class TaskCreate(BaseModel):
    title: Optional[str] = Field(default=None, validate_default=True)
    description: Optional[str] = None
    status: Optional[str] = None
    parent_id: Optional[str] = None
    due_at: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def title_required(cls, v):
        if v is None or v.strip() == "":
            raise ValueError("Task title is required and cannot be empty")
        return _check_title_length(v)

    @field_validator("description")
    @classmethod
    def description_length(cls, v):
        return _check_description(v)

    @field_validator("status")
    @classmethod
    def status_known(cls, v):
        # Absent status is defaulted by the resolver
        if v is None:
            return v
        return _check_status(v)

    @field_validator("due_at", mode="before")
    @classmethod
    def due_at_parses(cls, v):
        return _parse_due_at(v)


class TaskUpdate(BaseModel):
    """Partial update; only fields the caller sent are applied (exclude_unset)"""

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    parent_id: Optional[str] = None
    due_at: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v):
        if v is None or v.strip() == "":
            raise ValueError("Task title cannot be empty")
        return _check_title_length(v)

    @field_validator("description")
    @classmethod
    def description_length(cls, v):
        return _check_description(v)

    @field_validator("status")
    @classmethod
    def status_known(cls, v):
        return _check_status(v)

    @field_validator("due_at", mode="before")
    @classmethod
    def due_at_parses(cls, v):
        return _parse_due_at(v)


# API-facing task shape produced by the mapper
class TaskOut(BaseModel):
    id: str
    title: str
    status: str
    description: Optional[str] = None
    created_at: str
    updated_at: str
    due_at: Optional[str] = None
    closed_at: Optional[str] = None
