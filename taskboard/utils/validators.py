# taskboard/utils/validators.py
"""
Input validation for task and label mutations.

Validation is pure: it either returns the parsed pydantic model or raises
ValidationError with a user-facing message. Nothing here touches the database.
"""

import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ValidationError as PydanticValidationError

from taskboard.models.task import TaskState
from taskboard.schemas.label import LabelCreate, LabelUpdate
from taskboard.schemas.task import TaskCreate, TaskUpdate
from taskboard.utils.errors import ValidationError

logger = logging.getLogger(__name__)


def _first_error_message(exc: PydanticValidationError) -> str:
    error = exc.errors()[0]
    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    field = ".".join(str(part) for part in error.get("loc", ()))
    return f"{field}: {error.get('msg')}" if field else error.get("msg", "Invalid input")


def _validate(model: Type[BaseModel], data: Dict[str, Any]) -> BaseModel:
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(_first_error_message(exc)) from exc


def validate_create_task_input(data: Dict[str, Any]) -> TaskCreate:
    return _validate(TaskCreate, data)


def validate_update_task_input(data: Dict[str, Any]) -> TaskUpdate:
    if not data:
        raise ValidationError("At least one field must be provided for update")
    return _validate(TaskUpdate, data)


def validate_create_label_input(data: Dict[str, Any]) -> LabelCreate:
    return _validate(LabelCreate, data)


def validate_update_label_input(data: Dict[str, Any]) -> LabelUpdate:
    if not data:
        raise ValidationError("At least one field must be provided for update")
    return _validate(LabelUpdate, data)


def normalize_status(status: Optional[str], strict: bool = False) -> Optional[str]:
    """Apply the status policy before validation.

    Lenient mode turns a missing or unknown status into "todo". Strict mode
    leaves the value alone so the validator rejects it.
    """
    if status in TaskState.values():
        return status
    if strict:
        return status
    if status is not None:
        logger.warning(f"Unknown task status {status!r}, falling back to 'todo'")
    return TaskState.TODO.value
