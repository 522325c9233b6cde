# taskboard/schemas/label.py
from pydantic import BaseModel, Field, field_validator
from typing import Optional

NAME_MAX_LENGTH = 50


def _check_name(v):
    if v is None or v.strip() == "":
        raise ValueError("Label name is required and cannot be empty")
    if len(v) > NAME_MAX_LENGTH:
        raise ValueError(f"Label name cannot exceed {NAME_MAX_LENGTH} characters")
    return v


class LabelCreate(BaseModel):
    name: Optional[str] = Field(default=None, validate_default=True)
    color: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v):
        return _check_name(v)


class LabelUpdate(BaseModel):
    name: Optional[str] = None
    color: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v):
        return _check_name(v)


class LabelOut(BaseModel):
    id: int
    name: str
    color: Optional[str] = None
    created_at: str
