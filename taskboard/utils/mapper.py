# taskboard/utils/mapper.py
"""
Shapes persisted rows for the API.

Rows may be ORM instances or plain mappings (``create_task`` hands back the
dict it inserted). Stored Unix timestamps become ISO-8601 strings and the
``state`` column is exposed as ``status``.
"""

from collections.abc import Mapping
from typing import Any

from taskboard.schemas.label import LabelOut
from taskboard.schemas.task import TaskOut
from taskboard.utils.dates import to_iso, unix_now
from taskboard.utils.errors import MappingError


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def _iso_or_now(value) -> str:
    # created_at/updated_at are never null on the API side
    return to_iso(value if value is not None else unix_now())


def map_task_row(row: Any) -> TaskOut:
    if row is None:
        raise MappingError("Cannot map an empty task row")

    return TaskOut(
        id=_field(row, "id"),
        title=_field(row, "title"),
        status=_field(row, "state"),
        description=_field(row, "description"),
        created_at=_iso_or_now(_field(row, "created_at")),
        updated_at=_iso_or_now(_field(row, "updated_at")),
        due_at=to_iso(_field(row, "due_at")),
        closed_at=to_iso(_field(row, "closed_at")),
    )


def map_label_row(row: Any) -> LabelOut:
    if row is None:
        raise MappingError("Cannot map an empty label row")

    return LabelOut(
        id=_field(row, "id"),
        name=_field(row, "name"),
        color=_field(row, "color"),
        created_at=_iso_or_now(_field(row, "created_at")),
    )
