# tests/test_mapper.py

from datetime import datetime, timezone

import pytest

from taskboard.models import Label, Task
from taskboard.utils.dates import to_iso
from taskboard.utils.errors import MappingError
from taskboard.utils.mapper import map_label_row, map_task_row

MAY_FIRST = int(datetime(2023, 5, 1, 12, 0, tzinfo=timezone.utc).timestamp())


def test_state_becomes_status_for_every_state() -> None:
    for state in ("todo", "in_progress", "done", "cancelled"):
        row = {"id": "t1", "title": "x", "state": state, "created_at": MAY_FIRST, "updated_at": MAY_FIRST}
        assert map_task_row(row).status == state


def test_timestamps_are_iso_strings() -> None:
    row = Task(
        id="t1",
        title="x",
        state="done",
        description="desc",
        due_at=MAY_FIRST + 86400,
        created_at=MAY_FIRST,
        updated_at=MAY_FIRST + 60,
        closed_at=None,
    )

    out = map_task_row(row)

    assert out.created_at == "2023-05-01T12:00:00.000Z"
    assert out.updated_at == "2023-05-01T12:01:00.000Z"
    assert out.due_at == "2023-05-02T12:00:00.000Z"
    assert out.closed_at is None
    assert out.description == "desc"


def test_missing_fields_get_defaults() -> None:
    before = datetime.now(timezone.utc).replace(microsecond=0)

    out = map_task_row({"id": "t1", "title": "x", "state": "todo"})

    assert out.description is None
    assert out.due_at is None
    assert out.closed_at is None
    # created/updated fall back to "now" instead of null
    created = datetime.fromisoformat(out.created_at.replace("Z", "+00:00"))
    assert created >= before
    assert out.updated_at is not None


def test_none_row_is_rejected() -> None:
    with pytest.raises(MappingError):
        map_task_row(None)
    with pytest.raises(MappingError):
        map_label_row(None)


def test_label_row_mapping() -> None:
    out = map_label_row(Label(id=3, name="bug", color=None, created_at=MAY_FIRST))

    assert out.id == 3
    assert out.name == "bug"
    assert out.color is None
    assert out.created_at == "2023-05-01T12:00:00.000Z"


def test_to_iso_accepts_naive_datetimes_as_utc() -> None:
    assert to_iso(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05.000Z"
    assert to_iso(None) is None
