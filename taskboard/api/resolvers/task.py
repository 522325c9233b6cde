# taskboard/api/resolvers/task.py
import logging
import uuid
from typing import List, Optional

import strawberry
from strawberry.types import Info

from taskboard.api.errors import validated
from taskboard.api.types import CreateTaskInput, Task, UpdateTaskInput, input_fields
from taskboard.config.settings import settings
from taskboard.database import transaction
from taskboard.models import TaskState
from taskboard.utils.dates import to_unix, unix_now
from taskboard.utils.validators import (
    normalize_status,
    validate_create_task_input,
    validate_update_task_input,
)

logger = logging.getLogger(__name__)


def _label_key(label_id: strawberry.ID) -> Optional[int]:
    try:
        return int(label_id)
    except (TypeError, ValueError):
        return None


# Queries

def resolve_tasks(
    info: Info,
    search: Optional[str] = None,
    parent_id: Optional[strawberry.ID] = None,
    label_id: Optional[strawberry.ID] = None,
) -> List[Task]:
    """All tasks, or one filter applied in order: search, parentId, labelId.

    Filters are never combined; the first one given wins.
    """
    ctx = info.context

    if search:
        rows = ctx.tasks.search_tasks(search)
    elif parent_id:
        rows = ctx.task_links.get_child_tasks(parent_id)
    elif label_id:
        key = _label_key(label_id)
        rows = ctx.tasks.get_tasks_by_label_id(key) if key is not None else []
    else:
        rows = ctx.tasks.get_all_tasks()

    return [Task.from_row(row) for row in rows]


def resolve_task(info: Info, id: strawberry.ID) -> Optional[Task]:
    row = info.context.tasks.get_task_by_id(id)
    return Task.from_row(row) if row else None


def resolve_tasks_by_status(info: Info, status: str) -> List[Task]:
    return [Task.from_row(row) for row in info.context.tasks.get_tasks_by_status(status)]


def resolve_overdue_tasks(info: Info) -> List[Task]:
    return [Task.from_row(row) for row in info.context.tasks.get_overdue_tasks()]


# Mutations

def create_task(info: Info, input: CreateTaskInput) -> Task:
    ctx = info.context

    data = input_fields(input)
    data["status"] = normalize_status(data.get("status"), strict=settings.STRICT_STATUS)
    payload = validated(validate_create_task_input, data)

    now = unix_now()
    new_task = {
        "id": str(uuid.uuid4()),
        "title": payload.title,
        "description": payload.description or None,
        "state": payload.status or TaskState.TODO.value,
        "due_at": to_unix(payload.due_at),
        "created_at": now,
        "updated_at": now,
        "closed_at": None,
    }

    # Task and its parent link land together or not at all; a row that
    # cannot be mapped is rolled back with them
    with transaction(ctx.db):
        ctx.tasks.create_task(new_task)
        if payload.parent_id:
            ctx.task_links.create_task_link(payload.parent_id, new_task["id"])
        created = Task.from_row(new_task)
    ctx.loaders.clear_all()

    logger.info(f"Task created with ID: {new_task['id']}")
    return created


def update_task(info: Info, id: strawberry.ID, input: UpdateTaskInput) -> Optional[Task]:
    ctx = info.context

    data = input_fields(input)
    if "status" in data:
        data["status"] = normalize_status(data["status"], strict=settings.STRICT_STATUS)
    payload = validated(validate_update_task_input, data)

    fields = payload.model_dump(exclude_unset=True)
    updates = {"updated_at": unix_now()}
    if "title" in fields:
        updates["title"] = fields["title"]
    if "description" in fields:
        updates["description"] = fields["description"]
    if "status" in fields:
        updates["state"] = fields["status"]
    if "due_at" in fields:
        updates["due_at"] = to_unix(fields["due_at"])

    with transaction(ctx.db):
        updated = ctx.tasks.update_task(id, updates)
        # parentId: null detaches the task, a value replaces its parent
        if updated is not None and "parent_id" in fields:
            ctx.task_links.update_parent(id, fields["parent_id"])
        result = Task.from_row(updated) if updated is not None else None
    ctx.loaders.clear_all()

    if result is None:
        logger.info(f"Task {id} not found for update")
        return None

    logger.info(f"Task {id} updated with fields: {sorted(fields)}")
    return result


def delete_task(info: Info, id: strawberry.ID) -> Optional[strawberry.ID]:
    ctx = info.context

    with transaction(ctx.db):
        deleted_id = ctx.tasks.delete_task(id)
        if deleted_id is not None:
            # Links where the task is the child, then where it is the parent
            ctx.task_links.delete_task_link(id)
            ctx.task_links.delete_links_by_parent(id)
    ctx.loaders.clear_all()

    if deleted_id is None:
        return None

    logger.info(f"Task {deleted_id} deleted")
    return strawberry.ID(deleted_id)
