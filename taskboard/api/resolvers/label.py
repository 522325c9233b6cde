# taskboard/api/resolvers/label.py
import logging
from typing import List, Optional

import strawberry
from strawberry.types import Info

from taskboard.api.errors import validated
from taskboard.api.types import CreateLabelInput, Label, Task, UpdateLabelInput, input_fields
from taskboard.database import transaction
from taskboard.utils.dates import unix_now
from taskboard.utils.validators import validate_create_label_input, validate_update_label_input

logger = logging.getLogger(__name__)


def resolve_labels(info: Info) -> List[Label]:
    return [Label.from_row(row) for row in info.context.labels.get_all_labels()]


def resolve_label(info: Info, id: int) -> Optional[Label]:
    row = info.context.labels.get_label_by_id(id)
    return Label.from_row(row) if row else None


def create_label(info: Info, input: CreateLabelInput) -> Label:
    ctx = info.context
    payload = validated(validate_create_label_input, input_fields(input))

    with transaction(ctx.db):
        label = ctx.labels.create_label({
            "name": payload.name,
            "color": payload.color or None,
            "created_at": unix_now(),
        })
    ctx.loaders.clear_all()

    logger.info(f"Label created with ID: {label.id}")
    return Label.from_row(label)


def update_label(info: Info, id: int, input: UpdateLabelInput) -> Optional[Label]:
    ctx = info.context
    payload = validated(validate_update_label_input, input_fields(input))

    with transaction(ctx.db):
        label = ctx.labels.update_label(id, payload.model_dump(exclude_unset=True))
    ctx.loaders.clear_all()

    return Label.from_row(label) if label else None


def delete_label(info: Info, id: int) -> Optional[strawberry.ID]:
    ctx = info.context

    # task_labels rows follow through the FK cascade
    with transaction(ctx.db):
        deleted_id = ctx.labels.delete_label(id)
    ctx.loaders.clear_all()

    if deleted_id is None:
        return None

    logger.info(f"Label {deleted_id} deleted")
    return strawberry.ID(str(deleted_id))


def add_task_label(info: Info, task_id: strawberry.ID, label_id: int) -> Optional[Task]:
    ctx = info.context

    task = ctx.tasks.get_task_by_id(task_id)
    label = ctx.labels.get_label_by_id(label_id)
    if not task or not label:
        return None

    with transaction(ctx.db):
        ctx.labels.add_task_label(task_id, label_id)
    ctx.loaders.clear_all()

    return Task.from_row(task)


def remove_task_label(info: Info, task_id: strawberry.ID, label_id: int) -> Optional[Task]:
    ctx = info.context

    task = ctx.tasks.get_task_by_id(task_id)
    if not task:
        return None

    with transaction(ctx.db):
        ctx.labels.remove_task_label(task_id, label_id)
    ctx.loaders.clear_all()

    return Task.from_row(task)
