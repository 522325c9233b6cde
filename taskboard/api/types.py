# taskboard/api/types.py
import dataclasses
from typing import Any, Dict, List, Optional

import strawberry
from strawberry.types import Info

from taskboard.utils.mapper import map_label_row, map_task_row


def input_fields(data: Any) -> Dict[str, Any]:
    """Fields the client actually sent; an explicit null is kept, an omitted field is not"""
    return {
        field.name: getattr(data, field.name)
        for field in dataclasses.fields(data)
        if getattr(data, field.name) is not strawberry.UNSET
    }


@strawberry.type
class Task:
    id: strawberry.ID
    title: str
    status: str
    description: Optional[str]
    created_at: str
    updated_at: str
    due_at: Optional[str]
    closed_at: Optional[str]

    @classmethod
    def from_row(cls, row: Any) -> "Task":
        return cls(**map_task_row(row).model_dump())

    @strawberry.field
    async def parent(self, info: Info) -> Optional["Task"]:
        row = await info.context.loaders.parent_by_child_id.load(self.id)
        return Task.from_row(row) if row is not None else None

    @strawberry.field
    async def children(self, info: Info) -> List["Task"]:
        rows = await info.context.loaders.children_by_parent_id.load(self.id)
        return [Task.from_row(row) for row in rows]

    @strawberry.field
    async def labels(self, info: Info) -> List["Label"]:
        rows = await info.context.loaders.labels_by_task_id.load(self.id)
        return [Label.from_row(row) for row in rows]

    @strawberry.field
    def comments(self) -> List["Comment"]:
        # Comments have no storage yet
        return []


@strawberry.type
class Label:
    id: int
    name: str
    color: Optional[str]
    created_at: str

    @classmethod
    def from_row(cls, row: Any) -> "Label":
        return cls(**map_label_row(row).model_dump())

    @strawberry.field
    async def tasks(self, info: Info) -> List[Task]:
        rows = await info.context.loaders.tasks_by_label_id.load(self.id)
        return [Task.from_row(row) for row in rows]


@strawberry.type
class Comment:
    """Not persisted; only createComment ever produces one"""

    id: int
    content: str
    created_at: str
    task: Task


@strawberry.input
class CreateTaskInput:
    title: str
    description: Optional[str] = strawberry.UNSET
    status: Optional[str] = strawberry.UNSET
    parent_id: Optional[strawberry.ID] = strawberry.UNSET
    due_at: Optional[str] = strawberry.UNSET


@strawberry.input
class UpdateTaskInput:
    title: Optional[str] = strawberry.UNSET
    description: Optional[str] = strawberry.UNSET
    status: Optional[str] = strawberry.UNSET
    parent_id: Optional[strawberry.ID] = strawberry.UNSET
    due_at: Optional[str] = strawberry.UNSET


@strawberry.input
class CreateLabelInput:
    name: str
    color: Optional[str] = strawberry.UNSET


@strawberry.input
class UpdateLabelInput:
    name: Optional[str] = strawberry.UNSET
    color: Optional[str] = strawberry.UNSET


@strawberry.input
class CreateCommentInput:
    task_id: strawberry.ID
    content: str


@strawberry.input
class UpdateCommentInput:
    content: str
