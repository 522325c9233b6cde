# taskboard/api/resolvers/comment.py
"""
Comment operations. There is no comments table yet: queries return nothing,
createComment echoes back an unsaved comment and update/delete return null.
"""

import random
from typing import List, Optional

import strawberry
from strawberry.types import Info

from taskboard.api.errors import NOT_FOUND, user_error
from taskboard.api.types import Comment, CreateCommentInput, Task, UpdateCommentInput
from taskboard.utils.dates import to_iso, unix_now


def resolve_comments(info: Info) -> List[Comment]:
    return []


def create_comment(info: Info, input: CreateCommentInput) -> Comment:
    task = info.context.tasks.get_task_by_id(input.task_id)
    if not task:
        raise user_error(f"Task with ID {input.task_id} not found", code=NOT_FOUND)

    return Comment(
        id=random.randint(1, 1000),
        content=input.content,
        created_at=to_iso(unix_now()),
        task=Task.from_row(task),
    )


def update_comment(info: Info, id: int, input: UpdateCommentInput) -> Optional[Comment]:
    return None


def delete_comment(info: Info, id: int) -> Optional[strawberry.ID]:
    return None
