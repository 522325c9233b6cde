# taskboard/api/schema.py
from typing import List, Optional

import strawberry
from strawberry.extensions import MaskErrors

from taskboard.api.errors import should_mask_error
from taskboard.api.resolvers import comment as comment_resolvers
from taskboard.api.resolvers import label as label_resolvers
from taskboard.api.resolvers import task as task_resolvers
from taskboard.api.types import Comment, Label, Task


@strawberry.type
class Query:
    tasks: List[Task] = strawberry.field(resolver=task_resolvers.resolve_tasks)
    task: Optional[Task] = strawberry.field(resolver=task_resolvers.resolve_task)
    tasks_by_status: List[Task] = strawberry.field(resolver=task_resolvers.resolve_tasks_by_status)
    overdue_tasks: List[Task] = strawberry.field(resolver=task_resolvers.resolve_overdue_tasks)

    labels: List[Label] = strawberry.field(resolver=label_resolvers.resolve_labels)
    label: Optional[Label] = strawberry.field(resolver=label_resolvers.resolve_label)

    comments: List[Comment] = strawberry.field(resolver=comment_resolvers.resolve_comments)


@strawberry.type
class Mutation:
    create_task: Task = strawberry.mutation(resolver=task_resolvers.create_task)
    update_task: Optional[Task] = strawberry.mutation(resolver=task_resolvers.update_task)
    delete_task: Optional[strawberry.ID] = strawberry.mutation(resolver=task_resolvers.delete_task)

    create_label: Label = strawberry.mutation(resolver=label_resolvers.create_label)
    update_label: Optional[Label] = strawberry.mutation(resolver=label_resolvers.update_label)
    delete_label: Optional[strawberry.ID] = strawberry.mutation(resolver=label_resolvers.delete_label)
    add_task_label: Optional[Task] = strawberry.mutation(resolver=label_resolvers.add_task_label)
    remove_task_label: Optional[Task] = strawberry.mutation(resolver=label_resolvers.remove_task_label)

    create_comment: Comment = strawberry.mutation(resolver=comment_resolvers.create_comment)
    update_comment: Optional[Comment] = strawberry.mutation(resolver=comment_resolvers.update_comment)
    delete_comment: Optional[strawberry.ID] = strawberry.mutation(resolver=comment_resolvers.delete_comment)


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    extensions=[MaskErrors(should_mask_error=should_mask_error)],
)
