# taskboard/services/task_link_queries.py
from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from taskboard.models import Task, TaskLink, TaskRelation

SUBTASK = TaskRelation.SUBTASK.value


class TaskLinkQueries:
    """Parent/child links between tasks.

    Links are not checked for cycles, and create_task_link does not stop a
    child from getting a second subtask parent. update_parent is the
    operation that keeps a single parent per child.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_child_tasks(self, parent_id: str) -> List[Task]:
        return (
            self.db.query(Task)
            .join(TaskLink, TaskLink.child_id == Task.id)
            .filter(TaskLink.parent_id == parent_id, TaskLink.relation == SUBTASK)
            .order_by(TaskLink.id)
            .all()
        )

    def get_child_tasks_by_parent_ids(self, parent_ids: Iterable[str]) -> Dict[str, List[Task]]:
        parent_ids = list(parent_ids)
        grouped: Dict[str, List[Task]] = {parent_id: [] for parent_id in parent_ids}
        if not parent_ids:
            return grouped
        rows = (
            self.db.query(TaskLink.parent_id, Task)
            .join(Task, Task.id == TaskLink.child_id)
            .filter(TaskLink.parent_id.in_(parent_ids), TaskLink.relation == SUBTASK)
            .order_by(TaskLink.id)
            .all()
        )
        for parent_id, task in rows:
            grouped[parent_id].append(task)
        return grouped

    def get_parent_task(self, child_id: str) -> Optional[Task]:
        return (
            self.db.query(Task)
            .join(TaskLink, TaskLink.parent_id == Task.id)
            .filter(TaskLink.child_id == child_id, TaskLink.relation == SUBTASK)
            .order_by(TaskLink.id)
            .first()
        )

    def get_parent_tasks_by_child_ids(self, child_ids: Iterable[str]) -> Dict[str, Optional[Task]]:
        child_ids = list(child_ids)
        parents: Dict[str, Optional[Task]] = {child_id: None for child_id in child_ids}
        if not child_ids:
            return parents
        rows = (
            self.db.query(TaskLink.child_id, Task)
            .join(Task, Task.id == TaskLink.parent_id)
            .filter(TaskLink.child_id.in_(child_ids), TaskLink.relation == SUBTASK)
            .order_by(TaskLink.id)
            .all()
        )
        for child_id, task in rows:
            # First link wins, same as get_parent_task
            if parents[child_id] is None:
                parents[child_id] = task
        return parents

    def create_task_link(self, parent_id: str, child_id: str, relation: str = SUBTASK) -> TaskLink:
        link = TaskLink(parent_id=parent_id, child_id=child_id, relation=relation)
        self.db.add(link)
        self.db.flush()
        return link

    def delete_task_link(self, child_id: str, relation: str = SUBTASK) -> int:
        removed = self.db.query(TaskLink).filter(
            TaskLink.child_id == child_id,
            TaskLink.relation == relation,
        ).delete()
        self.db.flush()
        return removed

    def delete_links_by_parent(self, parent_id: str) -> int:
        """Drop every link (any relation) where the task is the parent"""
        removed = self.db.query(TaskLink).filter(
            TaskLink.parent_id == parent_id,
        ).delete()
        self.db.flush()
        return removed

    def update_parent(self, child_id: str, new_parent_id: Optional[str]) -> Optional[TaskLink]:
        """Replace the subtask parent of child_id; None just detaches it"""
        self.delete_task_link(child_id, SUBTASK)

        if new_parent_id:
            return self.create_task_link(new_parent_id, child_id, SUBTASK)
        return None
