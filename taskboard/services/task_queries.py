# taskboard/services/task_queries.py
import uuid
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from taskboard.models import Task, TaskLabel, CLOSED_STATES
from taskboard.utils.dates import unix_now


class TaskQueries:
    """Data access for the tasks table. Writes flush; the caller commits."""

    def __init__(self, db: Session):
        self.db = db

    def get_all_tasks(self) -> List[Task]:
        return self.db.query(Task).all()

    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        return self.db.query(Task).filter(Task.id == task_id).first()

    def search_tasks(self, term: str) -> List[Task]:
        """Tasks whose title contains term; case sensitivity follows the datastore"""
        return self.db.query(Task).filter(Task.title.contains(term, autoescape=True)).all()

    def get_tasks_by_status(self, state: str) -> List[Task]:
        return self.db.query(Task).filter(Task.state == state).all()

    def get_overdue_tasks(self, now: Optional[int] = None) -> List[Task]:
        now = unix_now() if now is None else now
        return self.db.query(Task).filter(
            Task.due_at < now,
            Task.state.notin_(CLOSED_STATES),
        ).all()

    def get_tasks_by_label_id(self, label_id: int) -> List[Task]:
        return (
            self.db.query(Task)
            .join(TaskLabel, TaskLabel.task_id == Task.id)
            .filter(TaskLabel.label_id == label_id)
            .order_by(TaskLabel.id)
            .all()
        )

    def get_tasks_by_label_ids(self, label_ids: Iterable[int]) -> Dict[int, List[Task]]:
        label_ids = list(label_ids)
        grouped: Dict[int, List[Task]] = {label_id: [] for label_id in label_ids}
        if not label_ids:
            return grouped
        rows = (
            self.db.query(TaskLabel.label_id, Task)
            .join(Task, Task.id == TaskLabel.task_id)
            .filter(TaskLabel.label_id.in_(label_ids))
            .order_by(TaskLabel.id)
            .all()
        )
        for label_id, task in rows:
            grouped[label_id].append(task)
        return grouped

    def create_task(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a fully populated row and hand the input back (no re-read)"""
        if not data.get("id"):
            data["id"] = str(uuid.uuid4())
        self.db.add(Task(**data))
        self.db.flush()
        return data

    def update_task(self, task_id: str, update_data: Dict[str, Any]) -> Optional[Task]:
        task = self.get_task_by_id(task_id)
        if not task:
            return None

        for key, value in update_data.items():
            setattr(task, key, value)

        self.db.flush()
        self.db.refresh(task)
        return task

    def delete_task(self, task_id: str) -> Optional[str]:
        task = self.get_task_by_id(task_id)
        if not task:
            return None

        self.db.delete(task)
        self.db.flush()
        return task_id
