# taskboard/services/label_queries.py
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from taskboard.models import Label, TaskLabel


class LabelQueries:
    """Data access for labels and the task_labels association"""

    def __init__(self, db: Session):
        self.db = db

    def get_all_labels(self) -> List[Label]:
        return self.db.query(Label).all()

    def get_label_by_id(self, label_id: int) -> Optional[Label]:
        return self.db.query(Label).filter(Label.id == label_id).first()

    def get_labels_by_task_id(self, task_id: str) -> List[Label]:
        # One join instead of a lookup per association row
        return (
            self.db.query(Label)
            .join(TaskLabel, TaskLabel.label_id == Label.id)
            .filter(TaskLabel.task_id == task_id)
            .order_by(TaskLabel.id)
            .all()
        )

    def get_labels_by_task_ids(self, task_ids: Iterable[str]) -> Dict[str, List[Label]]:
        task_ids = list(task_ids)
        grouped: Dict[str, List[Label]] = {task_id: [] for task_id in task_ids}
        if not task_ids:
            return grouped
        rows = (
            self.db.query(TaskLabel.task_id, Label)
            .join(Label, Label.id == TaskLabel.label_id)
            .filter(TaskLabel.task_id.in_(task_ids))
            .order_by(TaskLabel.id)
            .all()
        )
        for task_id, label in rows:
            grouped[task_id].append(label)
        return grouped

    def create_label(self, data: Dict[str, Any]) -> Label:
        label = Label(**data)
        self.db.add(label)
        self.db.flush()
        self.db.refresh(label)
        return label

    def update_label(self, label_id: int, update_data: Dict[str, Any]) -> Optional[Label]:
        label = self.get_label_by_id(label_id)
        if not label:
            return None

        for key, value in update_data.items():
            setattr(label, key, value)

        self.db.flush()
        self.db.refresh(label)
        return label

    def delete_label(self, label_id: int) -> Optional[int]:
        label = self.get_label_by_id(label_id)
        if not label:
            return None

        self.db.delete(label)
        self.db.flush()
        return label_id

    def get_task_label(self, task_id: str, label_id: int) -> Optional[TaskLabel]:
        return self.db.query(TaskLabel).filter(
            TaskLabel.task_id == task_id,
            TaskLabel.label_id == label_id,
        ).first()

    def add_task_label(self, task_id: str, label_id: int) -> TaskLabel:
        """Attach a label to a task; an existing association is returned as-is"""
        existing = self.get_task_label(task_id, label_id)
        if existing:
            return existing

        link = TaskLabel(task_id=task_id, label_id=label_id)
        self.db.add(link)
        self.db.flush()
        return link

    def remove_task_label(self, task_id: str, label_id: int) -> int:
        removed = self.db.query(TaskLabel).filter(
            TaskLabel.task_id == task_id,
            TaskLabel.label_id == label_id,
        ).delete()
        self.db.flush()
        return removed
