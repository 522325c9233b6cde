# taskboard/api/loaders.py
"""
Per-request DataLoaders for nested Task/Label fields.

Each loader collects the keys requested during one event-loop tick and
resolves them with a single IN query instead of one query per parent row.
"""

from typing import List, Optional

from strawberry.dataloader import DataLoader

from taskboard.models import Label, Task
from taskboard.services.label_queries import LabelQueries
from taskboard.services.task_link_queries import TaskLinkQueries
from taskboard.services.task_queries import TaskQueries


class Loaders:
    def __init__(self, tasks: TaskQueries, labels: LabelQueries, task_links: TaskLinkQueries):
        self._tasks = tasks
        self._labels = labels
        self._task_links = task_links

        self.labels_by_task_id = DataLoader(load_fn=self._load_labels_by_task_id)
        self.tasks_by_label_id = DataLoader(load_fn=self._load_tasks_by_label_id)
        self.children_by_parent_id = DataLoader(load_fn=self._load_children_by_parent_id)
        self.parent_by_child_id = DataLoader(load_fn=self._load_parent_by_child_id)

    def clear_all(self) -> None:
        """Forget cached results; mutations call this after they commit"""
        for loader in (
            self.labels_by_task_id,
            self.tasks_by_label_id,
            self.children_by_parent_id,
            self.parent_by_child_id,
        ):
            loader.clear_all()

    async def _load_labels_by_task_id(self, task_ids: List[str]) -> List[List[Label]]:
        grouped = self._labels.get_labels_by_task_ids(task_ids)
        return [grouped[task_id] for task_id in task_ids]

    async def _load_tasks_by_label_id(self, label_ids: List[int]) -> List[List[Task]]:
        grouped = self._tasks.get_tasks_by_label_ids(label_ids)
        return [grouped[label_id] for label_id in label_ids]

    async def _load_children_by_parent_id(self, parent_ids: List[str]) -> List[List[Task]]:
        grouped = self._task_links.get_child_tasks_by_parent_ids(parent_ids)
        return [grouped[parent_id] for parent_id in parent_ids]

    async def _load_parent_by_child_id(self, child_ids: List[str]) -> List[Optional[Task]]:
        parents = self._task_links.get_parent_tasks_by_child_ids(child_ids)
        return [parents[child_id] for child_id in child_ids]
