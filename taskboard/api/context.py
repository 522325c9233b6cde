# taskboard/api/context.py
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext

from taskboard.api.loaders import Loaders
from taskboard.services.label_queries import LabelQueries
from taskboard.services.task_link_queries import TaskLinkQueries
from taskboard.services.task_queries import TaskQueries


class GraphQLContext(BaseContext):
    """Everything a resolver may touch, bound to one request's session"""

    def __init__(self, db: Session):
        super().__init__()
        self.db = db
        self.tasks = TaskQueries(db)
        self.labels = LabelQueries(db)
        self.task_links = TaskLinkQueries(db)
        self.loaders = Loaders(self.tasks, self.labels, self.task_links)
