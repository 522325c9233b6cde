# taskboard/models/task.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from taskboard.database import Base
from taskboard.utils.dates import unix_now
import enum


class TaskState(str, enum.Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls):
        return [state.value for state in cls]


class TaskRelation(str, enum.Enum):
    SUBTASK = "subtask"
    BLOCKS = "blocks"
    DUPLICATES = "duplicates"
    RELATED = "related"


# States that no longer count towards overdue work
CLOSED_STATES = (TaskState.DONE.value, TaskState.CANCELLED.value)


class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint(
            "state IN ('todo', 'in_progress', 'done', 'cancelled')",
            name="ck_tasks_state",
        ),
    )

    # UUID string generated by the application
    id = Column(String, primary_key=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    state = Column(String, nullable=False, default=TaskState.TODO.value)

    # Unix seconds
    due_at = Column(Integer, nullable=True)
    created_at = Column(Integer, nullable=False, default=unix_now)
    updated_at = Column(Integer, nullable=False, default=unix_now)
    closed_at = Column(Integer, nullable=True)

    # Association rows go away with the task (the FKs cascade as well)
    label_links = relationship(
        "TaskLabel", back_populates="task", cascade="all", passive_deletes=True
    )
    child_links = relationship(
        "TaskLink",
        foreign_keys="TaskLink.parent_id",
        back_populates="parent",
        cascade="all",
        passive_deletes=True,
    )
    parent_links = relationship(
        "TaskLink",
        foreign_keys="TaskLink.child_id",
        back_populates="child",
        cascade="all",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Task(id='{self.id}', title='{self.title}', state='{self.state}')>"


class TaskLink(Base):
    __tablename__ = "task_links"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    parent_id = Column(String, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    child_id = Column(String, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    relation = Column(String, nullable=False)  # subtask, blocks, duplicates, related

    # Relationships
    parent = relationship("Task", foreign_keys=[parent_id], back_populates="child_links")
    child = relationship("Task", foreign_keys=[child_id], back_populates="parent_links")
