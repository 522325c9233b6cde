# taskboard/models/label.py
from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from taskboard.database import Base
from taskboard.utils.dates import unix_now


class Label(Base):
    __tablename__ = "labels"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    color = Column(String, nullable=True)
    created_at = Column(Integer, nullable=False, default=unix_now)

    task_links = relationship(
        "TaskLabel", back_populates="label", cascade="all", passive_deletes=True
    )

    def __repr__(self):
        return f"<Label(id={self.id}, name='{self.name}')>"


# Many-to-many association between tasks and labels
class TaskLabel(Base):
    __tablename__ = "task_labels"
    __table_args__ = (
        UniqueConstraint("task_id", "label_id", name="uq_task_labels_task_label"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(String, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    label_id = Column(Integer, ForeignKey("labels.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    task = relationship("Task", back_populates="label_links")
    label = relationship("Label", back_populates="task_links")
