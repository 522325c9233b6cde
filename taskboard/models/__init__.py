from .task import Task, TaskLink, TaskState, TaskRelation, CLOSED_STATES
from .label import Label, TaskLabel
