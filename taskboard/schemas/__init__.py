from .task import TaskCreate, TaskUpdate, TaskOut
from .label import LabelCreate, LabelUpdate, LabelOut
