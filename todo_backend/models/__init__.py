# Import every table model here so SQLModel.metadata sees them all on create_all()
from .task import Task, TaskStatus, TaskPriority
from .reminder import Reminder
from .label import Label

__all__ = ["Task", "TaskStatus", "TaskPriority", "Reminder", "Label"]
