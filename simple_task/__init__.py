"""SimpleTask: a two-screen Streamlit task list."""

from simple_task.models import Task
from simple_task.store import TaskStore

__all__ = ["Task", "TaskStore"]
