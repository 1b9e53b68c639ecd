"""Ports - interfaces/protocols for external dependencies."""

from .task_store import TaskStore, TaskListObserver
from .task_view import TaskView
from .preferences import PreferenceStore

__all__ = [
    "TaskStore",
    "TaskListObserver",
    "TaskView",
    "PreferenceStore",
]
