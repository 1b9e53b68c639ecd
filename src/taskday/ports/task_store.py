"""Task store interface."""

from datetime import date, time
from typing import Callable, Protocol

from taskday.core.tasks import Task

TaskListObserver = Callable[[list[Task]], None]


class TaskStore(Protocol):
    """Interface for persisting tasks and pushing full-collection snapshots."""

    def set_selected_date(self, target_date: date) -> None:
        """Set the date the store's queries are scoped to."""
        ...

    def load_tasks(self) -> None:
        """(Re)fetch tasks. Completion is signalled through the observer."""
        ...

    def save_task(
        self, name: str, task_time: time | None, has_specific_time: bool, target_date: date
    ) -> None:
        """Create a task. The store assigns its id."""
        ...

    def update_task(self, task_id: str, task: Task) -> None:
        """Replace the task stored under task_id."""
        ...

    def delete_task(self, task_id: str) -> None:
        """Delete the task stored under task_id."""
        ...

    def set_task_list_observer(self, observer: TaskListObserver) -> None:
        """Register the single handler that receives full snapshots."""
        ...
