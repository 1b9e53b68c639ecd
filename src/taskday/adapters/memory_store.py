"""In-memory task store adapter."""

import logging
import uuid
from dataclasses import replace
from datetime import date, time

from taskday.core.tasks import Task
from taskday.dispatch import MainThreadDispatcher
from taskday.ports.task_store import TaskListObserver

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """
    Task store backed by a dict.

    Implements TaskStore protocol. Every mutation and every load_tasks()
    re-emits the full collection to the observer, either directly or through
    a dispatcher when one is given.
    """

    def __init__(
        self,
        tasks: list[Task] | None = None,
        dispatcher: MainThreadDispatcher | None = None,
    ):
        self._tasks: dict[str, Task] = {}
        self._observer: TaskListObserver | None = None
        self._dispatcher = dispatcher
        self.selected_date: date | None = None
        for task in tasks or []:
            self._insert(task)

    def _insert(self, task: Task) -> Task:
        if not task.id:
            task = replace(task, id=uuid.uuid4().hex)
        self._tasks[task.id] = task
        return task

    def snapshot(self) -> list[Task]:
        """Full collection in insertion order."""
        return list(self._tasks.values())

    def _emit(self) -> None:
        if self._observer is None:
            return
        tasks = self.snapshot()
        if self._dispatcher is not None:
            self._dispatcher.post(self._observer, tasks)
        else:
            self._observer(tasks)

    def _changed(self) -> None:
        self._emit()

    def set_selected_date(self, target_date: date) -> None:
        self.selected_date = target_date

    def load_tasks(self) -> None:
        self._emit()

    def save_task(
        self, name: str, task_time: time | None, has_specific_time: bool, target_date: date
    ) -> None:
        if has_specific_time != (task_time is not None):
            raise ValueError("has_specific_time must match whether a time is given")
        task = self._insert(Task(id="", name=name, time=task_time, date=target_date))
        logger.debug(f"Saved task {task.id} on {target_date}")
        self._changed()

    def update_task(self, task_id: str, task: Task) -> None:
        if task_id not in self._tasks:
            logger.warning(f"Update for unknown task {task_id}, ignoring")
            return
        self._tasks[task_id] = replace(task, id=task_id)
        self._changed()

    def delete_task(self, task_id: str) -> None:
        if self._tasks.pop(task_id, None) is None:
            logger.warning(f"Delete for unknown task {task_id}, ignoring")
            return
        self._changed()

    def set_task_list_observer(self, observer: TaskListObserver) -> None:
        self._observer = observer
