"""File-based task store adapter."""

import json
import logging
from pathlib import Path

from taskday.core.tasks import Task
from taskday.dispatch import MainThreadDispatcher

from .memory_store import InMemoryTaskStore

logger = logging.getLogger(__name__)


class FileTaskStore(InMemoryTaskStore):
    """
    Task store persisted to a single JSON file.

    Implements TaskStore protocol. The file holds {task_id: record} using the
    same record layout as the remote database.
    """

    def __init__(self, path: Path | str, dispatcher: MainThreadDispatcher | None = None):
        self.path = Path(path).expanduser()
        super().__init__(self._read(), dispatcher=dispatcher)

    def _read(self) -> list[Task]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable task file {self.path}: {e}")
            return []
        if not isinstance(data, dict):
            logger.warning(f"Ignoring task file {self.path}: expected an object of tasks")
            return []

        tasks = []
        for task_id, record in data.items():
            try:
                tasks.append(Task.from_record(task_id, record))
            except (ValueError, KeyError, TypeError) as e:
                logger.warning(f"Skipping malformed task {task_id}: {e}")
        return tasks

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {t.id: t.to_record() for t in self.snapshot()}
        self.path.write_text(json.dumps(data, indent=2))

    def _changed(self) -> None:
        self._write()
        super()._changed()
