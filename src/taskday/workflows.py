"""Shared wiring between the CLI and the controller.

Builds the configured task store and preference store, and runs a
controller until the store has delivered its snapshots.
"""

import logging

from .adapters.file_preferences import FilePreferenceStore
from .adapters.file_store import FileTaskStore
from .adapters.firebase_store import FirebaseTaskStore
from .adapters.memory_store import InMemoryTaskStore
from .config import Config
from .controller import DayController
from .dispatch import MainThreadDispatcher
from .ports.task_store import TaskStore
from .ports.task_view import TaskView

logger = logging.getLogger(__name__)


def get_task_store(config: Config, dispatcher: MainThreadDispatcher) -> TaskStore:
    """Resolve the task store backend from config."""
    match config.store:
        case "firebase":
            return FirebaseTaskStore(
                config.firebase_database_url,
                dispatcher,
                auth=config.firebase_auth,
                path=config.firebase_path,
                timeout=config.request_timeout,
            )
        case "memory":
            return InMemoryTaskStore(dispatcher=dispatcher)
        case _:
            return FileTaskStore(config.tasks_path, dispatcher=dispatcher)


def get_preferences(config: Config) -> FilePreferenceStore:
    return FilePreferenceStore(config.preferences_path)


def open_day(config: Config, view: TaskView) -> tuple[DayController, MainThreadDispatcher]:
    """Build a started controller for the configured backends."""
    dispatcher = MainThreadDispatcher()
    store = get_task_store(config, dispatcher)
    controller = DayController(store, view, preferences=get_preferences(config), config=config)
    controller.start()
    return controller, dispatcher


def settle(controller: DayController, dispatcher: MainThreadDispatcher, timeout: float = 10.0) -> int:
    """Wait for in-flight store work, then deliver queued snapshots."""
    wait = getattr(controller.store, "wait", None)
    if wait is not None:
        wait(timeout)
    delivered = dispatcher.drain()
    logger.debug(f"Delivered {delivered} snapshot(s)")
    return delivered


def close(controller: DayController) -> None:
    closer = getattr(controller.store, "close", None)
    if closer is not None:
        closer()
