"""Firebase Realtime Database adapter - REST client for task storage."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from datetime import date, time

import requests

from taskday.core.tasks import Task
from taskday.dispatch import MainThreadDispatcher
from taskday.ports.task_store import TaskListObserver

logger = logging.getLogger(__name__)


class TaskStoreError(Exception):
    """Raised when a task store cannot be set up."""

    pass


class FirebaseTaskStore:
    """
    Firebase Realtime Database task store.

    Implements TaskStore protocol. HTTP calls run on a worker pool and every
    successful load is posted to the dispatcher as a full snapshot. Failed
    requests are logged and produce no snapshot. No business logic - just I/O.
    """

    def __init__(
        self,
        database_url: str,
        dispatcher: MainThreadDispatcher,
        auth: str = "",
        path: str = "tasks",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ):
        if not database_url:
            raise TaskStoreError(
                "FIREBASE_DATABASE_URL not configured. Add it to taskday.conf"
            )
        self.database_url = database_url.rstrip("/")
        self.path = path.strip("/")
        self.auth = auth
        self.timeout = timeout
        self.selected_date: date | None = None
        self._dispatcher = dispatcher
        self._session = session or requests.Session()
        self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="taskday-store")
        self._observer: TaskListObserver | None = None
        self._futures: list[Future] = []

    def _url(self, task_id: str = "") -> str:
        suffix = f"/{task_id}" if task_id else ""
        return f"{self.database_url}/{self.path}{suffix}.json"

    def _params(self) -> dict:
        return {"auth": self.auth} if self.auth else {}

    def _submit(self, fn, *args) -> Future:
        future = self._executor.submit(fn, *args)
        self._futures = [f for f in self._futures if not f.done()]
        future.add_done_callback(self._log_failure)
        self._futures.append(future)
        return future

    @staticmethod
    def _log_failure(future: Future) -> None:
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            logger.error("Task store request failed", exc_info=error)

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        resp = self._session.request(
            method, url, params=self._params(), timeout=self.timeout, **kwargs
        )
        resp.raise_for_status()
        return resp

    def fetch_all(self) -> list[Task]:
        """Fetch and decode the whole task collection (blocking)."""
        data = self._request("GET", self._url()).json() or {}
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object of tasks, got {type(data).__name__}")
        tasks = []
        for task_id, record in data.items():
            try:
                tasks.append(Task.from_record(task_id, record))
            except (ValueError, KeyError, TypeError) as e:
                logger.warning(f"Skipping malformed task {task_id}: {e}")
        return tasks

    def _load_and_emit(self) -> None:
        try:
            tasks = self.fetch_all()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Loading tasks failed: {e}")
            return
        logger.debug(f"Loaded {len(tasks)} tasks")
        if self._observer is not None:
            self._dispatcher.post(self._observer, tasks)

    def _mutate(self, method: str, url: str, payload: dict | None = None) -> None:
        try:
            resp = self._request(method, url, json=payload)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            return
        if method == "POST":
            logger.debug(f"Created task {resp.json().get('name')}")
        self._load_and_emit()

    def set_selected_date(self, target_date: date) -> None:
        self.selected_date = target_date

    def load_tasks(self) -> None:
        self._submit(self._load_and_emit)

    def save_task(
        self, name: str, task_time: time | None, has_specific_time: bool, target_date: date
    ) -> None:
        if has_specific_time != (task_time is not None):
            raise ValueError("has_specific_time must match whether a time is given")
        task = Task(id="", name=name, time=task_time, date=target_date)
        self._submit(self._mutate, "POST", self._url(), task.to_record())

    def update_task(self, task_id: str, task: Task) -> None:
        self._submit(self._mutate, "PUT", self._url(task_id), task.to_record())

    def delete_task(self, task_id: str) -> None:
        self._submit(self._mutate, "DELETE", self._url(task_id))

    def set_task_list_observer(self, observer: TaskListObserver) -> None:
        self._observer = observer

    def wait(self, timeout: float | None = None) -> None:
        """Block until in-flight requests finish."""
        wait(list(self._futures), timeout=timeout)

    def close(self) -> None:
        self._executor.shutdown(wait=True)
        self._session.close()
