"""Selected-date controller - wires the store, the day view and the dialogs."""

import logging
from datetime import date

from .config import PREFERENCES_NAMESPACE, SELECTED_DATE_KEY, Config
from .core.calendar import format_date_label, week_strip
from .core.tasks import Task, TaskRow, materialize_day
from .dialogs import NewTaskResult, PopupPayload, PopupResult
from .ports.preferences import PreferenceStore
from .ports.task_store import TaskStore
from .ports.task_view import TaskView

logger = logging.getLogger(__name__)


class DayController:
    """
    Holds the selected date and keeps the day view in sync with the store.

    All methods are expected to run on one thread. Snapshots from the store
    arrive through on_snapshot() and are always filtered against the date
    selected at the moment they arrive.
    """

    def __init__(
        self,
        store: TaskStore,
        view: TaskView,
        preferences: PreferenceStore | None = None,
        config: Config | None = None,
        today: date | None = None,
    ):
        self.store = store
        self.view = view
        self.preferences = preferences
        self.config = config or Config()
        self.selected_date: date = today or date.today()
        self.rows: list[TaskRow] = []
        self.snapshot: list[Task] = []

        if self.config.restore_selected_date:
            saved = self._load_saved_date()
            if saved is not None:
                self.selected_date = saved

    def _load_saved_date(self) -> date | None:
        if self.preferences is None:
            return None
        raw = self.preferences.get_string(PREFERENCES_NAMESPACE, SELECTED_DATE_KEY)
        if not raw:
            return None
        try:
            return date.fromisoformat(raw)
        except ValueError:
            logger.warning(f"Ignoring saved date {raw!r}")
            return None

    def _save_selected_date(self) -> None:
        if self.preferences is None:
            return
        self.preferences.put_string(
            PREFERENCES_NAMESPACE, SELECTED_DATE_KEY, self.selected_date.isoformat()
        )

    def start(self) -> None:
        """Register for snapshots and load the selected day."""
        self.store.set_task_list_observer(self.on_snapshot)
        self.refresh()

    def refresh(self) -> None:
        self.view.show_date_label(self.date_label())
        self.store.set_selected_date(self.selected_date)
        self.store.load_tasks()

    def select_date(self, target: date, remember: bool = True) -> None:
        """Make target the selected date and reload."""
        if target is None:
            raise ValueError("selected date is required")
        self.selected_date = target
        self.refresh()
        if remember:
            self._save_selected_date()

    def on_snapshot(self, tasks: list[Task]) -> None:
        """Store observer: rebuild the day view from a full snapshot."""
        self.snapshot = list(tasks)
        self.rows = materialize_day(self.snapshot, self.selected_date)
        self.view.update_tasks(self.rows)

    def date_label(self) -> str:
        return format_date_label(self.selected_date, self.config.date_label_format)

    def week(self) -> list[date]:
        return week_strip(self.selected_date, self.config.week_start_day)

    def submit_new_task(self, result: NewTaskResult) -> bool:
        """Handle the add-task dialog. Returns True if a task was sent to the store."""
        if result.needs_time_choice():
            self.view.show_time_required()
            return False

        task_time = None if result.any_time else result.parsed_time()
        task = Task(id="", name=result.name, time=task_time, date=self.selected_date)
        self.store.save_task(task.name, task.time, task.has_specific_time, task.date)
        return True

    def submit_popup_result(self, result: PopupResult) -> bool:
        """Handle the edit/delete popup. Returns True if the store was called."""
        if not result.task_id:
            logger.error("Cannot update or delete task: task ID is empty")
            return False

        if result.is_deleted:
            self.store.delete_task(result.task_id)
            return True

        task_time = result.parsed_time()
        if result.has_specific_time != (task_time is not None):
            raise ValueError("has_specific_time must match whether a time is given")
        # Tasks never move between dates here
        existing = next((t for t in self.snapshot if t.id == result.task_id), None)
        task_date = existing.date if existing else self.selected_date
        task = Task(id=result.task_id, name=result.name, time=task_time, date=task_date)
        self.store.update_task(result.task_id, task)
        return True

    def open_task(self, row: TaskRow) -> PopupPayload:
        """Row click: open the popup for that task."""
        payload = PopupPayload.from_row(row)
        self.view.show_popup(payload)
        return payload

    def find_row(self, task_id: str) -> TaskRow | None:
        return next((r for r in self.rows if r.id == task_id), None)
