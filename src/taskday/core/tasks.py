"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, time
from typing import Iterable

ANYTIME_LABEL = "Anytime"


def parse_time(value: str) -> time:
    """Parse an ISO time of day ("HH:MM" or "HH:MM:SS").

    Raises ValueError on malformed input.
    """
    return time.fromisoformat(value.strip())


def time_to_iso(value: time) -> str:
    """ISO time string, "HH:MM" unless seconds are set."""
    if value.second or value.microsecond:
        return value.isoformat()
    return value.isoformat(timespec="minutes")


def format_time(value: time | None) -> str:
    """Format a time of day for display."""
    if value is None:
        return ANYTIME_LABEL
    return value.strftime("%H:%M")


@dataclass(frozen=True)
class Task:
    """A task scheduled on a single day, optionally at a specific time."""

    id: str
    name: str
    time: time | None
    date: date

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Task name must not be empty")

    @property
    def has_specific_time(self) -> bool:
        return self.time is not None

    @property
    def is_persisted(self) -> bool:
        return bool(self.id)

    def time_label(self) -> str:
        return format_time(self.time)

    def to_record(self) -> dict:
        """Serialize to the remote database layout."""
        record = {
            "task": self.name,
            "hasSpecificTime": self.has_specific_time,
            "date": self.date.isoformat(),
        }
        if self.time is not None:
            record["time"] = time_to_iso(self.time)
        return record

    @classmethod
    def from_record(cls, task_id: str, data: dict) -> "Task":
        """Create Task from a remote database record."""
        if not isinstance(data, dict):
            raise TypeError(f"Task {task_id!r}: record is {type(data).__name__}, not an object")
        raw_time = data.get("time")
        task_time = parse_time(raw_time) if raw_time else None
        has_specific_time = data.get("hasSpecificTime", task_time is not None)
        if bool(has_specific_time) != (task_time is not None):
            raise ValueError(
                f"Task {task_id!r}: hasSpecificTime={has_specific_time} "
                f"disagrees with time={raw_time!r}"
            )
        return cls(
            id=task_id,
            name=data["task"],
            time=task_time,
            date=date.fromisoformat(data["date"]),
        )


@dataclass(frozen=True)
class TaskRow:
    """A task as shown in one materialized day view.

    display_number only means something inside the view that produced it.
    """

    task: Task
    display_number: int

    @property
    def id(self) -> str:
        return self.task.id

    @property
    def name(self) -> str:
        return self.task.name

    @property
    def time_label(self) -> str:
        return self.task.time_label()


def task_time_key(task: Task) -> tuple[int, time]:
    """Sort key: timed tasks chronologically, untimed tasks after all of them.

    Two untimed tasks compare equal, so a stable sort keeps their input order.
    """
    if task.time is None:
        return (1, time.min)
    return (0, task.time)


def filter_by_date(tasks: Iterable[Task], target_date: date) -> list[Task]:
    """Keep tasks that belong exactly to target_date."""
    return [t for t in tasks if t.date == target_date]


def sort_by_time(tasks: Iterable[Task]) -> list[Task]:
    """Stable sort by time of day, untimed last."""
    return sorted(tasks, key=task_time_key)


def materialize_day(tasks: Iterable[Task], selected_date: date) -> list[TaskRow]:
    """
    Build the numbered task list for one day.

    Filters to selected_date, orders by time of day (untimed last, input
    order kept among them), and numbers rows from 1. Recomputed from
    scratch on every call.

    Pure function - no I/O.
    """
    if selected_date is None:
        raise ValueError("selected_date is required")

    day_tasks = sort_by_time(filter_by_date(tasks, selected_date))
    return [TaskRow(task=t, display_number=i + 1) for i, t in enumerate(day_tasks)]


def count_by_date(tasks: Iterable[Task]) -> dict[date, int]:
    """Number of tasks on each date."""
    counts: dict[date, int] = {}
    for t in tasks:
        counts[t.date] = counts.get(t.date, 0) + 1
    return counts
