"""Functional core - pure business logic with no I/O."""

from .tasks import (
    Task,
    TaskRow,
    materialize_day,
    filter_by_date,
    sort_by_time,
    task_time_key,
    parse_time,
    format_time,
)
from .calendar import week_strip, shift_week, format_date_label

__all__ = [
    # Tasks
    "Task",
    "TaskRow",
    "materialize_day",
    "filter_by_date",
    "sort_by_time",
    "task_time_key",
    "parse_time",
    "format_time",
    # Calendar
    "week_strip",
    "shift_week",
    "format_date_label",
]
