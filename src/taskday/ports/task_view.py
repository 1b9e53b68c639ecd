"""Task view interface."""

from typing import Protocol

from taskday.core.tasks import TaskRow
from taskday.dialogs import PopupPayload


class TaskView(Protocol):
    """Interface for whatever renders the day view."""

    def update_tasks(self, rows: list[TaskRow]) -> None:
        """Replace the displayed list."""
        ...

    def show_date_label(self, text: str) -> None:
        """Show the selected-date header."""
        ...

    def show_time_required(self) -> None:
        """Tell the user to pick a time or 'any time' before saving."""
        ...

    def show_popup(self, payload: PopupPayload) -> None:
        """Open the edit/delete popup for one task."""
        ...
