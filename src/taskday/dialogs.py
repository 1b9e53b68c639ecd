"""Results reported back by the add-task and edit-task dialogs."""

from dataclasses import dataclass
from datetime import time

from .core.tasks import TaskRow, parse_time


@dataclass
class NewTaskResult:
    """Input collected by the add-task dialog.

    time_text is an ISO time string, or empty/None when the user chose "any time".
    time_not_selected is set when the user made no time choice at all.
    """

    name: str
    time_text: str | None = None
    any_time: bool = False
    time_not_selected: bool = False

    def needs_time_choice(self) -> bool:
        return self.time_not_selected or (not self.any_time and not self.time_text)

    def parsed_time(self) -> time | None:
        if self.time_text:
            return parse_time(self.time_text)
        return None


@dataclass
class PopupResult:
    """Outcome of the edit/delete popup for an existing task."""

    task_id: str | None
    is_deleted: bool = False
    name: str = ""
    time_text: str | None = None
    has_specific_time: bool = False

    def parsed_time(self) -> time | None:
        if self.time_text is not None:
            return parse_time(self.time_text)
        return None


@dataclass(frozen=True)
class PopupPayload:
    """What the popup is opened with when a row is clicked."""

    task_id: str
    name: str
    time_label: str

    @classmethod
    def from_row(cls, row: TaskRow) -> "PopupPayload":
        return cls(task_id=row.id, name=row.name, time_label=row.time_label)
