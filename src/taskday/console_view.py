"""Console rendering of the day view."""

import click

from .core.tasks import TaskRow
from .dialogs import PopupPayload

TIME_REQUIRED_TITLE = "Time required"
TIME_REQUIRED_MESSAGE = "Please choose a time or 'any time'."


def format_row(row: TaskRow) -> str:
    return f"{row.display_number:>3}. {row.time_label:8} {row.name}"


class ConsoleTaskView:
    """
    Renders the day view with click.

    Implements TaskView protocol. Keeps the last rows and label so commands
    can inspect what was shown.
    """

    def __init__(self, show_ids: bool = False):
        self.show_ids = show_ids
        self.rows: list[TaskRow] = []
        self.label = ""

    def show_date_label(self, text: str) -> None:
        self.label = text

    def update_tasks(self, rows: list[TaskRow]) -> None:
        self.rows = rows

    def render(self, title: str, empty_msg: str = "No tasks.") -> None:
        click.echo(f"### {title}")
        if not self.rows:
            click.echo(f"  {empty_msg}")
            return
        for row in self.rows:
            line = format_row(row)
            if self.show_ids:
                line = f"{line}  [{row.id}]"
            click.echo(line)

    def show_time_required(self) -> None:
        click.echo(f"{TIME_REQUIRED_TITLE}: {TIME_REQUIRED_MESSAGE}", err=True)

    def show_popup(self, payload: PopupPayload) -> None:
        click.echo(f"{payload.name} ({payload.time_label})  [{payload.task_id}]")
