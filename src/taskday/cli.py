"""taskday CLI - daily task planner."""

import json
import logging
import sys
from datetime import date

import click

from .adapters.firebase_store import TaskStoreError
from .config import load_config
from .console_view import ConsoleTaskView
from .core.calendar import shift_week, week_strip
from .core.tasks import count_by_date, format_time, time_to_iso
from .dialogs import NewTaskResult, PopupResult
from .workflows import close, open_day, settle


def _parse_date(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not a YYYY-MM-DD date") from None


def _open(view: ConsoleTaskView, target: date | None = None, remember: bool = False):
    config = load_config()
    try:
        controller, dispatcher = open_day(config, view)
    except TaskStoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    if target is not None:
        controller.select_date(target, remember=remember)
    settle(controller, dispatcher)
    return controller, dispatcher


@click.group()
@click.version_option(package_name="taskday")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """taskday - Daily Task Planner."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date to view (YYYY-MM-DD), defaults to the selected date")
@click.option("--ids", is_flag=True, help="Show task IDs")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def day(target_date: str | None, ids: bool, as_json: bool):
    """List the tasks for one day."""
    view = ConsoleTaskView(show_ids=ids)
    controller, _ = _open(view, _parse_date(target_date))
    close(controller)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "number": r.display_number,
                        "id": r.id,
                        "name": r.name,
                        "time": time_to_iso(r.task.time) if r.task.time else None,
                        "date": r.task.date.isoformat(),
                    }
                    for r in controller.rows
                ],
                indent=2,
            )
        )
        return

    click.echo(view.label)
    view.render(controller.selected_date.strftime("%A, %B %d"), "No tasks for this day.")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Any date in the week to show (YYYY-MM-DD)")
@click.option("--offset", type=int, default=0, help="Shift by whole weeks")
def week(target_date: str | None, offset: int):
    """Show the week strip around the selected date."""
    view = ConsoleTaskView()
    controller, _ = _open(view, _parse_date(target_date))
    close(controller)

    anchor = shift_week(controller.selected_date, offset)
    counts = count_by_date(controller.snapshot)
    click.echo(view.label)
    for d in week_strip(anchor, controller.config.week_start_day):
        marker = ">" if d == controller.selected_date else " "
        count = counts.get(d, 0)
        click.echo(f"{marker} {d.strftime('%a %d')}  {count} task{'s' if count != 1 else ''}")


@main.command()
@click.argument("target_date")
def select(target_date: str):
    """Make DATE (YYYY-MM-DD) the selected date."""
    view = ConsoleTaskView()
    controller, _ = _open(view, _parse_date(target_date), remember=True)
    close(controller)
    click.echo(f"Selected {controller.selected_date.isoformat()} ({len(controller.rows)} tasks)")


@main.command()
@click.argument("name")
@click.option("--time", "-t", "time_text", default=None, help="Time of day (HH:MM)")
@click.option("--anytime", is_flag=True, help="No specific time")
@click.option("--date", "-d", "target_date", default=None,
              help="Date for the task (YYYY-MM-DD), defaults to the selected date")
def add(name: str, time_text: str | None, anytime: bool, target_date: str | None):
    """Add a task."""
    if time_text and anytime:
        raise click.UsageError("Use either --time or --anytime, not both")

    view = ConsoleTaskView()
    controller, dispatcher = _open(view, _parse_date(target_date))
    result = NewTaskResult(name=name, time_text=time_text, any_time=anytime)
    try:
        saved = controller.submit_new_task(result)
    except ValueError as e:
        close(controller)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    settle(controller, dispatcher)
    close(controller)

    if not saved:
        sys.exit(1)
    view.render(controller.selected_date.strftime("%A, %B %d"))


@main.command()
@click.argument("task_id")
def show(task_id: str):
    """Show one task from the selected day."""
    view = ConsoleTaskView()
    controller, _ = _open(view)
    close(controller)

    row = controller.find_row(task_id)
    if row is None:
        click.echo(f"Error: no task with ID {task_id} on {controller.selected_date}", err=True)
        sys.exit(1)
    click.echo(f"#{row.display_number}  ", nl=False)
    controller.open_task(row)


@main.command()
@click.argument("task_id")
@click.option("--name", "-n", default=None, help="New task name")
@click.option("--time", "-t", "time_text", default=None, help="New time of day (HH:MM)")
@click.option("--anytime", is_flag=True, help="Clear the time")
def edit(task_id: str, name: str | None, time_text: str | None, anytime: bool):
    """Edit a task by ID."""
    if time_text and anytime:
        raise click.UsageError("Use either --time or --anytime, not both")

    view = ConsoleTaskView()
    controller, dispatcher = _open(view)
    existing = next((t for t in controller.snapshot if t.id == task_id), None)
    if existing is None:
        close(controller)
        click.echo(f"Error: no task with ID {task_id}", err=True)
        sys.exit(1)

    if anytime:
        new_time = None
    elif time_text:
        new_time = time_text
    else:
        new_time = time_to_iso(existing.time) if existing.time else None

    result = PopupResult(
        task_id=task_id,
        name=name or existing.name,
        time_text=new_time,
        has_specific_time=new_time is not None,
    )
    try:
        controller.submit_popup_result(result)
    except ValueError as e:
        close(controller)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    settle(controller, dispatcher)
    close(controller)
    click.echo(f"Updated: {result.name} ({format_time(result.parsed_time())})")


@main.command()
@click.argument("task_id")
def delete(task_id: str):
    """Delete a task by ID."""
    view = ConsoleTaskView()
    controller, dispatcher = _open(view)
    if not any(t.id == task_id for t in controller.snapshot):
        close(controller)
        click.echo(f"Error: no task with ID {task_id}", err=True)
        sys.exit(1)
    if not controller.submit_popup_result(PopupResult(task_id=task_id, is_deleted=True)):
        close(controller)
        sys.exit(1)
    settle(controller, dispatcher)
    close(controller)
    click.echo(f"Deleted {task_id}")


if __name__ == "__main__":
    main()
