"""Pure calendar helpers for the week strip - no I/O dependencies."""

from datetime import date, timedelta

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

NO_DATE_LABEL = "No date selected"


def weekday_index(name: str) -> int:
    """Map a weekday name (any case) to date.weekday() numbering."""
    try:
        return [d.lower() for d in WEEKDAYS].index(name.strip().lower())
    except ValueError:
        raise ValueError(f"Unknown weekday: {name!r}") from None


def week_start(anchor: date, week_start_day: str = "Sunday") -> date:
    """First day of the week containing anchor."""
    offset = (anchor.weekday() - weekday_index(week_start_day)) % 7
    return anchor - timedelta(days=offset)


def week_strip(anchor: date, week_start_day: str = "Sunday") -> list[date]:
    """
    The seven dates of the week containing anchor.

    Pure function - no I/O.
    """
    first = week_start(anchor, week_start_day)
    return [first + timedelta(days=i) for i in range(7)]


def shift_week(anchor: date, weeks: int) -> date:
    """Move anchor by whole weeks (negative = backwards)."""
    return anchor + timedelta(weeks=weeks)


def format_date_label(target: date | None, fmt: str = "%Y-%m") -> str:
    """Header label for the selected date."""
    if target is None:
        return NO_DATE_LABEL
    return target.strftime(fmt)
