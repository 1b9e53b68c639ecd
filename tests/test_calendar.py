"""Tests for week strip helpers."""

from datetime import date

import pytest

from taskday.core.calendar import (
    format_date_label,
    shift_week,
    week_start,
    week_strip,
    weekday_index,
)


class TestWeekStrip:
    def test_sunday_start(self):
        # 2025-01-15 is a Wednesday
        strip = week_strip(date(2025, 1, 15))
        assert strip[0] == date(2025, 1, 12)
        assert strip[-1] == date(2025, 1, 18)
        assert len(strip) == 7

    def test_monday_start(self):
        strip = week_strip(date(2025, 1, 15), "Monday")
        assert strip[0] == date(2025, 1, 13)
        assert strip[-1] == date(2025, 1, 19)

    def test_anchor_on_week_start(self):
        assert week_start(date(2025, 1, 12), "sunday") == date(2025, 1, 12)

    def test_contains_anchor(self):
        anchor = date(2024, 2, 29)
        assert anchor in week_strip(anchor)

    def test_unknown_weekday(self):
        with pytest.raises(ValueError, match="Unknown weekday"):
            weekday_index("Funday")


class TestShiftWeek:
    def test_forward(self):
        assert shift_week(date(2025, 1, 15), 1) == date(2025, 1, 22)

    def test_backward_across_year(self):
        assert shift_week(date(2025, 1, 2), -1) == date(2024, 12, 26)


class TestDateLabel:
    def test_default_format(self):
        assert format_date_label(date(2024, 3, 9)) == "2024-03"

    def test_custom_format(self):
        assert format_date_label(date(2024, 3, 9), "%B %Y") == "March 2024"

    def test_no_date(self):
        assert format_date_label(None) == "No date selected"
