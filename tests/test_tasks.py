"""Tests for core task logic."""

from datetime import date, time

import pytest

from taskday.core.tasks import (
    Task,
    TaskRow,
    count_by_date,
    filter_by_date,
    format_time,
    materialize_day,
    parse_time,
    sort_by_time,
    time_to_iso,
)


# Fixtures
@pytest.fixture
def day():
    return date(2024, 1, 1)


@pytest.fixture
def next_day():
    return date(2024, 1, 2)


def make_task(task_id: str, target: date, at: time | None = None, name: str | None = None) -> Task:
    return Task(id=task_id, name=name or f"Task {task_id}", time=at, date=target)


# Task class tests
class TestTask:
    def test_has_specific_time_follows_time(self, day):
        assert make_task("1", day, time(9, 0)).has_specific_time is True
        assert make_task("2", day).has_specific_time is False

    def test_blank_name_rejected(self, day):
        with pytest.raises(ValueError):
            Task(id="", name="   ", time=None, date=day)

    def test_unsaved_task_is_not_persisted(self, day):
        assert make_task("", day).is_persisted is False
        assert make_task("abc", day).is_persisted is True

    def test_time_label(self, day):
        assert make_task("1", day, time(9, 5)).time_label() == "09:05"
        assert make_task("2", day).time_label() == "Anytime"

    def test_to_record_timed(self, day):
        record = make_task("1", day, time(9, 0), name="Standup").to_record()
        assert record == {
            "task": "Standup",
            "hasSpecificTime": True,
            "date": "2024-01-01",
            "time": "09:00",
        }

    def test_to_record_keeps_seconds(self, day):
        record = make_task("1", day, time(9, 0, 50)).to_record()
        assert record["time"] == "09:00:50"
        assert Task.from_record("1", record).time == time(9, 0, 50)

    def test_to_record_untimed_has_no_time_key(self, day):
        record = make_task("1", day, name="Laundry").to_record()
        assert "time" not in record
        assert record["hasSpecificTime"] is False

    def test_from_record(self):
        task = Task.from_record(
            "-Nabc",
            {"task": "Gym", "time": "18:30", "hasSpecificTime": True, "date": "2024-01-01"},
        )
        assert task.id == "-Nabc"
        assert task.name == "Gym"
        assert task.time == time(18, 30)
        assert task.date == date(2024, 1, 1)

    def test_from_record_without_time(self):
        task = Task.from_record("x", {"task": "Read", "hasSpecificTime": False, "date": "2024-01-01"})
        assert task.time is None

    def test_from_record_flag_mismatch(self):
        with pytest.raises(ValueError):
            Task.from_record("x", {"task": "Read", "hasSpecificTime": True, "date": "2024-01-01"})

    def test_from_record_not_an_object(self):
        with pytest.raises(TypeError):
            Task.from_record("x", "oops")


class TestTimeHelpers:
    def test_parse_time_minutes(self):
        assert parse_time("09:00") == time(9, 0)

    def test_parse_time_seconds(self):
        assert parse_time("23:59:30") == time(23, 59, 30)

    def test_parse_time_malformed(self):
        with pytest.raises(ValueError):
            parse_time("nine o'clock")

    def test_format_time_none(self):
        assert format_time(None) == "Anytime"

    def test_time_to_iso_minutes(self):
        assert time_to_iso(time(9, 0)) == "09:00"

    def test_time_to_iso_seconds(self):
        assert time_to_iso(time(9, 0, 5)) == "09:00:05"


class TestFilterAndSort:
    def test_filter_exact_date(self, day, next_day):
        tasks = [make_task("1", day), make_task("2", next_day), make_task("3", day)]
        assert [t.id for t in filter_by_date(tasks, day)] == ["1", "3"]

    def test_sort_timed_before_untimed(self, day):
        tasks = [make_task("a", day), make_task("b", day, time(23, 0)), make_task("c", day, time(0, 0))]
        assert [t.id for t in sort_by_time(tasks)] == ["c", "b", "a"]

    def test_count_by_date(self, day, next_day):
        tasks = [make_task("1", day), make_task("2", next_day), make_task("3", day)]
        assert count_by_date(tasks) == {day: 2, next_day: 1}


class TestMaterializeDay:
    def test_mixed_dates_and_untimed(self, day, next_day):
        tasks = [
            make_task("untimed", day),
            make_task("nine", day, time(9, 0)),
            make_task("other-day", next_day, time(8, 0)),
        ]
        rows = materialize_day(tasks, day)

        assert [(r.id, r.display_number) for r in rows] == [("nine", 1), ("untimed", 2)]

    def test_orders_by_time(self, day):
        tasks = [make_task("ten", day, time(10, 0)), make_task("nine", day, time(9, 0))]
        rows = materialize_day(tasks, day)

        assert [r.id for r in rows] == ["nine", "ten"]
        assert [r.display_number for r in rows] == [1, 2]

    def test_empty_snapshot(self, day):
        assert materialize_day([], day) == []

    def test_no_tasks_on_date(self, day, next_day):
        assert materialize_day([make_task("1", next_day)], day) == []

    def test_untimed_keep_input_order(self, day):
        tasks = [
            make_task("first", day),
            make_task("timed", day, time(12, 0)),
            make_task("second", day),
            make_task("third", day),
        ]
        rows = materialize_day(tasks, day)

        assert [r.id for r in rows] == ["timed", "first", "second", "third"]

    def test_timed_always_before_untimed(self, day):
        tasks = [make_task("u1", day), make_task("late", day, time(23, 59)), make_task("u2", day)]
        rows = materialize_day(tasks, day)

        assert rows[0].id == "late"
        assert all(not r.task.has_specific_time for r in rows[1:])

    def test_numbers_are_contiguous(self, day, next_day):
        tasks = [make_task(str(i), day if i % 2 else next_day, time(i % 24, 0)) for i in range(20)]
        rows = materialize_day(tasks, day)

        assert [r.display_number for r in rows] == list(range(1, len(rows) + 1))
        assert len(rows) == 10

    def test_idempotent(self, day, next_day):
        tasks = [make_task("a", day), make_task("b", day, time(7, 0)), make_task("c", next_day)]

        assert materialize_day(tasks, day) == materialize_day(tasks, day)

    def test_does_not_mutate_tasks(self, day, next_day):
        tasks = [make_task("a", day), make_task("b", next_day)]
        before = list(tasks)

        materialize_day(tasks, day)

        assert tasks == before

    def test_same_task_in_two_views(self, day):
        shared = make_task("shared", day, time(12, 0))
        first = materialize_day([shared], day)
        second = materialize_day([make_task("early", day, time(6, 0)), shared], day)

        assert first[0].display_number == 1
        assert second[1].display_number == 2
        assert first[0].task is shared

    def test_accepts_any_iterable(self, day):
        rows = materialize_day((t for t in [make_task("a", day)]), day)
        assert len(rows) == 1

    def test_requires_date(self, day):
        with pytest.raises(ValueError):
            materialize_day([make_task("a", day)], None)


class TestTaskRow:
    def test_accessors(self, day):
        row = TaskRow(task=make_task("id1", day, time(8, 15), name="Walk"), display_number=3)
        assert row.id == "id1"
        assert row.name == "Walk"
        assert row.time_label == "08:15"
