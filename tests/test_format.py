"""Tests for task display formatting."""

from datetime import date, datetime

import pytest

from todolist.core.format import (
    empty_message,
    format_due_date,
    format_summary,
    format_task_line,
)
from todolist.core.tasks import Priority, StatusFilter, Task


@pytest.fixture
def today():
    return date(2024, 1, 7)


def make_task(**kwargs) -> Task:
    defaults = dict(id=3, text="Buy milk", priority=Priority.HIGH, created_at=datetime(2024, 1, 1))
    defaults.update(kwargs)
    return Task(**defaults)


class TestFormatTaskLine:
    def test_minimal_task(self, today):
        assert format_task_line(make_task(), as_of=today) == "[ ] #3 Buy milk (high)"

    def test_completed_checkbox(self, today):
        line = format_task_line(make_task(completed=True), as_of=today)
        assert line.startswith("[x] #3")

    def test_category(self, today):
        line = format_task_line(make_task(category="Shopping"), as_of=today)
        assert line == "[ ] #3 Buy milk (high) [Shopping]"

    def test_due_date(self, today):
        line = format_task_line(make_task(due_date=date(2024, 1, 9)), as_of=today)
        assert line == "[ ] #3 Buy milk (high) due 09 Jan"

    def test_overdue_marker(self, today):
        line = format_task_line(make_task(due_date=date(2024, 1, 5)), as_of=today)
        assert line.endswith("due 05 Jan OVERDUE")

    def test_no_overdue_marker_when_completed(self, today):
        line = format_task_line(make_task(due_date=date(2024, 1, 5), completed=True), as_of=today)
        assert "OVERDUE" not in line

    def test_custom_date_format(self, today):
        line = format_task_line(make_task(due_date=date(2024, 1, 9)), as_of=today, date_format="%Y-%m-%d")
        assert line.endswith("due 2024-01-09")

    def test_priority_label(self, today):
        line = format_task_line(make_task(priority=Priority.LOW), as_of=today)
        assert "(low)" in line


class TestFormatDueDate:
    def test_default_format(self):
        assert format_due_date(date(2024, 3, 1)) == "01 Mar"


class TestEmptyMessage:
    @pytest.mark.parametrize("status", list(StatusFilter))
    def test_message_for_every_filter(self, status):
        assert empty_message(status)

    def test_active_message(self):
        assert empty_message(StatusFilter.ACTIVE) == "All tasks are done."


class TestFormatSummary:
    def test_counts(self):
        counts = {StatusFilter.ALL: 5, StatusFilter.ACTIVE: 3, StatusFilter.COMPLETED: 2}
        assert format_summary(counts) == "all: 5 | active: 3 | completed: 2"

    def test_missing_counts_are_zero(self):
        assert format_summary({}) == "all: 0 | active: 0 | completed: 0"
