"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class Priority(Enum):
    """Task priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Sort rank, lowest first (high=0, low=2)."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


class StatusFilter(Enum):
    """Which tasks a view shows by completion status."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass
class Task:
    """A single to-do entry."""

    id: int
    text: str
    priority: Priority
    created_at: datetime
    completed: bool = False
    category: str | None = None
    due_date: date | None = None

    def days_until_due(self, as_of: date | None = None) -> int | None:
        """Days until due date (negative if overdue)."""
        if not self.due_date:
            return None
        as_of = as_of or date.today()
        return (self.due_date - as_of).days

    def is_overdue(self, as_of: date | None = None) -> bool:
        """Past its due date and still open."""
        days = self.days_until_due(as_of)
        return days is not None and days < 0 and not self.completed


def filter_by_status(tasks: list[Task], status: StatusFilter = StatusFilter.ALL) -> list[Task]:
    """
    Keep tasks matching a status filter.

    Pure function - no I/O.
    """
    match status:
        case StatusFilter.ACTIVE:
            return [t for t in tasks if not t.completed]
        case StatusFilter.COMPLETED:
            return [t for t in tasks if t.completed]
        case _:
            return list(tasks)


def search_tasks(tasks: list[Task], query: str) -> list[Task]:
    """
    Case-insensitive substring search over text and category.

    A blank query matches everything.
    """
    needle = query.strip().lower()
    if not needle:
        return list(tasks)
    return [
        t
        for t in tasks
        if needle in t.text.lower() or (t.category is not None and needle in t.category.lower())
    ]


def sort_tasks(tasks: list[Task]) -> list[Task]:
    """
    Sort for display.

    Open tasks first, then high > medium > low priority, then earliest due
    date (dated before undated), then newest first.
    Pure function - no I/O.
    """

    def sort_key(t: Task) -> tuple:
        return (
            t.completed,
            t.priority.rank,
            t.due_date is None,
            t.due_date or date.max,
        )

    # Two stable passes: newest-first is the final tie-break
    newest_first = sorted(tasks, key=lambda t: t.created_at, reverse=True)
    return sorted(newest_first, key=sort_key)


def query_tasks(
    tasks: list[Task],
    status: StatusFilter = StatusFilter.ALL,
    query: str = "",
) -> list[Task]:
    """
    Filter by status, then search, then sort.

    Recomputed from the given tasks on every call.
    """
    return sort_tasks(search_tasks(filter_by_status(tasks, status), query))


def filter_by_priority(tasks: list[Task], priority: Priority) -> list[Task]:
    """Filter tasks to a single priority."""
    return [t for t in tasks if t.priority == priority]


def filter_by_category(tasks: list[Task], category: str) -> list[Task]:
    """Filter tasks to an exact category."""
    return [t for t in tasks if t.category == category]


def count_by_status(tasks: list[Task]) -> dict[StatusFilter, int]:
    """Task counts for each status filter."""
    active = sum(1 for t in tasks if not t.completed)
    return {
        StatusFilter.ALL: len(tasks),
        StatusFilter.ACTIVE: active,
        StatusFilter.COMPLETED: len(tasks) - active,
    }
