"""Pure display formatting for tasks - no I/O dependencies."""

from datetime import date

from .tasks import Priority, StatusFilter, Task

PRIORITY_LABELS = {
    Priority.LOW: "low",
    Priority.MEDIUM: "medium",
    Priority.HIGH: "high",
}

EMPTY_MESSAGES = {
    StatusFilter.ALL: "No tasks yet. Add one to get started.",
    StatusFilter.ACTIVE: "All tasks are done.",
    StatusFilter.COMPLETED: "No completed tasks yet.",
}


def format_due_date(due: date, date_format: str = "%d %b") -> str:
    """Short due date label, e.g. '05 Jan'."""
    return due.strftime(date_format)


def format_task_line(task: Task, as_of: date | None = None, date_format: str = "%d %b") -> str:
    """
    Format a single task for display.

    Pure function - no I/O.
    """
    check = "x" if task.completed else " "
    parts = [f"[{check}] #{task.id} {task.text} ({PRIORITY_LABELS[task.priority]})"]

    if task.category:
        parts.append(f"[{task.category}]")
    if task.due_date:
        parts.append(f"due {format_due_date(task.due_date, date_format)}")
        if task.is_overdue(as_of):
            parts.append("OVERDUE")

    return " ".join(parts)


def empty_message(status: StatusFilter) -> str:
    """Message shown when a view has no tasks."""
    return EMPTY_MESSAGES[status]


def format_summary(counts: dict[StatusFilter, int]) -> str:
    """One-line count of tasks per status filter."""
    return " | ".join(f"{status.value}: {counts.get(status, 0)}" for status in StatusFilter)
