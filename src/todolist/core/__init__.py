"""Functional core - pure business logic with no I/O."""

from .tasks import (
    Priority,
    StatusFilter,
    Task,
    count_by_status,
    filter_by_category,
    filter_by_priority,
    filter_by_status,
    query_tasks,
    search_tasks,
    sort_tasks,
)
from .format import empty_message, format_summary, format_task_line

__all__ = [
    # Tasks
    "Priority",
    "StatusFilter",
    "Task",
    "count_by_status",
    "filter_by_category",
    "filter_by_priority",
    "filter_by_status",
    "query_tasks",
    "search_tasks",
    "sort_tasks",
    # Formatting
    "empty_message",
    "format_summary",
    "format_task_line",
]
