"""Session workflow layer between the CLI and the task store.

Validates form-style input, applies store mutations, and recomputes the
current view for the session's (filter, search) pair on every request.
"""

import logging
from datetime import date
from typing import Any

from .adapters.memory_store import InMemoryTaskStore
from .config import Config, load_config
from .core.tasks import Priority, StatusFilter, Task, count_by_status, query_tasks
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when form input cannot be accepted."""


# ============== Form Parsing ==============


def clean_text(value: str) -> str:
    """Trimmed task text; blank text is rejected."""
    text = value.strip()
    if not text:
        raise ValidationError("Task text cannot be empty")
    return text


def parse_priority(value: str | Priority) -> Priority:
    """Priority from its name (case-insensitive)."""
    if isinstance(value, Priority):
        return value
    try:
        return Priority(value.strip().lower())
    except ValueError:
        names = ", ".join(p.value for p in Priority)
        raise ValidationError(f"Unknown priority {value!r} (choose from {names})") from None


def parse_status(value: str | StatusFilter) -> StatusFilter:
    """Status filter from its name (case-insensitive)."""
    if isinstance(value, StatusFilter):
        return value
    try:
        return StatusFilter(value.strip().lower())
    except ValueError:
        names = ", ".join(s.value for s in StatusFilter)
        raise ValidationError(f"Unknown filter {value!r} (choose from {names})") from None


def parse_due_date(value: str | date | None) -> date | None:
    """Due date from YYYY-MM-DD. Blank means no due date."""
    if value is None or isinstance(value, date):
        return value
    value = value.strip()
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError(f"Invalid due date {value!r} (use YYYY-MM-DD)") from None


def clean_category(value: str | None) -> str | None:
    """Trimmed category. Blank means no category."""
    if value is None:
        return None
    return value.strip() or None


# ============== Session ==============


class TodoSession:
    """
    One interactive session over a single task store.

    Holds the current status filter and search query; the view is derived
    from the store each time it is asked for.
    """

    def __init__(self, store: TaskStore, config: Config | None = None):
        self.store = store
        self.config = config or Config()
        self.status = parse_status(self.config.default_filter)
        self.query = ""

    def add(
        self,
        text: str,
        priority: str | Priority | None = None,
        category: str | None = None,
        due_date: str | date | None = None,
    ) -> Task:
        """Create a task from form input."""
        task = self.store.create(
            clean_text(text),
            priority=parse_priority(priority or self.config.default_priority),
            category=clean_category(category),
            due_date=parse_due_date(due_date),
        )
        if task is None:
            raise ValidationError("Task text cannot be empty")
        logger.info(f"Added task {task.id}")
        return task

    def edit(
        self,
        task_id: int,
        text: str | None = None,
        priority: str | Priority | None = None,
        category: str | None = None,
        due_date: str | date | None = None,
        completed: bool | None = None,
    ) -> bool:
        """
        Update only the fields supplied.

        None leaves a field alone; an empty category or due date clears it.
        Returns False if there is no such task.
        """
        changes: dict[str, Any] = {}
        if text is not None:
            changes["text"] = clean_text(text)
        if priority is not None:
            changes["priority"] = parse_priority(priority)
        if category is not None:
            changes["category"] = clean_category(category)
        if due_date is not None:
            changes["due_date"] = parse_due_date(due_date)
        if completed is not None:
            changes["completed"] = completed
        return self.store.update(task_id, changes)

    def toggle(self, task_id: int) -> bool:
        return self.store.toggle(task_id)

    def delete(self, task_id: int) -> bool:
        return self.store.delete(task_id)

    def set_filter(self, status: str | StatusFilter) -> StatusFilter:
        self.status = parse_status(status)
        return self.status

    def set_query(self, query: str) -> str:
        self.query = query
        return self.query

    def view(self) -> list[Task]:
        """Current filtered, searched and sorted tasks."""
        return query_tasks(self.store.all(), self.status, self.query)

    def counts(self) -> dict[StatusFilter, int]:
        return count_by_status(self.store.all())


def new_session(config: Config | None = None) -> TodoSession:
    """Start a session over a fresh, empty in-memory store."""
    config = config or load_config()
    return TodoSession(InMemoryTaskStore(), config)
