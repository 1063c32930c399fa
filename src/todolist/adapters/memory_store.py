"""In-memory task store adapter."""

import itertools
import logging
from collections.abc import Callable, Mapping
from datetime import date, datetime
from typing import Any

from todolist.core.tasks import Priority, Task

logger = logging.getLogger(__name__)

# Never overwritten by update()
IMMUTABLE_FIELDS = frozenset({"id", "created_at"})
UPDATABLE_FIELDS = frozenset({"text", "completed", "priority", "category", "due_date"})


def _is_blank(text: Any) -> bool:
    return not (isinstance(text, str) and text.strip())


def _coerce_due_date(value: Any) -> date | None:
    """Due date from a date, datetime or YYYY-MM-DD string. Raises ValueError otherwise."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise ValueError(f"Invalid due date {value!r}")


def _coerce_field(name: str, value: Any) -> Any:
    """Checked value for an updatable field. Raises ValueError if it cannot be stored."""
    match name:
        case "priority":
            return Priority(value)
        case "due_date":
            return _coerce_due_date(value)
        case "completed":
            if not isinstance(value, bool):
                raise ValueError(f"Invalid completed flag {value!r}")
            return value
        case "category":
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Invalid category {value!r}")
            return value
    return value


class InMemoryTaskStore:
    """
    Session-scoped task store.

    Implements TaskStore protocol. Tasks live in a list in insertion order and
    are discarded with the store. Ids come from a per-store counter, so two
    creates in the same instant still get distinct ids.
    """

    def __init__(self, now: Callable[[], datetime] = datetime.now):
        self._tasks: list[Task] = []
        self._ids = itertools.count(1)
        self._now = now

    def __len__(self) -> int:
        return len(self._tasks)

    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def create(
        self,
        text: str,
        priority: Priority | str = Priority.MEDIUM,
        category: str | None = None,
        due_date: date | str | None = None,
    ) -> Task | None:
        """Append a new task. Returns None (and stores nothing) if the text is blank."""
        if _is_blank(text):
            logger.warning("Rejected task with empty text")
            return None

        task = Task(
            id=next(self._ids),
            text=text,
            priority=Priority(priority),
            created_at=self._now(),
            category=_coerce_field("category", category),
            due_date=_coerce_due_date(due_date),
        )
        self._tasks.append(task)
        logger.debug(f"Created task {task.id}")
        return task

    def toggle(self, task_id: int) -> bool:
        """Flip completion. Unknown ids are ignored."""
        task = self._find(task_id)
        if task is None:
            logger.debug(f"Toggle ignored, no task {task_id}")
            return False
        task.completed = not task.completed
        return True

    def update(self, task_id: int, changes: Mapping[str, Any]) -> bool:
        """
        Merge field changes into a task.

        Keys not present are left alone; id and created_at are never written.
        Blank or non-string text, or a value that does not fit its field,
        rejects the whole update.
        """
        task = self._find(task_id)
        if task is None:
            logger.debug(f"Update ignored, no task {task_id}")
            return False

        fields = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        skipped = set(changes) - set(fields)
        if skipped - IMMUTABLE_FIELDS:
            logger.debug(f"Ignoring unknown fields {sorted(skipped - IMMUTABLE_FIELDS)}")

        if "text" in fields and _is_blank(fields["text"]):
            logger.warning(f"Rejected update of task {task_id}: empty text")
            return False
        try:
            fields = {name: _coerce_field(name, value) for name, value in fields.items()}
        except ValueError as e:
            logger.warning(f"Rejected update of task {task_id}: {e}")
            return False

        for name, value in fields.items():
            setattr(task, name, value)
        return True

    def delete(self, task_id: int) -> bool:
        """Remove a task. Unknown ids are ignored."""
        task = self._find(task_id)
        if task is None:
            logger.debug(f"Delete ignored, no task {task_id}")
            return False
        self._tasks.remove(task)
        return True

    def get(self, task_id: int) -> Task | None:
        """Look up a task by id."""
        return self._find(task_id)

    def all(self) -> list[Task]:
        """All tasks in insertion order (a new list)."""
        return list(self._tasks)
