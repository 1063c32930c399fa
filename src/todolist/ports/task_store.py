"""Task store interface."""

from collections.abc import Mapping
from datetime import date
from typing import Any, Protocol

from todolist.core.tasks import Priority, Task


class TaskStore(Protocol):
    """Interface for the authoritative collection of a session's tasks."""

    def create(
        self,
        text: str,
        priority: Priority | str = Priority.MEDIUM,
        category: str | None = None,
        due_date: date | str | None = None,
    ) -> Task | None:
        """Append a new task. Returns None if the text is blank."""
        ...

    def toggle(self, task_id: int) -> bool:
        """Flip completion. Returns False if no such task."""
        ...

    def update(self, task_id: int, changes: Mapping[str, Any]) -> bool:
        """Merge field changes into a task. Returns False if not applied."""
        ...

    def delete(self, task_id: int) -> bool:
        """Remove a task. Returns False if no such task."""
        ...

    def get(self, task_id: int) -> Task | None:
        """Look up a task by id."""
        ...

    def all(self) -> list[Task]:
        """All tasks in insertion order."""
        ...
