"""todolist - in-memory personal to-do list."""
