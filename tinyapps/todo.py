"""A small to-do list: named tasks that can be renamed, checked off and removed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

DEFAULT_TASK_NAME = "Untitled task"


@dataclass(eq=False)
class Task:
    """A single to-do entry."""

    name: str
    completed: bool = False

    def rename(self, name: str) -> None:
        """Give the task a new, non-empty name."""
        if not name:
            raise ValueError("task name must not be empty")
        self.name = name

    def set_completed(self, completed: bool) -> None:
        """Mark the task as done or not done."""
        self.completed = bool(completed)


class TodoList:
    """An ordered collection of tasks with a status summary."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def add_task(self, name: str) -> Task:
        """Append a new task with the given non-empty name and return it."""
        if not name:
            raise ValueError("task name must not be empty")
        task = Task(name)
        self._tasks.append(task)
        return task

    def remove_task(self, task: Task) -> None:
        """Remove a task from the list."""
        try:
            self._tasks.remove(task)
        except ValueError:
            raise ValueError(f"task {task.name!r} is not in the list") from None

    def completed_count(self) -> int:
        return sum(1 for task in self._tasks if task.completed)

    def todo_count(self) -> int:
        return len(self._tasks) - self.completed_count()

    def status_text(self) -> str:
        return f"Status: {self.todo_count()} todo / {self.completed_count()} completed"