"""Simple file-based task store.

Persistent task tracking backed by a single JSON file. The whole
collection is loaded once at construction and the whole file is
rewritten after every mutation.

Load is lenient: a missing, empty or corrupt file yields an empty
store. Save is strict: a failed write raises PersistenceError.
"""

import json
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from task_tracker.logging import Loggers
from task_tracker.persistence import atomic_write_json
from task_tracker.tasks.models import MalformedRecordError, Task

if TYPE_CHECKING:
    from task_tracker.config import TrackerSettings

logger = Loggers.store()


class PersistenceError(Exception):
    """Raised when the task collection cannot be written to disk."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to write tasks to {path}: {cause}")
        self.path = path
        self.cause = cause


def _decode_tasks(text: str) -> list[Task]:
    """Decode the file contents into tasks.

    Raises:
        MalformedRecordError: If any record is invalid or ids repeat.
        ValueError: If the text is not JSON.
        RecursionError: If the JSON nests too deeply to decode.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise MalformedRecordError(
            f"Expected a list of tasks, got {type(data).__name__}"
        )
    tasks = [Task.from_dict(record) for record in data]
    seen: set[int] = set()
    for task in tasks:
        if task.id in seen:
            raise MalformedRecordError(f"Duplicate task id {task.id}")
        seen.add(task.id)
    return tasks


class TaskStore:
    """Ordered, file-backed collection of tasks.

    Tasks keep insertion order. New ids are one greater than the
    current maximum (or 1 when empty), so deleting the newest task
    and adding another reuses its id.

    Example:
        >>> store = TaskStore(Path("tasks.json"))
        >>> task = store.add("Buy milk", "2 liters")
        >>> store.mark_complete(task.id)
        True
        >>> store.list_tasks()[0].render()
        '[X] 1: Buy milk - 2 liters'
    """

    def __init__(self, path: Path) -> None:
        self._storage_path = Path(path)
        self._tasks: list[Task] = []
        self._load()

    @classmethod
    def from_settings(cls, settings: "TrackerSettings") -> "TaskStore":
        """Create a store on the configured backing file."""
        return cls(settings.tasks_path)

    @property
    def path(self) -> Path:
        return self._storage_path

    def _load(self) -> None:
        if not self._storage_path.exists():
            logger.debug("tasks_file_missing", path=str(self._storage_path))
            return
        try:
            text = self._storage_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(
                "tasks_file_unreadable", path=str(self._storage_path), error=str(e)
            )
            return
        if not text.strip():
            logger.debug("tasks_file_empty", path=str(self._storage_path))
            return
        try:
            self._tasks = _decode_tasks(text)
        except (ValueError, RecursionError) as e:
            self._tasks = []
            logger.warning(
                "tasks_file_corrupt_starting_empty",
                path=str(self._storage_path),
                error=str(e),
            )
            return
        logger.debug(
            "tasks_loaded", path=str(self._storage_path), count=len(self._tasks)
        )

    def save(self) -> None:
        """Overwrite the backing file with the full collection.

        Raises:
            PersistenceError: If the file cannot be written.
        """
        data = [task.to_dict() for task in self._tasks]
        try:
            atomic_write_json(self._storage_path, data)
        except OSError as e:
            logger.error("tasks_save_failed", path=str(self._storage_path), error=str(e))
            raise PersistenceError(self._storage_path, e) from e

    def _next_id(self) -> int:
        if not self._tasks:
            return 1
        return max(task.id for task in self._tasks) + 1

    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add(self, title: str, description: str) -> Task:
        """Create a new task, append it and persist.

        Args:
            title: Task title (may be empty).
            description: Task description (may be empty).

        Returns:
            The created Task.
        """
        task = Task(id=self._next_id(), title=title, description=description)
        self._tasks.append(task)
        self.save()
        logger.info("task_added", task_id=task.id)
        return replace(task)

    def update(self, task_id: int, title: str, description: str) -> bool:
        """Replace a task's title and description; completion is untouched.

        Returns:
            True if updated, False if task not found.
        """
        task = self._find(task_id)
        if task is None:
            return False
        task.title = title
        task.description = description
        self.save()
        logger.info("task_updated", task_id=task_id)
        return True

    def delete(self, task_id: int) -> bool:
        """Remove a task, keeping the order of the rest.

        Returns:
            True if deleted, False if not found.
        """
        task = self._find(task_id)
        if task is None:
            return False
        self._tasks.remove(task)
        self.save()
        logger.info("task_deleted", task_id=task_id)
        return True

    def mark_complete(self, task_id: int) -> bool:
        """Mark a task as completed.

        Returns:
            True if marked, False if not found.
        """
        task = self._find(task_id)
        if task is None:
            return False
        task.completed = True
        self.save()
        logger.info("task_completed", task_id=task_id)
        return True

    def get(self, task_id: int) -> Task | None:
        """Get a copy of a task by ID."""
        task = self._find(task_id)
        return replace(task) if task is not None else None

    def list_tasks(self) -> list[Task]:
        """Return a snapshot of all tasks in store order."""
        return [replace(task) for task in self._tasks]

    def is_empty(self) -> bool:
        """Check if the task store has any items."""
        return not self._tasks

    def __len__(self) -> int:
        return len(self._tasks)
