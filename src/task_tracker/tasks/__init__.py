"""Task management for the task tracker.

Provides the Task entity and a file-backed TaskStore.

Example:
    >>> store = TaskStore(Path("tasks.json"))
    >>> task = store.add("Buy milk", "2 liters")
    >>> store.mark_complete(task.id)
    True
    >>> [t.render() for t in store.list_tasks()]
    ['[X] 1: Buy milk - 2 liters']
"""

from task_tracker.tasks.models import MalformedRecordError, Task
from task_tracker.tasks.store import PersistenceError, TaskStore

__all__ = ["MalformedRecordError", "PersistenceError", "Task", "TaskStore"]
