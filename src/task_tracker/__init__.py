"""Task Tracker - a personal to-do list for the terminal.

Tasks live in a single JSON file that is rewritten after every change.
The package provides:

- Task entity with a display line and a JSON record form
- TaskStore, the file-backed ordered task collection
- An interactive six-choice menu (rich output, prompt_toolkit input)
- Layered settings (pydantic-settings) and structured logging (structlog)
"""

from task_tracker.config import (
    SettingsContext,
    SettingsValidationError,
    TrackerSettings,
    get_settings,
    reload_settings,
    set_settings,
    validate_settings,
)
from task_tracker.tasks import MalformedRecordError, PersistenceError, Task, TaskStore

__version__ = "0.1.0"

__all__ = [
    "MalformedRecordError",
    "PersistenceError",
    "SettingsContext",
    "SettingsValidationError",
    "Task",
    "TaskStore",
    "TrackerSettings",
    "get_settings",
    "reload_settings",
    "set_settings",
    "validate_settings",
]
