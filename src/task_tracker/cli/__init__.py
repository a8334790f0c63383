"""Interactive menu for the task tracker."""

from task_tracker.cli.actions import (
    ActionRegistry,
    MenuAction,
    create_default_registry,
)
from task_tracker.cli.app import TaskTrackerApp, main
from task_tracker.cli.messages import Messages

__all__ = [
    "ActionRegistry",
    "MenuAction",
    "Messages",
    "TaskTrackerApp",
    "create_default_registry",
    "main",
]
