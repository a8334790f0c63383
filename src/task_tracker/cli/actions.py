"""Menu actions and their registry.

Each menu choice is a MenuAction subclass. The app looks actions up
by the key the user typed and calls execute() with itself, so actions
only prompt, call one store operation and report the outcome.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from task_tracker.cli.app import TaskTrackerApp


class MenuAction(ABC):
    """Base class for menu choices."""

    def __init__(
        self,
        key: str,
        label: str,
        aliases: list[str] | None = None,
    ) -> None:
        """Initialize the action.

        Args:
            key: What the user types to pick this action (e.g. "1")
            label: Message id of the menu line
            aliases: Alternative inputs for the action
        """
        self.key = key
        self.label = label
        self.aliases = aliases or []

    @abstractmethod
    def execute(self, app: "TaskTrackerApp") -> None:
        """Run the action against the app's store."""
        pass


class AddTaskAction(MenuAction):
    """Prompt for title and description and add a task."""

    def __init__(self) -> None:
        super().__init__(key="1", label="menu_add", aliases=["add"])

    def execute(self, app: "TaskTrackerApp") -> None:
        title = app.ask("prompt_title")
        description = app.ask("prompt_description")
        task = app.store.add(title, description)
        app.say("task_added", style="green", title=task.title)


class ListTasksAction(MenuAction):
    """Print every task in store order."""

    def __init__(self) -> None:
        super().__init__(key="2", label="menu_list", aliases=["list", "ls"])

    def execute(self, app: "TaskTrackerApp") -> None:
        app.say("task_list_header", style="bold")
        tasks = app.store.list_tasks()
        if not tasks:
            app.say("no_tasks", style="dim")
            return
        for task in tasks:
            app.show_line(task.render())


class EditTaskAction(MenuAction):
    """Replace the title and description of a task."""

    def __init__(self) -> None:
        super().__init__(key="3", label="menu_edit", aliases=["edit"])

    def execute(self, app: "TaskTrackerApp") -> None:
        task_id = app.ask_id("prompt_edit_id")
        if task_id is None:
            return
        title = app.ask("prompt_new_title")
        description = app.ask("prompt_new_description")
        if app.store.update(task_id, title, description):
            app.say("task_updated", style="green", id=task_id)
        else:
            app.say("task_not_found", style="red", id=task_id)


class DeleteTaskAction(MenuAction):
    """Delete a task by id."""

    def __init__(self) -> None:
        super().__init__(key="4", label="menu_delete", aliases=["delete", "rm"])

    def execute(self, app: "TaskTrackerApp") -> None:
        task_id = app.ask_id("prompt_delete_id")
        if task_id is None:
            return
        if app.store.delete(task_id):
            app.say("task_deleted", style="green", id=task_id)
        else:
            app.say("task_not_found", style="red", id=task_id)


class CompleteTaskAction(MenuAction):
    """Mark a task as completed."""

    def __init__(self) -> None:
        super().__init__(key="5", label="menu_complete", aliases=["done"])

    def execute(self, app: "TaskTrackerApp") -> None:
        task_id = app.ask_id("prompt_complete_id")
        if task_id is None:
            return
        if app.store.mark_complete(task_id):
            app.say("task_completed", style="green", id=task_id)
        else:
            app.say("task_not_found", style="red", id=task_id)


class ExitAction(MenuAction):
    """Leave the menu loop."""

    def __init__(self) -> None:
        super().__init__(key="6", label="menu_exit", aliases=["exit", "quit", "q"])

    def execute(self, app: "TaskTrackerApp") -> None:
        app.say("goodbye")
        app.stop()


class ActionRegistry:
    """Registry of menu actions, kept in registration (menu) order."""

    def __init__(self) -> None:
        self._actions: dict[str, MenuAction] = {}
        self._ordered: list[MenuAction] = []

    def register(self, action: MenuAction) -> None:
        """Register an action under its key and aliases."""
        self._actions[action.key] = action
        for alias in action.aliases:
            self._actions[alias] = action
        if action not in self._ordered:
            self._ordered.append(action)

    def get(self, key: str) -> MenuAction | None:
        """Get an action by key or alias (case-insensitive)."""
        return self._actions.get(key.strip().lower())

    def all_actions(self) -> list[MenuAction]:
        """Get all unique actions in menu order."""
        return list(self._ordered)


def create_default_registry() -> ActionRegistry:
    """Build the registry with the six standard menu choices."""
    registry = ActionRegistry()
    for action in (
        AddTaskAction(),
        ListTasksAction(),
        EditTaskAction(),
        DeleteTaskAction(),
        CompleteTaskAction(),
        ExitAction(),
    ):
        registry.register(action)
    return registry
