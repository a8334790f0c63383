"""Interactive menu application.

This module provides the menu loop that:
1. Renders the six-choice menu with rich
2. Reads line input through a prompt_toolkit PromptSession
3. Dispatches choices to MenuAction instances that call the TaskStore
"""

from __future__ import annotations

from typing import Any, Callable

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console
from rich.table import Table

from task_tracker.cli.actions import ActionRegistry, create_default_registry
from task_tracker.cli.messages import Messages
from task_tracker.config import (
    SettingsValidationError,
    TrackerSettings,
    get_settings,
    validate_settings,
)
from task_tracker.logging import Loggers, bind_context, configure_logging
from task_tracker.tasks import PersistenceError, TaskStore

logger = Loggers.cli()


class TaskTrackerApp:
    """Menu loop over a TaskStore.

    The store is owned by the caller and passed in; the app holds no
    task state of its own.

    Args:
        store: Task store the actions operate on
        settings: Application settings (language)
        console: Rich console for output (defaults to stdout)
        prompt: Callable taking a prompt string and returning a line.
            Defaults to a prompt_toolkit PromptSession created on first use.
        registry: Menu actions (defaults to the six standard choices)
    """

    def __init__(
        self,
        store: TaskStore,
        settings: TrackerSettings,
        console: Console | None = None,
        prompt: Callable[[str], str] | None = None,
        registry: ActionRegistry | None = None,
    ) -> None:
        self.store = store
        self.settings = settings
        self.messages = Messages(settings.language)
        self.console = console or Console()
        self.registry = registry or create_default_registry()
        self._prompt = prompt
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    # === Input ===

    def _read_line(self, text: str) -> str:
        if self._prompt is None:
            session: PromptSession[str] = PromptSession(history=InMemoryHistory())
            self._prompt = session.prompt
        return self._prompt(text)

    def ask(self, key: str) -> str:
        """Prompt with a catalog message and return the stripped answer."""
        return self._read_line(self.messages.get(key)).strip()

    def ask_id(self, key: str) -> int | None:
        """Prompt for a task id; report and return None if it isn't a number."""
        raw = self.ask(key)
        try:
            return int(raw)
        except ValueError:
            logger.debug("invalid_id_input", raw=raw)
            self.say("invalid_id", style="yellow", raw=raw)
            return None

    # === Output ===

    def say(self, key: str, style: str | None = None, **kwargs: Any) -> None:
        """Print a catalog message."""
        self.show_line(self.messages.get(key, **kwargs), style=style)

    def show_line(self, text: str, style: str | None = None) -> None:
        """Print text verbatim (no rich markup, so '[X]' stays literal)."""
        self.console.print(text, style=style, markup=False, highlight=False)

    def show_menu(self) -> None:
        table = Table(show_header=False, box=None, padding=(0, 1, 0, 0))
        table.add_column("Key", style="bold cyan", no_wrap=True)
        table.add_column("Action")
        for action in self.registry.all_actions():
            table.add_row(f"{action.key}.", self.messages.get(action.label))

        self.console.print()
        self.say("menu_title", style="bold")
        self.console.print(table)

    # === Loop ===

    def handle_choice(self, choice: str) -> None:
        """Dispatch one menu choice.

        Unknown choices and write failures are reported and the loop
        carries on.
        """
        action = self.registry.get(choice)
        if action is None:
            logger.debug("unknown_menu_choice", choice=choice)
            self.say("invalid_choice", style="yellow")
            return
        try:
            action.execute(self)
        except PersistenceError as e:
            self.say("save_failed", style="bold red", error=str(e.cause))

    def stop(self) -> None:
        """Stop the loop after the current action."""
        self._running = False

    def run(self) -> None:
        """Run the menu until the exit choice, end of input or Ctrl-C."""
        self._running = True
        bind_context(tasks_file=str(self.store.path))
        logger.info("app_started", tasks=len(self.store), language=self.messages.language)

        while self._running:
            self.show_menu()
            try:
                choice = self.ask("choose_option")
                self.handle_choice(choice)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                self.say("goodbye")
                self.stop()

        logger.info("app_stopped")


def main() -> None:
    """Console entry point: load settings, open the store and run the menu."""
    settings = get_settings()
    configure_logging(settings)

    try:
        validate_settings(settings)
    except SettingsValidationError as e:
        Loggers.config().error("invalid_settings", error=str(e))
        raise SystemExit(1) from e

    store = TaskStore.from_settings(settings)
    TaskTrackerApp(store, settings).run()
