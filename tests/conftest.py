"""Shared test fixtures and utilities for task-tracker tests.

Provides:
- MockContext for isolating tests from global settings and environment
- Store fixtures backed by a temporary tasks file
- ScriptedPrompt and a captured rich Console for driving the menu
"""

import io
import os
import tempfile
from pathlib import Path
from typing import Generator, Iterable
from unittest.mock import patch

import pytest
import structlog
from rich.console import Console

from task_tracker.config import (
    TrackerSettings,
    reload_settings,
    set_context_settings,
    set_settings,
)
from task_tracker.tasks import TaskStore


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Clearing TASK_TRACKER_* environment variables
    - Providing a temporary directory for the tasks file
    - Resetting the global settings instance afterwards

    Usage:
        with MockContext(language="uk") as ctx:
            settings = ctx.settings
            path = ctx.tasks_path
    """

    def __init__(self, **settings_kwargs) -> None:
        self._settings_kwargs = settings_kwargs
        self._temp_dir: tempfile.TemporaryDirectory | None = None
        self._settings: TrackerSettings | None = None
        self._env_patch = None

    def __enter__(self) -> "MockContext":
        self._temp_dir = tempfile.TemporaryDirectory()
        workspace_dir = Path(self._temp_dir.name)

        cleaned = {k: v for k, v in os.environ.items() if not k.startswith("TASK_TRACKER_")}
        self._env_patch = patch.dict(os.environ, cleaned, clear=True)
        self._env_patch.start()

        kwargs = {"tasks_file": workspace_dir / "tasks.json", "language": "en"}
        kwargs.update(self._settings_kwargs)
        self._settings = TrackerSettings(**kwargs)
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        set_context_settings(None)
        if self._env_patch is not None:
            self._env_patch.stop()
        reload_settings()
        if self._temp_dir:
            self._temp_dir.cleanup()

    @property
    def settings(self) -> TrackerSettings:
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings

    @property
    def tasks_path(self) -> Path:
        return self.settings.tasks_path


class ScriptedPrompt:
    """Stands in for PromptSession.prompt, answering from a fixed script.

    Raises EOFError once the script runs out, like a closed stdin.
    """

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, text: str) -> str:
        self.prompts.append(text)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo configure_logging() so cached loggers don't leak between tests."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated settings context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def tasks_path(tmp_path: Path) -> Path:
    """Path of a not-yet-existing tasks file."""
    return tmp_path / "tasks.json"


@pytest.fixture
def store(tasks_path: Path) -> TaskStore:
    """Empty store backed by a temporary file."""
    return TaskStore(tasks_path)


@pytest.fixture
def console() -> Console:
    """Rich console writing plain text into a buffer (read via console.file)."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def scripted_prompt() -> type[ScriptedPrompt]:
    """The ScriptedPrompt class, for building prompts from answer lists."""
    return ScriptedPrompt
