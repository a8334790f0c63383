"""Settings mixins for application identity and CLI/UI configuration.

AppSettingsMixin: Application identity and where the task file lives.
CLISettingsMixin: CLI/UI-specific settings (logging, menu language).

These live outside cli/ so that config.py can compose TrackerSettings
without importing the cli package.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator


class AppSettingsMixin:
    """Settings for application identity and disk layout.

    Should be composed with BaseSettings via multiple inheritance.
    """

    app_name: str = Field(
        default="task_tracker",
        title="App Name",
        description="Application name, also used for config directory lookup",
    )

    tasks_file: Path = Field(
        default=Path("tasks.json"),
        title="Tasks File",
        description="JSON file holding the task collection",
    )

    @field_validator("tasks_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Expand ~ in paths."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v.expanduser()

    @property
    def tasks_path(self) -> Path:
        """Absolute path of the backing file (relative paths resolve against cwd)."""
        return self.tasks_file.absolute()


class CLISettingsMixin:
    """Settings for CLI/UI configuration.

    Note: This is a mixin, not a BaseSettings subclass, to avoid
    MRO issues when composed with other settings classes.
    """

    # Logging configuration
    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for humans, json for tooling)",
    )

    language: Literal["en", "uk"] = Field(
        default="en",
        title="Language",
        description="Language of menu prompts and messages",
    )
