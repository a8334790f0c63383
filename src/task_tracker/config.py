"""Configuration for the task tracker.

Provides TrackerSettings plus helpers to manage the active instance:

    1. Global instance (simple cases):
        set_settings(my_settings)
        settings = get_settings()

    2. Context-based (tests, isolated runs):
        with SettingsContext(my_settings):
            settings = get_settings()  # Returns my_settings

Settings Loading Priority (highest to lowest):
    1. Constructor arguments
    2. Environment variables (TASK_TRACKER_* prefix)
    3. Project config (./.task_tracker/settings.json)
    4. User config (~/.task_tracker/settings.json)
    5. .env file
    6. Default values
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from pathlib import Path
from typing import Generator, Tuple, Type

from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from task_tracker.settings_mixins import AppSettingsMixin, CLISettingsMixin

__all__ = [
    "TrackerSettings",
    "SettingsContext",
    "SettingsValidationError",
    "get_settings",
    "set_settings",
    "set_context_settings",
    "reload_settings",
    "validate_settings",
]


def _get_json_config_source(
    settings_cls: Type[BaseSettings],
    json_file: Path,
) -> PydanticBaseSettingsSource | None:
    """Create a JSON config source if the file exists.

    Args:
        settings_cls: The settings class
        json_file: Path to JSON config file

    Returns:
        JsonConfigSettingsSource if file exists, None otherwise
    """
    if not json_file.is_file():
        return None
    return JsonConfigSettingsSource(settings_cls, json_file=json_file)


class TrackerSettings(AppSettingsMixin, CLISettingsMixin, BaseSettings):
    """Settings for the task tracker.

    Mixins provide organized settings:
    - AppSettingsMixin: Application identity and backing file location
    - CLISettingsMixin: Logging and menu language
    """

    model_config = SettingsConfigDict(
        env_prefix="TASK_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources for layered JSON configuration.

        Note: JSON sources are only included if the files exist.
        """
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
        ]

        app_name = cls.model_fields["app_name"].default

        # Project-level JSON config (./.app_name/settings.json)
        project_json = _get_json_config_source(
            settings_cls,
            Path.cwd() / f".{app_name}" / "settings.json",
        )
        if project_json:
            sources.append(project_json)

        # User-level JSON config (~/.app_name/settings.json)
        user_json = _get_json_config_source(
            settings_cls,
            Path.home() / f".{app_name}" / "settings.json",
        )
        if user_json:
            sources.append(user_json)

        sources.append(dotenv_settings)

        return tuple(sources)


# Context variable for settings (takes precedence over global instance)
_settings_context: ContextVar[TrackerSettings | None] = ContextVar(
    "settings_context", default=None
)

_settings_instance: TrackerSettings | None = None


def get_settings() -> TrackerSettings:
    """Get the current settings instance.

    Resolution order:
    1. Context variable (set via SettingsContext or set_context_settings)
    2. Global instance (set via set_settings)
    3. Fresh TrackerSettings instance (created on first access)
    """
    context_settings = _settings_context.get()
    if context_settings is not None:
        return context_settings

    global _settings_instance
    if _settings_instance is None:
        _settings_instance = TrackerSettings()
    return _settings_instance


def set_settings(settings: TrackerSettings) -> None:
    """Set the global settings instance."""
    global _settings_instance
    _settings_instance = settings


def set_context_settings(settings: TrackerSettings | None) -> Token:
    """Set settings for the current context.

    Args:
        settings: Settings to use in current context, or None to clear

    Returns:
        Token that can be used to reset the context variable.
    """
    return _settings_context.set(settings)


@contextmanager
def SettingsContext(settings: TrackerSettings) -> Generator[TrackerSettings, None, None]:
    """Context manager for isolated settings.

    Example:
        with SettingsContext(test_settings) as s:
            assert get_settings() is s
    """
    token = _settings_context.set(settings)
    try:
        yield settings
    finally:
        _settings_context.reset(token)


def reload_settings() -> TrackerSettings:
    """Reload settings (clears global instance and context)."""
    global _settings_instance
    _settings_instance = None
    _settings_context.set(None)
    return get_settings()


class SettingsValidationError(Exception):
    """Raised when settings validation fails."""

    pass


def validate_settings(settings: TrackerSettings) -> None:
    """Validate settings for runtime use.

    Checks that the backing file can be created where configured.

    Raises:
        SettingsValidationError: If validation fails
    """
    errors = []
    path = settings.tasks_path

    if path.is_dir():
        errors.append(f"Tasks file '{path}' is a directory.")
    elif path.parent.exists() and not path.parent.is_dir():
        errors.append(f"Parent of tasks file '{path}' is not a directory.")

    if errors:
        raise SettingsValidationError("\n".join(errors))
