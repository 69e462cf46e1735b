"""
Shared pieces for schedule configuration providers.

Providers are read-only: they turn a document on disk into a ScheduleConfig
and fall back to the built-in schedule when the document is missing or
unusable. Writing configuration is the settings UI's concern.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from pydantic import ValidationError

from flowtimer.config.defaults import default_schedule_config
from flowtimer.core.exceptions import ConfigLoadError
from flowtimer.runtime.schedule_types import ScheduleConfig
from flowtimer.shared.schemas import ScheduleConfigSchema

_logger = logging.getLogger(__name__)


@runtime_checkable
class ScheduleConfigProvider(Protocol):
    """Protocol implemented by schedule configuration sources."""

    def get_schedule_config(self) -> ScheduleConfig:
        """Return the current schedule."""

    def reload(self) -> None:
        """Drop any cached schedule so the next read hits the source again."""


class CachedFileProvider:
    """
    Base for file-backed providers: caching, fallback and strict mode.

    Subclasses implement :meth:`_read_document` to decode the file.
    """

    def __init__(self, config_path: Path | str, strict: bool = False):
        """
        Initialize the provider.

        Args:
            config_path: Path to the schedule document
            strict: Raise ConfigLoadError instead of falling back to the
                built-in schedule when the file is missing or invalid
        """
        self._config_path = Path(config_path)
        self._strict = strict
        self._config: ScheduleConfig | None = None

    @property
    def config_path(self) -> Path:
        return self._config_path

    def _read_document(self) -> Any:
        raise NotImplementedError

    def _fail(self, message: str) -> ScheduleConfig:
        if self._strict:
            raise ConfigLoadError(message, path=str(self._config_path))
        _logger.error("%s; using built-in schedule", message)
        return default_schedule_config()

    def _load(self) -> ScheduleConfig:
        if not self._config_path.exists():
            if self._strict:
                raise ConfigLoadError(
                    f"Schedule config file not found: {self._config_path}",
                    path=str(self._config_path),
                )
            _logger.warning("Schedule config file not found: %s; using built-in schedule", self._config_path)
            return default_schedule_config()

        try:
            data = self._read_document()
        except OSError as e:
            return self._fail(f"Failed to read schedule config file {self._config_path}: {e}")
        except ValueError as e:
            return self._fail(f"Failed to parse schedule config file {self._config_path}: {e}")

        try:
            schema = ScheduleConfigSchema.model_validate(data or {})
            config = schema.to_domain()
        except (ValidationError, ValueError) as e:
            return self._fail(f"Invalid schedule config in {self._config_path}: {e}")

        _logger.info(
            "Loaded schedule config from %s (%d screens, %d intervals)",
            self._config_path,
            len(config.screens),
            len(config.intervals),
        )
        return config

    def get_schedule_config(self) -> ScheduleConfig:
        """Load on first use, then serve the cached schedule."""
        if self._config is None:
            self._config = self._load()
        return self._config

    def reload(self) -> None:
        """Force reload of the schedule from file."""
        self._config = None
        self.get_schedule_config()
