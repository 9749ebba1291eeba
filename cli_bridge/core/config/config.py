"""Configuration object for cli-bridge.

All values are loaded from environment variables at construction time using
schema-based validation (see schema.py). Settings are grouped into focused
frozen dataclasses; Config exposes them as flat read-only properties.
"""

from cli_bridge.core.config.logging_settings import LoggingSettings


class Config:
    """Direct property access to all settings."""

    def __init__(self) -> None:
        self._logging = LoggingSettings.load()

    @property
    def log_level(self) -> str:
        return self._logging.log_level

    @property
    def log_translation_metrics(self) -> bool:
        return self._logging.log_translation_metrics
