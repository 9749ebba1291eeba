"""Logging configuration settings."""

from dataclasses import dataclass

from cli_bridge.core.config.schema import ConfigSchema
from cli_bridge.core.config.validation import load_env_var


@dataclass(frozen=True)
class LoggingSettings:
    log_level: str
    log_translation_metrics: bool

    @classmethod
    def load(cls) -> "LoggingSettings":
        return cls(
            log_level=load_env_var(ConfigSchema.LOG_LEVEL),
            log_translation_metrics=load_env_var(ConfigSchema.LOG_TRANSLATION_METRICS),
        )
