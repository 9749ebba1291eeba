"""Environment-driven configuration."""

from cli_bridge.core.config.config import Config
from cli_bridge.core.config.validation import ConfigError, validate_all

__all__ = ["Config", "ConfigError", "validate_all"]
