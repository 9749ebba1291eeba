"""Runtime config value accessors.

These functions read single config values at call time instead of building a
full Config. They never raise: an unusable LOG_LEVEL falls back to INFO, and
booleans cannot fail to parse. Use ``validate_all()`` or ``Config()`` where
strict validation is wanted.

Usage:
    from cli_bridge.core.config.accessors import log_translation_metrics
    if log_translation_metrics():
        ...
"""

import os

from cli_bridge.core.config.schema import VALID_LOG_LEVELS, ConfigSchema
from cli_bridge.core.config.validation import load_env_var


def log_level() -> str:
    raw_value = os.environ.get(ConfigSchema.LOG_LEVEL.name, ConfigSchema.LOG_LEVEL.default)
    parts = raw_value.split()
    level = parts[0].upper() if parts else ""
    return level if level in VALID_LOG_LEVELS else "INFO"


def log_translation_metrics() -> bool:
    return bool(load_env_var(ConfigSchema.LOG_TRANSLATION_METRICS))
