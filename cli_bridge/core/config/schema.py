"""Declarative schema for environment variable configuration.

This module provides a single source of truth for all environment variables,
with the coercion and validation rules for each one.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EnvVarSpec:
    """Specification for a single environment variable.

    Attributes:
        name: Environment variable name (e.g., "LOG_LEVEL")
        default: Default value if env var not set
        type_hint: Type for validation (int, str, float, bool)
        description: Human-readable description for docs
        validator: Optional custom validation function
        coerce: Optional function to convert string to target type
    """

    name: str
    default: Any
    type_hint: type
    description: str
    validator: Callable[[Any], bool] | None = None
    coerce: Callable[[str], Any] | None = None


def _first_word_upper(value: str) -> str:
    # Tolerate trailing comments such as "DEBUG  # verbose"
    parts = value.split()
    return parts[0].upper() if parts else ""


class ConfigSchema:
    """Registry of all configuration environment variables."""

    # === Logging Settings ===

    LOG_LEVEL = EnvVarSpec(
        name="LOG_LEVEL",
        default="INFO",
        type_hint=str,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        validator=lambda x: x in VALID_LOG_LEVELS,
        coerce=_first_word_upper,
    )

    LOG_TRANSLATION_METRICS = EnvVarSpec(
        name="LOG_TRANSLATION_METRICS",
        default=False,
        type_hint=bool,
        description="Log a summary line for every translated request",
    )

    @classmethod
    def all_specs(cls) -> dict[str, EnvVarSpec]:
        """Get all environment variable specifications.

        Returns:
            Dictionary mapping spec names to EnvVarSpec objects
        """
        return {
            name: getattr(cls, name)
            for name in dir(cls)
            if isinstance(getattr(cls, name), EnvVarSpec)
        }
