"""Loading and checking of the LOG_* environment variables.

``load_env_var`` coerces one variable according to its EnvVarSpec and raises
ConfigError on a value it cannot accept. ``validate_all`` reports every bad
variable at once for ``cli-bridge config validate``.
"""

import os
from typing import Any

from cli_bridge.core.config.schema import ConfigSchema, EnvVarSpec


class ConfigError(Exception):
    """An environment variable holds a value the schema rejects.

    Attributes:
        env_var: The environment variable name
        value: The raw value as found in the environment
        message: What is wrong with it
    """

    def __init__(self, env_var: str, value: str, message: str) -> None:
        self.env_var = env_var
        self.value = value
        self.message = message
        super().__init__(f"{env_var}={value}: {message}")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "on")


def load_env_var(spec: EnvVarSpec) -> Any:
    """Read ``spec.name`` from the environment, or return its default.

    Booleans go through ``_parse_bool`` and never fail; strings go through
    the EnvVarSpec's ``coerce`` and ``validator`` (LOG_LEVEL accepts only the
    standard level names).

    Raises:
        ConfigError: If the validator rejects the coerced value
    """
    raw_value = os.environ.get(spec.name)
    if raw_value is None:
        return spec.default

    if spec.type_hint is bool:
        value: Any = _parse_bool(raw_value)
    elif spec.coerce is not None:
        value = spec.coerce(raw_value)
    else:
        value = raw_value

    if spec.validator is not None and not spec.validator(value):
        raise ConfigError(spec.name, raw_value, f"Not a valid {spec.name} value")

    return value


def validate_all() -> list[ConfigError]:
    """Return a ConfigError for every variable that fails to load.

    Example:
        errors = validate_all()
        if errors:
            for error in errors:
                print(f"Configuration error: {error}")
            sys.exit(1)
    """
    errors: list[ConfigError] = []
    for spec in ConfigSchema.all_specs().values():
        try:
            load_env_var(spec)
        except ConfigError as e:
            errors.append(e)
    return errors
