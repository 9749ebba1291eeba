"""Context managers for test isolation without mutating global state."""

import os
from collections.abc import Generator
from contextlib import contextmanager

from cli_bridge.core.config.config import Config


@contextmanager
def temporary_config(env_overrides: dict[str, str] | None = None) -> Generator[Config, None, None]:
    """Create a temporary config instance for testing.

    Args:
        env_overrides: Environment variables to set for this context.

    Yields:
        A new Config instance built from the overridden environment

    Example:
        with temporary_config({"LOG_LEVEL": "DEBUG"}) as config:
            assert config.log_level == "DEBUG"
        # Original environment restored automatically
    """
    original_env = os.environ.copy()
    try:
        if env_overrides:
            os.environ.update(env_overrides)
        yield Config()
    finally:
        os.environ.clear()
        os.environ.update(original_env)
