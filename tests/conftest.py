"""Shared pytest configuration and fixtures for cli-bridge tests."""

import logging

import pytest

CONFIG_ENV_VARS = ("LOG_LEVEL", "LOG_TRANSLATION_METRICS")


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Run every test without config from the developer's shell or .env file."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way pytest configured it."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def chat_request():
    return {
        "model": "claude-code-cli/claude-sonnet-4",
        "messages": [
            {"role": "system", "content": "Be terse."},
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"},
            {"role": "user", "content": [{"type": "text", "text": "more"}]},
        ],
        "user": "session-1234567890",
        "temperature": 0.2,
    }


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (fast, no external deps)")
