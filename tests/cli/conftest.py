import pytest


@pytest.fixture(autouse=True)
def _isolate_root_logging(restore_root_logging):
    """The CLI callback reconfigures the root logger on every invocation."""
    yield
