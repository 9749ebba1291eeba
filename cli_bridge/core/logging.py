import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from cli_bridge.core.config.accessors import log_level as configured_log_level
from cli_bridge.core.config.schema import VALID_LOG_LEVELS

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"


class ConversationLogger:
    """Logger with correlation ID support"""

    @staticmethod
    def get_logger() -> logging.Logger:
        return logging.getLogger("conversation")

    @staticmethod
    @contextmanager
    def correlation_context(request_id: str) -> Generator[None, None, None]:
        """Attach ``request_id`` to every record created inside the block."""
        old_factory = logging.getLogRecordFactory()

        def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = old_factory(*args, **kwargs)
            record.correlation_id = request_id
            return record

        logging.setLogRecordFactory(record_factory)
        try:
            yield
        finally:
            logging.setLogRecordFactory(old_factory)


class CorrelationFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            # Work on a copy so other handlers see the original message
            record = logging.makeLogRecord(record.__dict__)
            record.msg = f"[{str(correlation_id)[:8]}] {record.msg}"
        return super().format(record)


def configure_root_logging(log_level: str | None = None) -> str:
    """Install the correlation-aware stream handler on the root logger.

    Args:
        log_level: Level name to use. When omitted, LOG_LEVEL from the
            environment is used (INFO if unset or unrecognised).

    Returns:
        The effective level name.
    """
    level = configured_log_level() if log_level is None else log_level.upper()
    if level not in VALID_LOG_LEVELS:
        level = "INFO"

    handler = logging.StreamHandler()
    handler.setFormatter(CorrelationFormatter(LOG_FORMAT, datefmt=LOG_DATEFMT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level))

    logging.getLogger(__name__).debug(f"Logging configured at {level}")
    return level
