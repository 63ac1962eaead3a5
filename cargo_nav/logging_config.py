"""Centralized logging configuration for cargo-nav."""

import logging
import sys

# Handler installed by setup_logging, removed by teardown_logging
_HANDLER: logging.Handler | None = None


class _LevelPrefixFormatter(logging.Formatter):
    """Plain message for INFO, ``[LEVEL] message`` for everything else."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno == logging.INFO:
            return message
        return f"[{record.levelname}] {message}"


def setup_logging(debug: bool = False) -> None:
    """
    Configure the ``cargo_nav`` logger for one CLI invocation.

    Args:
        debug: Emit DEBUG records (request/response detail, failure causes)
    """
    global _HANDLER
    teardown_logging()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_LevelPrefixFormatter("%(message)s"))

    logger = logging.getLogger("cargo_nav")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    _HANDLER = handler

    urllib3_logger = logging.getLogger("urllib3")
    if debug:
        # Connection and redirect detail from the HTTP client
        urllib3_logger.addHandler(handler)
        urllib3_logger.setLevel(logging.DEBUG)
    else:
        # Suppress noisy third-party loggers
        urllib3_logger.setLevel(logging.WARNING)


def teardown_logging() -> None:
    """Remove the handler installed by setup_logging and restore defaults."""
    global _HANDLER
    if _HANDLER is None:
        return

    logger = logging.getLogger("cargo_nav")
    logger.removeHandler(_HANDLER)
    _HANDLER.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

    urllib3_logger = logging.getLogger("urllib3")
    urllib3_logger.removeHandler(_HANDLER)
    urllib3_logger.setLevel(logging.NOTSET)
    _HANDLER = None
