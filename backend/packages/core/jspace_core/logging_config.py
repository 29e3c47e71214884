"""
Logging configuration.

Every module obtains its logger through ``get_logger(__name__)`` and
passes structured context with ``extra={...}``. ``init_logging`` is
called once by the application entry point.
"""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

_TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def init_logging(level: str = "INFO", fmt: str = "json") -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        fmt: "json" for structured output, anything else for plain text.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(
            JsonFormatter(_JSON_FORMAT, rename_fields={"levelname": "level"})
        )
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    # Translation SDKs are chatty at INFO
    for noisy in ("httpx", "httpcore", "deepl", "openai"):
        logging.getLogger(noisy).setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)
