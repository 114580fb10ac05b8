"""Logging configuration with structured JSON output."""

import logging
import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .config import settings


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Fields passed as logger.info(..., extra={"extra": {...}})
        if hasattr(record, "extra"):
            log_data.update(record.extra)

        return json.dumps(log_data)


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Send the library's logs to stdout as JSON.

    Meant for scripts; applications embedding the library configure
    logging themselves and never need to call this.

    Args:
        level: Log level name (uses settings if not provided)

    Returns:
        The configured "qbitweb" logger
    """
    logger.setLevel(getattr(logging, level or settings.log_level))

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)

    # Records are handled here, not again by the root logger
    logger.propagate = False

    return logger


# Library logger; silent until the host application or setup_logging() configures it
logger = logging.getLogger("qbitweb")
logger.addHandler(logging.NullHandler())
