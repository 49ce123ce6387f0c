"""Logging setup for MiniBank.

This is the diagnostic log (operations accepted and rejected). It is separate
from the BankSystem's transaction log, which only records successes.
"""

import json
import logging
from datetime import datetime, timezone

LOGGER_NAME = "minibank"

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "operation": getattr(record, "operation", None),
            "account_number": getattr(record, "account_number", None),
            "error": getattr(record, "error", None),
        }

        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str, ensure_ascii=False)


def setup_logging(level: str = "INFO", log_format: str = "text",
                  logger_name: str = LOGGER_NAME) -> logging.Logger:
    """Install a single stream handler on the MiniBank logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: ``text`` or ``json``
        logger_name: Logger to configure

    Returns:
        The configured logger

    Raises:
        ValueError: If ``level`` or ``log_format`` is not recognised
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    if log_format not in ("text", "json"):
        raise ValueError(f"Unknown log format: {log_format}")

    logger = logging.getLogger(logger_name)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    return logger
