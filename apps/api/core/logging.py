"""
Structured logging configuration for production use.

Provides JSON-formatted logs for better parsing and aggregation.
"""
import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict
from core.config import settings


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Request/plan context passed as extra={"extra_fields": {...}}
        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


def setup_logging(level: str = None, fmt: str = None):
    """
    Configure application-wide logging.

    Uses JSON format in production, text format in development.
    """
    level = level or settings.LOG_LEVEL
    fmt = fmt or settings.LOG_FORMAT
    log_level = getattr(logging, level.upper(), logging.INFO)

    if fmt == "json" or settings.ENVIRONMENT == "production":
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Per-week generation logs are DEBUG; keep uvicorn access logs quieter
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger
