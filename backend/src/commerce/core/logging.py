"""Logging configuration for the commerce backend.

Sets up structured logging with color-coded, aligned output for development
and a JSON formatter for production/monitoring pipelines.
"""

import json
import logging
import sys
import traceback
from datetime import UTC, datetime
from typing import ClassVar

from .config import get_settings_instance

# Internal guard to prevent double configuration when setup_logging() is called
# both at import-time and again during lifespan startup
_LOGGING_CONFIGURED = False

# LogRecord attributes that are never treated as "extra" fields
_RESERVED_RECORD_KEYS = frozenset(
    [
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "getMessage",
    ]
)


class ColoredFormatter(logging.Formatter):
    """Colored formatter for human-readable logs."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        level_color = self.COLORS.get(record.levelname, "") if self.use_colors else ""
        reset_color = self.COLORS["RESET"] if self.use_colors else ""

        timestamp = datetime.fromtimestamp(record.created, UTC).strftime("%Y-%m-%d %H:%M:%S")

        logger_name = record.name
        if len(logger_name) > 25:
            logger_name = logger_name[:22] + "..."

        extra_fields = []
        for key, value in record.__dict__.items():
            if key in _RESERVED_RECORD_KEYS or value is None:
                continue
            # Only include short scalar extras; structured extras go to the JSON formatter
            if isinstance(value, (str, int, float, bool)) and len(str(value)) < 100:
                extra_fields.append(f"{key}={value}")

        log_line = (
            f"{timestamp} - {level_color}{record.levelname}{reset_color} - "
            f"{logger_name:25} - {record.getMessage()}"
        )
        if extra_fields:
            log_line += f" | {' '.join(extra_fields)}"

        if record.exc_info:
            exc_info = traceback.format_exception(*record.exc_info)
            log_line += f"\n{level_color}Exception:{reset_color}\n" + "".join(exc_info)

        return log_line


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging (for production/monitoring)."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            exc_type = record.exc_info[0]
            log_data["exception"] = {
                "type": exc_type.__name__ if exc_type is not None else "Unknown",
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging() -> None:
    """Configure root, application and library loggers from settings."""
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings_instance()

    use_colors = settings.environment == "development" and sys.stdout.isatty()
    formatter = JSONFormatter() if settings.log_format == "json" else ColoredFormatter(use_colors=use_colors)

    handlers: list[logging.Handler] = []
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if settings.log_file:
        file_handler = logging.FileHandler(settings.log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level))
    root_logger.handlers.clear()
    for handler in handlers:
        root_logger.addHandler(handler)

    # SQLAlchemy logs SQL at INFO, which is too verbose for normal operation
    for logger_name in ["sqlalchemy", "sqlalchemy.engine", "sqlalchemy.pool", "sqlalchemy.orm"]:
        log = logging.getLogger(logger_name)
        log.setLevel(logging.ERROR)
        log.handlers.clear()
        for handler in handlers:
            log.addHandler(handler)
        log.propagate = False

    # Uvicorn follows the app level but is capped at WARNING to reduce noise
    uvicorn_level = min(getattr(logging, settings.log_level), logging.WARNING)
    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        log = logging.getLogger(logger_name)
        log.setLevel(uvicorn_level)
        log.handlers.clear()
        for handler in handlers:
            log.addHandler(handler)
        log.propagate = False

    logging.getLogger("commerce").setLevel(getattr(logging, settings.log_level))

    logging.getLogger("commerce").info(
        "Logging configured",
        extra={
            "log_level": settings.log_level,
            "log_format": settings.log_format,
            "environment": settings.environment,
        },
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under the application logger."""
    if name == "commerce" or name.startswith("commerce."):
        return logging.getLogger(name)
    return logging.getLogger(f"commerce.{name}")


class LoggerMixin:
    """Mixin class to add logging capabilities to any class."""

    @property
    def logger(self) -> logging.Logger:
        return get_logger(self.__class__.__name__)
