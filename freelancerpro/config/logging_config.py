"""Centralized logging configuration for FreelancerPro."""

import json
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from freelancerpro.utils.logging_utils import _ContextFilter

# LogRecord attributes that are not user supplied ``extra`` fields
_RESERVED_RECORD_FIELDS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        # Fields from LogContext or extra={}
        for key, value in record.__dict__.items():
            if key in _RESERVED_RECORD_FIELDS or key.startswith("_"):
                continue
            payload[key] = value

        return json.dumps(payload, default=str)


class LoggingConfig:
    """
    Logging settings for the application.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: 'standard' or 'json'
        log_file: Path of a rotating log file, or None for console only
        enable_console: Whether to log to stderr
        max_file_size: Rotation threshold in bytes
        backup_count: Number of rotated files to keep
    """

    VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    VALID_FORMATS = {"standard", "json"}

    def __init__(
        self,
        log_level: str = "INFO",
        log_format: str = "standard",
        log_file: Optional[str] = None,
        enable_console: bool = True,
        max_file_size: int = 5 * 1024 * 1024,  # 5MB
        backup_count: int = 3,
    ):
        if log_level.upper() not in self.VALID_LEVELS:
            raise ValueError(
                f"Invalid log level: {log_level}. "
                f"Must be one of {', '.join(sorted(self.VALID_LEVELS))}"
            )

        if log_format not in self.VALID_FORMATS:
            raise ValueError(
                f"Invalid log format: {log_format}. "
                f"Must be one of {', '.join(sorted(self.VALID_FORMATS))}"
            )

        self.log_level = log_level.upper()
        self.log_format = log_format
        self.log_file = log_file
        self.enable_console = enable_console
        self.max_file_size = max_file_size
        self.backup_count = backup_count

    @classmethod
    def from_settings(cls, settings, debug: bool = False) -> "LoggingConfig":
        """
        Build logging settings from the application configuration.

        Args:
            settings: FreelancerProConfig instance
            debug: Force DEBUG level regardless of the configured level

        Returns:
            LoggingConfig instance
        """
        level = "DEBUG" if (debug or settings.debug) else settings.log_level
        return cls(
            log_level=level,
            log_format=settings.log_format,
            log_file=settings.log_file,
        )


def configure_logging(config: LoggingConfig) -> None:
    """
    Install handlers on the root logger according to ``config``.

    Any handlers installed by a previous call are removed first.
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    level = getattr(logging, config.log_level)
    root_logger.setLevel(level)

    if config.log_format == "json":
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    context_filter = _ContextFilter()
    handlers = []

    if config.enable_console:
        handlers.append(logging.StreamHandler())

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                filename=str(log_path),
                maxBytes=config.max_file_size,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root_logger.addHandler(handler)


def reset_logging() -> None:
    """Remove all root handlers and restore the default WARNING level."""
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(logging.WARNING)
