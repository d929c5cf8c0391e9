"""Structured logging utilities with context support."""

import functools
import logging
import threading
import uuid
from typing import Any, Callable, Dict, Optional

# Thread-local storage for log context
_thread_local = threading.local()

# Field names whose values never reach a log line
SENSITIVE_FIELDS = {
    "password",
    "token",
    "secret",
    "credentials",
}

REDACTED = "***REDACTED***"


def generate_correlation_id() -> str:
    """Return a fresh id for tying together the log lines of one command."""
    return uuid.uuid4().hex[:12]


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields currently attached to log records."""
    return dict(getattr(_thread_local, "context", {}))


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields live in thread-local storage and are copied onto every record
    by the filter that ``configure_logging`` installs.

    Example:
        with LogContext(user_id="demo-user-1", command="move-task"):
            logger.info("Moving task")
    """

    def __init__(self, **kwargs):
        self.fields = kwargs
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self):
        if not hasattr(_thread_local, "context"):
            _thread_local.context = {}

        self.previous_context = _thread_local.context.copy()
        _thread_local.context.update(self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _thread_local.context = self.previous_context or {}


class _ContextFilter(logging.Filter):
    """Logging filter that copies LogContext fields onto records."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in getattr(_thread_local, "context", {}).items():
            setattr(record, key, value)
        return True


def sanitize_sensitive_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Redact sensitive values in a (possibly nested) dictionary.

    Used before logging entity dumps such as user records.

    Args:
        data: Dictionary to sanitize

    Returns:
        A new dictionary with sensitive values replaced
    """
    if not isinstance(data, dict):
        return data

    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(sensitive in key.lower() for sensitive in SENSITIVE_FIELDS):
            sanitized[key] = REDACTED if value else value
        elif isinstance(value, dict):
            sanitized[key] = sanitize_sensitive_data(value)
        else:
            sanitized[key] = value

    return sanitized


def log_function_call(
    func: Optional[Callable] = None, *, include_args: bool = False, level: str = "DEBUG"
) -> Callable:
    """
    Decorator logging entry, exit and exceptions of a function.

    Works both bare (``@log_function_call``) and with arguments
    (``@log_function_call(include_args=True)``). ``self`` is never
    included in the logged arguments.
    """

    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger(f.__module__)
            log_level = getattr(logging, level.upper())

            if include_args:
                shown = args[1:] if args and hasattr(args[0], f.__name__) else args
                args_repr = [repr(a) for a in shown]
                kwargs_repr = [f"{k}={v!r}" for k, v in kwargs.items()]
                signature = ", ".join(args_repr + kwargs_repr)
                logger.log(log_level, f"Entering {f.__name__}({signature})")
            else:
                logger.log(log_level, f"Entering {f.__name__}")

            try:
                result = f(*args, **kwargs)
            except Exception as e:
                logger.error(f"Exception in {f.__name__}: {type(e).__name__}: {e}")
                raise

            logger.log(log_level, f"Exiting {f.__name__}")
            return result

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
