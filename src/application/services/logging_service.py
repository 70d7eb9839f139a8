"""Logging service implementation."""

import functools
import time
from datetime import datetime

from application.interfaces import ILoggingService


class LoggingService(ILoggingService):
    """
    Console logging service.

    Writes timestamped, level-tagged lines to stdout and provides timing
    helpers for operations such as catalog loading.
    """

    LEVEL_HIERARCHY = {"DEBUG": 0, "INFO": 1, "WARNING": 2, "ERROR": 3}
    LEVEL_ICONS = {"DEBUG": "🔍", "INFO": "ℹ️", "WARNING": "⚠️", "ERROR": "❌"}

    def __init__(self, log_level: str = "INFO", enable_timing: bool = True):
        """
        Initialize logging service.

        Args:
            log_level: Minimum log level to output (DEBUG, INFO, WARNING, ERROR)
            enable_timing: Whether time_operation reports durations
        """
        self.log_level = log_level.upper()
        self.enable_timing = enable_timing

    def is_enabled_for(self, level: str) -> bool:
        """Check if messages at level would be written."""
        threshold = self.LEVEL_HIERARCHY.get(self.log_level, 1)
        return self.LEVEL_HIERARCHY.get(level.upper(), 1) >= threshold

    def log(self, level: str, message: str) -> None:
        """Log a message at the specified level."""
        level = level.upper()

        if not self.is_enabled_for(level):
            return

        timestamp = datetime.now().strftime("%H:%M:%S")
        icon = self.LEVEL_ICONS.get(level, "📝")

        print(f"[{timestamp}] {icon} {level}: {message}")

    def debug(self, message: str) -> None:
        """Log debug message."""
        self.log("DEBUG", message)

    def info(self, message: str) -> None:
        """Log info message."""
        self.log("INFO", message)

    def warning(self, message: str) -> None:
        """Log warning message."""
        self.log("WARNING", message)

    def error(self, message: str) -> None:
        """Log error message."""
        self.log("ERROR", message)

    def time_operation(self, operation_name: str):
        """Context manager for timing operations."""
        return TimingContext(self, operation_name)


class TimingContext:
    """Context manager for timing operations."""

    def __init__(self, logging_service: LoggingService, operation_name: str):
        """
        Initialize timing context.

        Args:
            logging_service: Service for logging results
            operation_name: Name of operation being timed
        """
        self.logger = logging_service
        self.operation_name = operation_name
        self.start_time = None
        self.elapsed = None

    def __enter__(self):
        """Start timing."""
        self.start_time = time.perf_counter()
        if self.logger.enable_timing:
            self.logger.debug(f"⏱️ Starting {self.operation_name}...")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """End timing and log result."""
        self.elapsed = time.perf_counter() - self.start_time

        if exc_type is None:
            if self.logger.enable_timing:
                self.logger.debug(f"✅ {self.operation_name} completed in {self.elapsed:.3f}s")
        else:
            self.logger.error(f"❌ {self.operation_name} failed after {self.elapsed:.3f}s: {exc_val}")


def timing_decorator(operation_name: str):
    """Decorator to time method execution and log results through self.logger."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            logger = getattr(self, "logger", None) or getattr(self, "_logger", None)

            if not logger:
                return func(self, *args, **kwargs)

            with logger.time_operation(operation_name):
                return func(self, *args, **kwargs)

        return wrapper

    return decorator
