# adapters/utils/logger.py

"""
Simple logger that writes to both stdout and a log file.
Implements the Logger port so services can be handed one directly.
"""

import os
from datetime import datetime, timezone
from pathlib import Path

from domain.ports import Logger


class DualLogger(Logger):
    """
    Logger that writes to both stdout and a file.

    Usage:
        log = DualLogger()
        log("Starting status reporter...")
        log.info("Connected to database", {"database": "geckowatch"})
        log.error("Failed to load readings", exception=e)
    """

    def __init__(self, log_file: str | None = None):
        """
        Initialize the logger.

        Args:
            log_file: Path to log file. If None, uses LOG_FILE env var.
                      If neither is set, only writes to stdout.
        """
        self.log_file = log_file or os.getenv("LOG_FILE")
        self._file_handle = None

        if self.log_file:
            Path(self.log_file).parent.mkdir(parents=True, exist_ok=True)
            self._file_handle = open(self.log_file, "a", buffering=1)  # Line buffered

    def __call__(self, message: str = ""):
        """Log a message (same as print)."""
        self._write(message)

    def _write(self, message: str, level: str = "", context: dict = None, exception: Exception = None):
        """Write to stdout and file."""
        if context:
            details = ", ".join(f"{key}={value}" for key, value in context.items())
            message = f"{message} ({details})"
        if exception is not None:
            message = f"{message}: {type(exception).__name__}: {exception}"

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        if level:
            formatted = f"[{timestamp}] [{level}] {message}"
        else:
            formatted = message

        print(message, flush=True)

        if self._file_handle:
            self._file_handle.write(f"{formatted}\n")
            self._file_handle.flush()

    def info(self, message: str, context: dict = None):
        self._write(message, "INFO", context)

    def warning(self, message: str, context: dict = None):
        self._write(message, "WARN", context)

    def error(self, message: str, context: dict = None, exception: Exception = None):
        self._write(message, "ERROR", context, exception)

    def debug(self, message: str, context: dict = None):
        self._write(message, "DEBUG", context)

    def close(self):
        """Close the log file."""
        if self._file_handle:
            self._file_handle.close()
            self._file_handle = None


# Global logger instance
_logger: DualLogger | None = None


def get_logger() -> DualLogger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = DualLogger()
    return _logger


def log(message: str = ""):
    """Convenience function to log a message."""
    get_logger()(message)
