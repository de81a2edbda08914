"""Logging interface and implementations."""

import re
import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional, TextIO


_SIGNATURE_RE = re.compile(r"(signature=)[0-9a-fA-F]+")


def redact_query(query: str) -> str:
    """Mask the signature value in a query string or URL."""
    return _SIGNATURE_RE.sub(r"\1<redacted>", query)


class LogLevel(str, Enum):
    """Log level enumeration."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    NONE = "none"


class Logger(ABC):
    """Abstract logger interface.

    Messages may carry ``%``-style arguments, formatted only when the
    message is actually emitted.
    """

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None:
        """Log debug message."""

    @abstractmethod
    def info(self, message: str, *args: Any) -> None:
        """Log info message."""

    @abstractmethod
    def warn(self, message: str, *args: Any) -> None:
        """Log warning message."""

    @abstractmethod
    def error(self, message: str, *args: Any) -> None:
        """Log error message."""


class ConsoleLogger(Logger):
    """Console logger with configurable level, prefix and output stream."""

    _LEVELS = {
        LogLevel.DEBUG: 0,
        LogLevel.INFO: 1,
        LogLevel.WARN: 2,
        LogLevel.ERROR: 3,
        LogLevel.NONE: 4,
    }

    def __init__(
        self,
        level: LogLevel = LogLevel.WARN,
        prefix: str = "[Binance SDK]",
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize console logger.

        Args:
            level: Minimum log level to display
            prefix: Prefix for log messages
            stream: Output stream, stdout when omitted
        """
        self.level = level
        self.prefix = prefix
        self._stream = stream

    def _emit(self, level: LogLevel, message: str, args: tuple) -> None:
        if self._LEVELS[level] < self._LEVELS[self.level]:
            return
        if args:
            message = message % args
        # Looked up per call so a redirected sys.stdout is honoured.
        stream = self._stream or sys.stdout
        print(f"{self.prefix} {level.value.upper()}: {message}", file=stream)

    def debug(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.DEBUG, message, args)

    def info(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.INFO, message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.WARN, message, args)

    def error(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.ERROR, message, args)

    def set_level(self, level: LogLevel) -> None:
        """Set log level."""
        self.level = level

    def get_level(self) -> LogLevel:
        """Get current log level."""
        return self.level


class NoopLogger(Logger):
    """No-op logger that discards all log messages."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warn(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass
