# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Abstract logger interface and redaction of sensitive structured fields."""

from abc import ABC, abstractmethod
from typing import Any

REDACTED = "***"

# Structured keys whose values must never reach a log sink
SENSITIVE_KEYS = frozenset({
    "key",
    "api_key",
    "sig",
    "openid.sig",
    "access_token",
    "id_token",
})


def redact(fields: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``fields`` with sensitive values masked.

    Nested dictionaries (for example a dump of callback parameters) are
    redacted recursively.

    Args:
        fields: Structured data passed to a log call

    Returns:
        New dictionary safe to serialize
    """
    cleaned: dict[str, Any] = {}
    for name, value in fields.items():
        if name.lower() in SENSITIVE_KEYS:
            cleaned[name] = REDACTED
        elif isinstance(value, dict):
            cleaned[name] = redact(value)
        else:
            cleaned[name] = value
    return cleaned


class Logger(ABC):
    """Abstract base class for loggers."""

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info-level message.

        Args:
            message: The log message
            **kwargs: Additional structured data to log
        """
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning-level message."""
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error-level message."""
        pass

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug-level message."""
        pass

    @abstractmethod
    def exception(self, message: str, **kwargs: Any) -> None:
        """Log an error-level message from inside an exception handler.

        Args:
            message: The log message
            **kwargs: Additional structured data to log
        """
        pass
