# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Silent logger implementation for testing."""

from typing import Any

from .logger import Logger, redact


class SilentLogger(Logger):
    """Logger that stores redacted log records in memory without output.

    Useful in tests that assert on what the login pipeline reported.
    Records are not filtered by level.
    """

    def __init__(self, level: str = "INFO", name: str | None = None):
        """Initialize silent logger.

        Args:
            level: Logging level (stored but not used for filtering)
            name: Optional logger name for identification
        """
        self.level = level.upper()
        self.name = name or "steam_auth"
        self.logs: list[dict[str, Any]] = []

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        kwargs.pop("exc_info", None)
        log_entry: dict[str, Any] = {
            "level": level,
            "message": message,
        }

        if kwargs:
            log_entry["extra"] = redact(kwargs)

        self.logs.append(log_entry)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def clear_logs(self) -> None:
        """Clear all stored log messages."""
        self.logs.clear()

    def get_logs(self, level: str | None = None) -> list[dict[str, Any]]:
        """Get stored log messages, optionally filtered by level.

        Args:
            level: Optional log level to filter by (DEBUG, INFO, WARNING, ERROR)

        Returns:
            List of log entries
        """
        if level is None:
            return self.logs
        return [log for log in self.logs if log["level"] == level]

    def has_log(self, message: str, level: str | None = None) -> bool:
        """Check if a log message containing ``message`` was recorded.

        Args:
            message: Message to search for (substring match)
            level: Optional log level to filter by

        Returns:
            True if message is found, False otherwise
        """
        return any(message in log["message"] for log in self.get_logs(level))
