# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Stdout logger implementation with structured JSON output."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from .logger import Logger, redact

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class StdoutLogger(Logger):
    """Logger that writes one redacted JSON object per line to stdout."""

    def __init__(self, level: str = "INFO", name: str | None = None):
        """Initialize stdout logger.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR)
            name: Optional logger name for identification
        """
        self.level = level.upper()
        self.name = name or "steam_auth"

        if self.level not in _LEVELS:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(_LEVELS.keys())}")

        # Mirror records into stdlib logging so caplog and handlers can capture them
        self._stdlib_logger = logging.getLogger(self.name)
        self._stdlib_logger.setLevel(logging.NOTSET)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if _LEVELS[level] < _LEVELS[self.level]:
            return

        exc_info = kwargs.pop("exc_info", None)
        fields = redact(kwargs)

        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "logger": self.name,
            "message": message,
        }
        if fields:
            log_entry["extra"] = fields

        try:
            print(json.dumps(log_entry, default=str), file=sys.stdout, flush=True)
        except (TypeError, ValueError) as e:
            print(f"{level}: {message} (JSON serialization failed: {e})", file=sys.stderr, flush=True)

        extra = {"extra": fields} if fields else None
        self._stdlib_logger.log(_LEVELS[level], message, exc_info=exc_info, extra=extra)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log an error-level message with exception context."""
        kwargs.setdefault("exc_info", True)
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)
