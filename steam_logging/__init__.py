# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Structured logging for the steam-auth adapter.

Provides a small logging abstraction so the login pipeline can emit
structured events (callback received, assertion rejected, profile fetched)
without binding to a particular backend. Sensitive fields such as the Web
API key or the OpenID signature are redacted before anything is written.

Example:
    >>> from steam_logging import create_logger
    >>> logger = create_logger(logger_type="stdout", level="INFO", name="steam_auth")
    >>> logger.info("Assertion verified", steam_id="76561197960287930")
    >>>
    >>> # Capture logs in memory for tests
    >>> test_logger = create_logger(logger_type="silent")
    >>> test_logger.info("Test message")
"""

__version__ = "0.1.0"

from .factory import create_logger
from .logger import Logger, redact
from .silent_logger import SilentLogger
from .stdout_logger import StdoutLogger

__all__ = [
    "__version__",
    "Logger",
    "SilentLogger",
    "StdoutLogger",
    "create_logger",
    "redact",
]
