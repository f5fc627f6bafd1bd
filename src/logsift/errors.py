"""Error definitions for logsift.

Parsing, query composition and sampling never raise on malformed input;
they degrade to documented defaults instead. The errors below cover the
few places where failing loudly is correct, such as an unreadable
settings file.

Usage:
    from logsift.errors import ConfigurationError, LogsiftError

    try:
        settings = load_settings(path)
    except ConfigurationError as e:
        print(e.to_dict())
"""

from __future__ import annotations


class LogsiftError(Exception):
    """Base exception for all logsift errors.

    Attributes:
        code: Error code for categorization
        details: Additional error details for debugging
    """

    code: str = "LOGSIFT_ERROR"
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(LogsiftError):
    """Settings could not be loaded or failed validation."""

    code = "CONFIGURATION_ERROR"
    default_message = "Invalid logsift configuration"


__all__ = [
    "LogsiftError",
    "ConfigurationError",
]
