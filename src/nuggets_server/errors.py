# Area: Shared
"""
nuggets_server.errors - Custom exception classes
================================================

Defines the exception hierarchy for the server.
Startup errors carry the process exit code; consistency errors carry
enough context for a structured fatal log block.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import json


class NuggetsServerError(Exception):
    """Base exception for all nuggets server errors."""
    pass


class ConfigurationError(NuggetsServerError):
    """Raised when the server cannot start with the given arguments."""

    exit_code = 1

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UsageError(ConfigurationError):
    """Wrong arguments or an invalid configuration value."""

    exit_code = 1


class MapFileError(ConfigurationError):
    """Map file is missing, unreadable or malformed."""

    exit_code = 2

    def __init__(self, path: str, reason: str = "is not a readable file"):
        self.path = path
        self.reason = reason
        super().__init__(f"{path} {reason}")


class InvalidSeedError(ConfigurationError):
    """Seed argument is not a non-negative integer."""

    exit_code = 3

    def __init__(self, seed: str):
        self.seed = seed
        super().__init__(f"{seed} is not a valid seed")


class InternalConsistencyError(NuggetsServerError):
    """Raised when session bookkeeping breaks an invariant.

    Reaching this is a programming error; the runner terminates.
    """

    def __init__(self, check: str, details: Optional[Dict[str, Any]] = None):
        self.check = check
        self.details = details or {}
        super().__init__(f"Consistency check '{check}' failed: {self.details}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="INTERNAL_CONSISTENCY_FAILURE",
            check=self.check,
            details=self.details,
        )


def _format_error_block(
    error_type: str,
    check: str,
    details: Dict[str, Any],
) -> str:
    """Format a structured fatal error block."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " SESSION ERROR - PROCESS TERMINATED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Check:        {check}",
        "",
        " ── DETAILS " + "─" * 52,
        _indent_json(details),
        "",
        "=" * 64,
        "",
    ]
    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"
