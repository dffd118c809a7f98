# Area: Shared
"""
nuggets_server._shared.logging_config - Structured logging setup
================================================================

Configures dual logging: terminal (colored) + file (JSON).
Provides fatal error logging and termination.
Protocol trace mode suppresses standard logs on terminal.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import InternalConsistencyError

# Package logger
logger = logging.getLogger("nuggets_server")

# Flag to control protocol-only terminal output
_protocol_mode_enabled = False


class ProtocolFilter(logging.Filter):
    """Filter that suppresses all terminal logs when protocol mode is enabled.

    In protocol mode the ProtocolLogger prints one line per datagram
    instead of the standard logging handlers.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return not _protocol_mode_enabled


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: str = "nuggets_server.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str
        Path to the log file. Defaults to 'nuggets_server.log' in current dir.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("nuggets_server")
    pkg_logger.setLevel(level)
    pkg_logger.handlers.clear()

    # Terminal handler with colors (stderr: stdout carries the port line)
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(ProtocolFilter())
    pkg_logger.addHandler(terminal_handler)

    # File handler with JSON
    try:
        log_path = Path(log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter())
        pkg_logger.addHandler(file_handler)
    except OSError as e:
        pkg_logger.warning(f"Could not create log file: {e}")

    pkg_logger.propagate = False


def log_fatal_error(error: "InternalConsistencyError") -> None:
    """Print the structured error block and record it in the log file."""
    print(error.format_error_log(), file=sys.stderr)
    logger.error(
        f"Fatal error: {error.__class__.__name__}",
        extra={"check": getattr(error, "check", None)},
    )


def log_and_terminate(error: "InternalConsistencyError", exit_code: int = 1) -> None:
    """
    Log the error and terminate the process.

    Parameters
    ----------
    error : InternalConsistencyError
        The error to log.
    exit_code : int
        Exit code for the process. Defaults to 1.
    """
    log_fatal_error(error)
    logger.critical("Process terminated due to session consistency failure")
    sys.exit(exit_code)


def enable_protocol_mode() -> None:
    """
    Enable protocol logging mode.

    In protocol mode:
    - Standard logs are suppressed from terminal
    - Only datagram trace lines are shown
    - File logging remains unchanged for debugging
    """
    global _protocol_mode_enabled
    _protocol_mode_enabled = True


def disable_protocol_mode() -> None:
    """Disable protocol logging mode (restore standard logging)."""
    global _protocol_mode_enabled
    _protocol_mode_enabled = False
