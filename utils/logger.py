# utils/logger.py
# This file is part of Veritas - A Propositional Truth Table Toolkit
#
# Logging utility for formula parsing and tabulation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for truth table generation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class VeritasLogger:
    """Centralized logger for parsing and tabulation with structured output."""

    def __init__(self, name: str = "veritas", level: LogLevel = LogLevel.INFO):
        """Initialize the Veritas logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(VeritasFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (results and progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for formula processing events
    def formula_parsed(self, source: str, tree) -> None:
        """Log a successfully parsed formula together with its tree."""
        if not self.logger.isEnabledFor(logging.DEBUG):
            return
        self.debug(f"Parsed {source.strip()!r} as {tree}")

    def table_built(self, variables, row_count: int) -> None:
        """Log truth table construction."""
        columns = ", ".join(variables) if variables else "<none>"
        self.debug(f"Truth table over [{columns}]: {row_count} row(s)")

    def classification(self, formula: str, verdict: str) -> None:
        """Log the tautology/contradiction classification of a formula."""
        self.info(f"{formula} is {verdict}")

    def limit_exceeded(self, count: int, limit: int) -> None:
        """Log a refused formula with too many variables."""
        self.error(
            f"Formula has {count} variables, more than the limit of {limit} "
            f"({2 ** count} rows)"
        )


class VeritasFormatter(logging.Formatter):
    """Custom formatter for Veritas logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[VeritasLogger] = None


def get_logger(name: str = "veritas") -> VeritasLogger:
    """Get or create the global Veritas logger instance.

    Args:
        name: Logger name (default: "veritas")

    Returns:
        VeritasLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = VeritasLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
