# utils/logger.py
# This file is part of LogicParser - A Propositional Logic Toolkit
#
# Logging utility for formula processing with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LogicLogger:
    """Centralized logger for the parsing pipeline and the interactive session."""

    def __init__(self, name: str = "logic_parser", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

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
        console_handler.setFormatter(LogicFormatter())

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
        """Log info message (session output)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Session output helpers
    def task_header(self, title: str):
        """Log the banner that opens one step of the session."""
        self.info(f"\n--- {title} ---")

    def result(self, label: str, value):
        """Log a labelled result line."""
        self.info(f"{label}: {value}")

    def validity_summary(self, valid_count: int, invalid_count: int, is_tautology: bool):
        """Log the clause validity analysis of a CNF formula."""
        self.info("\nCNF Clause Validity Analysis:")
        self.info(f"Valid (tautological) clauses: {valid_count}")
        self.info(f"Non-tautological clauses: {invalid_count}")
        if is_tautology:
            self.info("The CNF is valid (all clauses are tautologies).")
        else:
            self.info("The CNF is not valid (some clauses are not tautologies).")


class LogicFormatter(logging.Formatter):
    """Custom formatter with clean output for session messages."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[LogicLogger] = None


def get_logger(name: str = "logic_parser") -> LogicLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "logic_parser")

    Returns:
        LogicLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = LogicLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(debug: bool = False):
    """Configure logging based on command line flags.

    Session output is written at INFO, so INFO is the floor.

    Args:
        debug: Enable debug output
    """
    set_log_level(LogLevel.DEBUG if debug else LogLevel.INFO)
