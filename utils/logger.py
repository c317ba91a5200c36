# utils/logger.py
# This file is part of Arbor - A Propositional Truth Tree Builder
#
# Logging utility for truth tree construction with configurable levels

import logging
import sys
from enum import Enum
from typing import Iterable, Optional


class LogLevel(Enum):
    """Log levels for truth tree construction."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TableauLogger:
    """Centralized logger for truth tree construction with emoji support and structured output."""

    def __init__(self, name: str = "truth_tree", level: LogLevel = LogLevel.INFO):
        """Initialize the truth tree logger.

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
        console_handler.setFormatter(TableauFormatter())

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
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for truth tree events
    def tableau_start(self, premises: Iterable[str]):
        """Log tableau initialization."""
        self.debug("=== Starting Truth Tree ===")
        for index, premise in enumerate(premises, start=1):
            self.debug(f"Premise {index}: {premise}")

    def node_expanded(self, node_id: int, formula: str, added_ids: Iterable[int]):
        """Log a successful expansion."""
        added = ", ".join(str(i) for i in added_ids) or "none (branch closed)"
        self.debug(f"    🌱 Expanded [{node_id}] {formula} → added nodes: {added}")

    def branch_closed(self, node_id: int, partner_id: int, closed_count: int):
        """Log a successful branch closure."""
        self.debug(
            f"    ❌ Closed branch at [{node_id}] against [{partner_id}] "
            f"({closed_count} nodes closed)"
        )

    def operation_rejected(self, operation: str, reason: str):
        """Log a refused tableau operation."""
        self.debug(f"    💥 {operation} rejected: {reason}")

    def final_status(self, status: str):
        """Log the tableau status reported to the user."""
        self.info(f"\n>>> TREE STATUS: {status} <<<")


class TableauFormatter(logging.Formatter):
    """Custom formatter for truth tree logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TableauLogger] = None


def get_logger(name: str = "truth_tree") -> TableauLogger:
    """Get or create the global truth tree logger instance.

    Args:
        name: Logger name (default: "truth_tree")

    Returns:
        TableauLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TableauLogger(name)
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
