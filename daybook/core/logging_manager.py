#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Centralized logging for daybook conversions.

Every run writes a rotating operations log for its component and a shared
errors-only log. Warnings also go to the console.

Message layout, one line per call::

    OPERATION - convert_file_start: {"input": "journal.txt"}
    WARNING - Duplicate entry for 20210305.md, overwriting: {"date_text": "..."}
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


FILE_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
)
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _with_details(label: str, message: str, details: Optional[Dict[str, Any]]) -> str:
    """Render ``LABEL - message[: {json}]``."""
    line = f"{label} - {message}"
    if details:
        line += f": {json.dumps(details, default=str)}"
    return line


class DaybookLogger:
    """
    Structured logger for conversion runs.

    One logger pair per component: ``<component>.operations`` (DEBUG and up,
    to ``<component>.log`` and WARNING and up to the console) and
    ``<component>.errors`` (ERROR only, to ``errors.log``). Creating a second
    DaybookLogger for the same component replaces the first one's handlers.

    Attributes:
        log_dir: Directory for log files
        component_name: Name of the component using this logger
        main_logger: Logger for all operations
        error_logger: Dedicated logger for errors only
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "daybook",
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.main_logger = self._attach(
            "operations", f"{component_name}.log", logging.DEBUG
        )
        self.error_logger = self._attach("errors", "errors.log", logging.ERROR)

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self.main_logger.addHandler(console)

    def _attach(self, channel: str, file_name: str, level: int) -> logging.Logger:
        logger = logging.getLogger(f"{self.component_name}.{channel}")
        logger.setLevel(level)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        handler = RotatingFileHandler(
            self.log_dir / file_name,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        return logger

    def close(self) -> None:
        """Flush and detach all handlers so log files are released."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    # --- Operation log ---
    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log a start/complete marker; details are always serialized."""
        self.main_logger.info(
            f"OPERATION - {operation}: {json.dumps(details or {}, default=str)}"
        )

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(_with_details("DEBUG", message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(_with_details("INFO", message, details))

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.warning(_with_details("WARNING", message, details))

    # --- Error log ---
    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Write the error, its context and the active traceback to errors.log.

        Args:
            error: Exception that occurred
            context: Optional key/value context (input path, date text, ...)
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            pairs = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {pairs}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log the error and return the one-line message shown by the CLI.

        Examples:
            >>> logger.log_cli_error(DateParseError("someday"))
            "❌ DateParseError: Could not parse date: 'someday'"
        """
        self.log_error(error, context or {"source": "cli"})
        return cli_error_message(error, show_traceback)


def cli_error_message(error: Exception, show_traceback: bool = False) -> str:
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback:
        return f"{message}\n\n{traceback.format_exc()}"
    return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Log a command failure, print it to stderr and exit. Never returns.

    The logger and verbose flag are read from ``ctx.obj``; with verbose
    the traceback is printed too.
    """
    logger: Optional[DaybookLogger] = ctx.obj.get("logger")
    verbose: bool = ctx.obj.get("verbose", False)

    context: Dict[str, Any] = {"operation": operation, **(additional_context or {})}
    click.echo(
        safe_logger(logger).log_cli_error(error, context, show_traceback=verbose),
        err=True,
    )
    sys.exit(exit_code)


class NullLogger:
    """DaybookLogger stand-in whose methods do nothing."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return cli_error_message(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[DaybookLogger]) -> DaybookLogger:
    """Return ``logger``, or the shared NullLogger when it is None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
