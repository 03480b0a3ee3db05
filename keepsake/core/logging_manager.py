#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for content loads, asset indexing and export runs.

Every CLI run gets a KeepsakeLogger writing two rotated files under
<log_dir>:

    <component>.log   operations, skipped entries, unresolved images
    errors.log        exceptions with context and traceback

Library code takes an optional logger and calls it through safe_logger(),
so code that runs without a CLI (tests, imports) needs no logging setup.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import traceback
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3

FILE_FORMAT = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
CONSOLE_FORMAT = logging.Formatter("%(message)s")


def _format_details(details: Optional[Dict[str, Any]]) -> str:
    return f": {json.dumps(details, default=str, sort_keys=True)}" if details else ""


class KeepsakeLogger:
    """
    File logger for one CLI component ('pipeline', 'validators').

    Warnings are echoed to stderr so a skipped entry or a missing image is
    visible without opening the log.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Prefix of the logger names and of the component log
    """

    def __init__(self, log_dir: Path, component_name: str = "keepsake") -> None:
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._file_logger(
            "operations", self.log_dir / f"{component_name}.log", logging.DEBUG
        )
        self.error_logger = self._file_logger(
            "errors", self.log_dir / "errors.log", logging.ERROR
        )

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(CONSOLE_FORMAT)
        self.main_logger.addHandler(console)

    def _file_logger(self, suffix: str, file_path: Path, level: int) -> logging.Logger:
        logger = logging.getLogger(f"{self.component_name}.{suffix}")
        logger.setLevel(level)
        logger.propagate = False
        # A second KeepsakeLogger for the same component replaces the handlers
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        handler = RotatingFileHandler(
            file_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
        handler.setLevel(level)
        handler.setFormatter(FILE_FORMAT)
        logger.addHandler(handler)
        return logger

    def close(self) -> None:
        """Close and detach all handlers (releases log files)."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def _emit(
        self, level: int, label: str, message: str, details: Optional[Dict[str, Any]]
    ) -> None:
        self.main_logger.log(level, f"{label} - {message}{_format_details(details)}")

    # ---- Operations ----
    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Record a finished operation (load_blog, export_json, ...).

        Args:
            operation: Operation name
            details: Counters or parameters, written as JSON
        """
        self._emit(logging.INFO, "OPERATION", operation, details or {})

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.DEBUG, "DEBUG", message, details)

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self._emit(logging.WARNING, "WARNING", message, details)

    def log_entry_skipped(self, collection: str, slug: str, error: Exception) -> None:
        """Warn that an entry was left out of a listing."""
        self.log_warning(
            f"Skipping {collection} entry '{slug}'",
            {"reason": str(error), "error": type(error).__name__},
        )

    # ---- Errors ----
    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Write an exception, its context and the current traceback to errors.log.

        Args:
            error: Exception that occurred
            context: Where it happened (collection, slug, step)
        """
        lines = [f"ERROR - {type(error).__name__}: {error}"]
        if context:
            lines.append("Context: " + ", ".join(f"{k}={v}" for k, v in context.items()))
        lines.append(f"Traceback:\n{traceback.format_exc()}")
        for line in lines:
            self.error_logger.error(line)

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error raised by a command and return its one-line CLI form.

        Examples:
            >>> logger.log_cli_error(EntryNotFoundError("Blog entry not found: x"))
            '❌ EntryNotFoundError: Blog entry not found: x'
        """
        self.log_error(error, context or {"source": "cli"})
        return format_cli_error(error, show_traceback)


def format_cli_error(error: Exception, show_traceback: bool = False) -> str:
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback:
        message += f"\n\n{traceback.format_exc()}"
    return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed command and exit.

    Logs the error with the operation name and any extra context (collection,
    slug), prints one line to stderr (plus the traceback with -v) and calls
    sys.exit(exit_code). Never returns.
    """
    obj = ctx.obj or {}
    logger: Optional[KeepsakeLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    error_msg = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)

    click.echo(error_msg, err=True)
    sys.exit(exit_code)


class NullLogger:
    """Logger with the KeepsakeLogger interface that records nothing."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_entry_skipped(self, collection: str, slug: str, error: Exception) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return format_cli_error(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[KeepsakeLogger]) -> KeepsakeLogger:
    """
    Return the given logger, or a shared NullLogger when it is None.

        safe_logger(self.logger).log_warning("Image not found", {...})
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
