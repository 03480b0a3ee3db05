#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for Keepsake commands.

Functions:
    setup_logger: Initialize KeepsakeLogger for CLI operations

Classes:
    OperationStats: Base class for all statistics
    LoadStats: For collection loads (entries loaded/skipped, images dropped)
    ExportStats: For export and publish operations

Usage:
    from keepsake.core.cli import setup_logger, LoadStats

    logger = setup_logger(log_dir, "pipeline")
    stats = LoadStats()
    stats.entries_loaded += 1
    click.echo(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, Optional

# --- Local imports ---
from keepsake.core.logging_manager import KeepsakeLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> KeepsakeLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a KeepsakeLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'pipeline')

    Returns:
        Configured KeepsakeLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return KeepsakeLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def duration(self) -> float:
        """
        Get elapsed time in seconds (cached after first call).

        Returns:
            Seconds elapsed since start_time
        """
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        """Get formatted summary string."""
        return f"{self.errors} errors, {self.duration():.2f}s"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {"errors": self.errors, "duration": self.duration()}


@dataclass
class LoadStats(OperationStats):
    """
    Statistics for a collection load.

    Attributes:
        entries_discovered: Entry directories found under the root
        entries_loaded: Entries that parsed and validated
        entries_skipped: Entries dropped for invalid metadata
        images_resolved: Image references resolved to URLs
        images_dropped: Image references that missed the asset index
    """
    entries_discovered: int = 0
    entries_loaded: int = 0
    entries_skipped: int = 0
    images_resolved: int = 0
    images_dropped: int = 0

    def summary(self) -> str:
        """Get formatted summary with entry and image metrics."""
        return (
            f"{self.entries_loaded}/{self.entries_discovered} entries loaded, "
            f"{self.entries_skipped} skipped, "
            f"{self.images_resolved} images resolved, "
            f"{self.images_dropped} dropped, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with load metrics."""
        d = super().to_dict()
        d.update({
            "entries_discovered": self.entries_discovered,
            "entries_loaded": self.entries_loaded,
            "entries_skipped": self.entries_skipped,
            "images_resolved": self.images_resolved,
            "images_dropped": self.images_dropped,
        })
        return d


@dataclass
class ExportStats(OperationStats):
    """
    Statistics for export and publish operations.

    Attributes:
        files_written: Number of files created or updated
        files_unchanged: Number of files left as they were
    """
    files_written: int = 0
    files_unchanged: int = 0

    def summary(self) -> str:
        """Get formatted summary with file metrics."""
        return (
            f"{self.files_written} files written, "
            f"{self.files_unchanged} unchanged, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with file metrics."""
        d = super().to_dict()
        d.update({
            "files_written": self.files_written,
            "files_unchanged": self.files_unchanged,
        })
        return d
