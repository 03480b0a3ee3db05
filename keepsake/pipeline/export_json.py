#!/usr/bin/env python3
"""
export_json.py
--------------
Export collection page data to JSON files.

The static site reads these files instead of parsing content at request
time. One listing file per collection plus one file per entry:

    build/data/
    ├── blog/
    │   ├── index.json          # listing: entries, groups, sortedKeys
    │   └── <slug>.json         # entry page: images, hero, body, html
    ├── diary/
    └── memories/

Unchanged files are not rewritten, so timestamps only move when content does.

Usage:
    exporter = JSONExporter(resolvers, output_dir=EXPORT_DIR, logger=logger)
    stats = exporter.export_all()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

# --- Local imports ---
from keepsake.core.cli import ExportStats
from keepsake.core.exceptions import ContentLoadError, EntryNotFoundError
from keepsake.core.logging_manager import KeepsakeLogger, safe_logger
from keepsake.core.paths import EXPORT_DIR
from keepsake.pipeline.loaders import load_listing, load_page
from keepsake.pipeline.resolver import CollectionResolver


class JSONExporter:
    """
    Writes listing and entry page data for one or more collections.
    """

    def __init__(
        self,
        resolvers: Dict[str, CollectionResolver],
        output_dir: Optional[Path] = None,
        logger: Optional[KeepsakeLogger] = None,
    ):
        """
        Initialize JSON exporter.

        Args:
            resolvers: Collection name → resolver
            output_dir: Output directory (defaults to build/data)
            logger: Optional logger for operation tracking
        """
        self.resolvers = resolvers
        self.output_dir = Path(output_dir) if output_dir else EXPORT_DIR
        self.logger = logger

    def export_all(self, names: Optional[Iterable[str]] = None) -> ExportStats:
        """
        Export the given collections (all when names is None).

        Returns:
            Combined ExportStats

        Raises:
            KeyError: If a requested collection is not configured
            ContentLoadError: If a collection cannot be loaded
        """
        stats = ExportStats()
        for name in names or self.resolvers:
            self.export_collection(self.resolvers[name], stats)
        safe_logger(self.logger).log_operation("export_json", {
            "output_dir": str(self.output_dir),
            **stats.to_dict(),
        })
        return stats

    def export_collection(
        self, resolver: CollectionResolver, stats: Optional[ExportStats] = None
    ) -> ExportStats:
        """
        Export one collection's listing and entry pages.

        Entries that fail individually are counted as errors and skipped.
        """
        stats = stats if stats is not None else ExportStats()
        collection_dir = self.output_dir / resolver.name

        listing = load_listing(resolver)
        self._write(collection_dir / "index.json", listing.to_dict(), stats)

        for entry in listing.entries:
            try:
                page = load_page(resolver, entry.slug)
            except (EntryNotFoundError, ContentLoadError) as e:
                stats.errors += 1
                safe_logger(self.logger).log_warning(
                    f"Failed to export {resolver.name} entry {entry.slug}: {e}"
                )
                continue
            self._write(collection_dir / f"{entry.slug}.json", page, stats)

        return stats

    def _write(self, path: Path, data: Dict[str, Any], stats: ExportStats) -> None:
        """Write JSON if the content differs from what is on disk."""
        text = json.dumps(data, indent=2, ensure_ascii=False, default=str) + "\n"
        if path.is_file() and path.read_text(encoding="utf-8") == text:
            stats.files_unchanged += 1
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        stats.files_written += 1
        safe_logger(self.logger).log_debug(f"Wrote {path}")
