#!/usr/bin/env python3
"""
loaders.py
----------
Page data loaders for the two route shapes every collection exposes:

    listing   /<collection>          → load_listing()
    entry     /<collection>/<slug>   → load_page()

Error taxonomy:
    - collection root missing       → empty listing
    - entry metadata invalid        → entry omitted from the listing
    - single entry missing/invalid  → EntryNotFoundError (404)
    - image unresolvable            → image omitted, entry intact
    - anything unexpected           → ContentLoadError (500), logged with context
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# --- Local imports ---
from keepsake.core.config import GROUP_BY_DAY
from keepsake.core.exceptions import (
    ContentLoadError,
    EntryNotFoundError,
    EntryParseError,
    EntryValidationError,
)
from keepsake.dataclasses.content_entry import ContentEntry
from keepsake.pipeline.grouping import (
    YearGroup,
    group_by_day,
    group_by_year,
    sorted_keys,
)
from keepsake.pipeline.resolver import CollectionResolver


@dataclass
class CollectionListing:
    """
    Page data for a collection listing.

    Attributes:
        collection: Collection name
        entries: Valid entries, newest first
        groups: Year groups (with months/days for day grouping)
        preview_limit: Preview images per entry in serialized output
    """

    collection: str
    entries: List[ContentEntry] = field(default_factory=list)
    groups: List[YearGroup] = field(default_factory=list)
    preview_limit: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def sorted_keys(self) -> Dict[str, Any]:
        return sorted_keys(self.groups)

    def index(self) -> List[Dict[str, Any]]:
        """Slim slug/title/date list (diary sidebar)."""
        return [entry.to_summary() for entry in self.entries]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable listing page data."""

        def _entry(e: ContentEntry) -> Dict[str, Any]:
            return e.to_dict(preview_limit=self.preview_limit)

        groups = []
        for group in self.groups:
            item: Dict[str, Any] = {
                "year": group.year,
                "entries": [_entry(e) for e in group.entries],
            }
            if group.months:
                item["months"] = [
                    {
                        "month": m.month,
                        "days": [
                            {"day": d.day, "entries": [e.slug for e in d.entries]}
                            for d in m.days
                        ],
                    }
                    for m in group.months
                ]
            groups.append(item)

        return {
            "collection": self.collection,
            "entries": [_entry(e) for e in self.entries],
            "groups": groups,
            "sortedKeys": self.sorted_keys(),
        }


def load_listing(resolver: CollectionResolver) -> CollectionListing:
    """
    Load the listing page data of a collection.

    Args:
        resolver: Resolver for the collection

    Returns:
        CollectionListing (empty if the collection root does not exist)

    Raises:
        ContentLoadError: If the collection cannot be enumerated or an
            unexpected error occurs
    """
    config = resolver.config
    try:
        entries = resolver.load_all()
    except Exception as e:
        resolver.logger.log_error(e, {
            "collection": config.name,
            "step": "load_listing",
            "root": str(config.root),
        })
        raise ContentLoadError(f"Could not load {config.name} entries") from e

    if config.group_by == GROUP_BY_DAY:
        groups = group_by_day(entries)
    else:
        groups = group_by_year(entries)

    return CollectionListing(
        collection=config.name,
        entries=entries,
        groups=groups,
        preview_limit=config.preview_limit,
    )


def load_page(resolver: CollectionResolver, slug: str) -> Dict[str, Any]:
    """
    Load the page data of a single entry.

    Args:
        resolver: Resolver for the collection
        slug: Entry identifier

    Returns:
        Entry page data including body and rendered HTML

    Raises:
        EntryNotFoundError: If the entry is missing or its metadata invalid
        ContentLoadError: On any other failure
    """
    name = resolver.config.name
    try:
        entry = resolver.load_entry(slug)
        return entry.to_dict(include_body=True)
    except EntryNotFoundError:
        raise
    except (EntryParseError, EntryValidationError) as e:
        resolver.logger.log_warning(
            f"Invalid metadata for {name} entry '{slug}'", {"reason": str(e)}
        )
        raise EntryNotFoundError(f"{name.capitalize()} entry not found: {slug}") from e
    except Exception as e:
        resolver.logger.log_error(e, {"collection": name, "slug": slug, "step": "load_page"})
        raise ContentLoadError(f"Failed to load {name} entry: {slug}") from e
