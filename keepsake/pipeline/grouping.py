#!/usr/bin/env python3
"""
grouping.py
-----------
Chronological grouping of entries for listing pages.

Groups are derived from an already sorted entry list and never persisted.
Keys are descending at every level; inside a group, entries keep the order
they had in the input.

    group_by_year  → [YearGroup(2024, entries), YearGroup(2023, entries)]
    group_by_day   → [YearGroup(2024, months=[MonthGroup(5, days=[DayGroup(1, entries)])])]

Months are 1-based.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

# --- Local imports ---
from keepsake.dataclasses.content_entry import ContentEntry


@dataclass
class DayGroup:
    day: int
    entries: List[ContentEntry] = field(default_factory=list)


@dataclass
class MonthGroup:
    month: int
    days: List[DayGroup] = field(default_factory=list)

    @property
    def entries(self) -> List[ContentEntry]:
        return [e for d in self.days for e in d.entries]


@dataclass
class YearGroup:
    """
    Entries of one calendar year.

    For year grouping only `entries` is filled; for day grouping `months`
    holds the nested structure and `entries` the same entries flattened.
    """

    year: int
    entries: List[ContentEntry] = field(default_factory=list)
    months: List[MonthGroup] = field(default_factory=list)


def group_by_year(entries: Iterable[ContentEntry]) -> List[YearGroup]:
    """
    Partition entries by calendar year.

    Args:
        entries: Entries, usually sorted newest first

    Returns:
        Year groups, newest year first
    """
    buckets: Dict[int, List[ContentEntry]] = {}
    for entry in entries:
        buckets.setdefault(entry.year, []).append(entry)
    return [YearGroup(year, buckets[year]) for year in sorted(buckets, reverse=True)]


def group_by_day(entries: Iterable[ContentEntry]) -> List[YearGroup]:
    """
    Partition entries by year, then month, then day.

    Args:
        entries: Entries, usually sorted newest first

    Returns:
        Year groups with nested month and day groups, all descending
    """
    tree: Dict[int, Dict[int, Dict[int, List[ContentEntry]]]] = {}
    for entry in entries:
        tree.setdefault(entry.year, {}).setdefault(entry.month, {}).setdefault(
            entry.day, []
        ).append(entry)

    groups: List[YearGroup] = []
    for year in sorted(tree, reverse=True):
        months = []
        for month in sorted(tree[year], reverse=True):
            days = [
                DayGroup(day, tree[year][month][day])
                for day in sorted(tree[year][month], reverse=True)
            ]
            months.append(MonthGroup(month, days))
        flat = [e for m in months for e in m.entries]
        groups.append(YearGroup(year, flat, months))
    return groups


def sorted_keys(groups: List[YearGroup]) -> Dict[str, Any]:
    """
    Descending group keys for template iteration.

    Returns:
        {'years': [...], 'months': {year: [...]}, 'days': {year: {month: [...]}}}
        ('months' and 'days' are empty for year grouping)
    """
    keys: Dict[str, Any] = {"years": [g.year for g in groups], "months": {}, "days": {}}
    for group in groups:
        if not group.months:
            continue
        keys["months"][group.year] = [m.month for m in group.months]
        keys["days"][group.year] = {
            m.month: [d.day for d in m.days] for m in group.months
        }
    return keys
