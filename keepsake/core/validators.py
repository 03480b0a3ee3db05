#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization utilities for Keepsake.

Provides the type-safe conversions used when turning raw YAML front matter
into ContentEntry fields.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from .exceptions import ValidationError


class DataValidator:
    """Centralized data validation for front matter values."""

    @staticmethod
    def validate_required_fields(
        data: Dict[str, Any], required_fields: Iterable[str]
    ) -> None:
        """
        Validate that required fields are present and non-empty.

        Args:
            data: Data dictionary to validate
            required_fields: Required field names

        Raises:
            ValidationError: If a field is absent, None or blank
        """
        for field in required_fields:
            value = data.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationError(f"Required field '{field}' missing or empty")

    @staticmethod
    def normalize_date(date_value: Any) -> Optional[date]:
        """
        Normalize various date inputs to a date object.

        Accepts date and datetime objects (PyYAML produces these for
        unquoted ISO values) and ISO 8601 strings, with or without a time
        part.

        Args:
            date_value: Date string, date object, or datetime

        Returns:
            Normalized date object, or None if it cannot be parsed

        Examples:
            >>> DataValidator.normalize_date("2024-05-01")
            datetime.date(2024, 5, 1)
            >>> DataValidator.normalize_date("2024-05-01T10:30:00Z")
            datetime.date(2024, 5, 1)
            >>> DataValidator.normalize_date("yesterday") is None
            True
        """
        # datetime is a subclass of date, so test it first
        if isinstance(date_value, datetime):
            return date_value.date()
        if isinstance(date_value, date):
            return date_value
        if isinstance(date_value, str):
            s = date_value.strip().strip('"').strip("'")
            if not s:
                return None
            try:
                return date.fromisoformat(s)
            except ValueError:
                pass
            try:
                return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
            except ValueError:
                return None
        return None

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Normalize a scalar to a stripped string.

        Numbers and dates are converted with str(); containers are rejected.

        Args:
            value: Value to normalize

        Returns:
            Stripped string, or None for None/blank/non-scalar values
        """
        if value is None or isinstance(value, (dict, list, tuple, set)):
            return None
        if isinstance(value, bool):
            return None
        s = str(value).strip()
        return s or None

    @staticmethod
    def normalize_date_list(value: Any) -> List[date]:
        """
        Normalize a single date or a list of dates.

        Unparseable items are dropped.

        Args:
            value: Date-like scalar, list of date-likes, or None

        Returns:
            List of dates in declaration order
        """
        if value is None:
            return []
        items = value if isinstance(value, (list, tuple)) else [value]
        dates = []
        for item in items:
            parsed = DataValidator.normalize_date(item)
            if parsed is not None:
                dates.append(parsed)
        return dates
