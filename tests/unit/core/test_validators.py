"""
test_validators.py
------------------
Unit tests for keepsake.core.validators.DataValidator.
"""
import pytest
from datetime import date, datetime, timezone

from keepsake.core.exceptions import ValidationError
from keepsake.core.validators import DataValidator


class TestValidateRequiredFields:
    """Test DataValidator.validate_required_fields."""

    def test_all_present(self):
        """No error when every field has a value."""
        DataValidator.validate_required_fields({"title": "A", "date": "2024-01-01"}, ["title", "date"])

    @pytest.mark.parametrize("data", [
        {"date": "2024-01-01"},
        {"title": None, "date": "2024-01-01"},
        {"title": "   ", "date": "2024-01-01"},
    ])
    def test_missing_or_blank(self, data):
        """Absent, None and blank values are rejected."""
        with pytest.raises(ValidationError, match="title"):
            DataValidator.validate_required_fields(data, ["title", "date"])

    def test_falsy_non_string_is_present(self):
        """Zero counts as a value."""
        DataValidator.validate_required_fields({"title": 0}, ["title"])


class TestNormalizeDate:
    """Test DataValidator.normalize_date."""

    def test_date_object(self):
        assert DataValidator.normalize_date(date(2024, 5, 1)) == date(2024, 5, 1)

    def test_datetime_object(self):
        """Datetimes are truncated to their date."""
        value = datetime(2024, 5, 1, 23, 30, tzinfo=timezone.utc)
        assert DataValidator.normalize_date(value) == date(2024, 5, 1)

    @pytest.mark.parametrize("value", [
        "2024-05-01",
        " 2024-05-01 ",
        "'2024-05-01'",
        "2024-05-01T10:30:00",
        "2024-05-01T10:30:00Z",
    ])
    def test_iso_strings(self, value):
        """ISO 8601 strings parse with or without time."""
        assert DataValidator.normalize_date(value) == date(2024, 5, 1)

    @pytest.mark.parametrize("value", ["", "yesterday", "2024-13-01", None, 20240501, ["2024-05-01"]])
    def test_unparseable(self, value):
        """Anything else yields None."""
        assert DataValidator.normalize_date(value) is None


class TestNormalizeString:
    """Test DataValidator.normalize_string."""

    def test_strips(self):
        assert DataValidator.normalize_string("  Hello  ") == "Hello"

    def test_scalars_converted(self):
        """Numbers become strings."""
        assert DataValidator.normalize_string(2024) == "2024"

    @pytest.mark.parametrize("value", [None, "", "   ", True, ["a"], {"a": 1}])
    def test_rejected(self, value):
        assert DataValidator.normalize_string(value) is None


class TestNormalizeDateList:
    """Test DataValidator.normalize_date_list."""

    def test_none(self):
        assert DataValidator.normalize_date_list(None) == []

    def test_single_value(self):
        assert DataValidator.normalize_date_list("2024-05-03") == [date(2024, 5, 3)]

    def test_list_keeps_order_and_drops_invalid(self):
        result = DataValidator.normalize_date_list(["2024-06-10", "soon", date(2024, 5, 3)])
        assert result == [date(2024, 6, 10), date(2024, 5, 3)]
