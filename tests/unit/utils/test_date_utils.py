"""Unit tests for date utilities."""
import pytest
from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

from src.utils.date_utils import (
    export_date_stamp,
    format_instant,
    format_local_input,
    format_registered_at,
    from_local_input,
    join_local_input,
    parse_instant,
    resolve_timezone,
    split_local_input,
    to_local_input,
)

IST = timezone(timedelta(hours=5, minutes=30))


class TestParseInstant:
    """Test ISO 8601 parsing."""

    def test_parse_z_suffix_with_millis(self):
        """Test parsing JavaScript-style instant."""
        result = parse_instant("2025-03-01T10:00:00.000Z")
        assert result == datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc)

    def test_parse_offset(self):
        """Test parsing instant with explicit offset."""
        result = parse_instant("2025-03-01T15:30:00+05:30")
        assert result.astimezone(timezone.utc).hour == 10

    def test_naive_value_is_utc(self):
        """Test naive timestamps are read as UTC."""
        result = parse_instant("2025-03-01T10:00:00")
        assert result.tzinfo == timezone.utc

    def test_invalid_value_raises_error(self):
        """Test invalid timestamp raises ValueError."""
        with pytest.raises(ValueError, match="Invalid timestamp format"):
            parse_instant("not a date")


class TestLocalInputConversion:
    """Test conversion between stored instants and local picker values."""

    def test_to_local_input_ist(self):
        """Stored UTC instant should show on an UTC+05:30 wall clock."""
        assert to_local_input("2025-03-01T10:00:00.000Z", IST) == "2025-03-01T15:30"

    def test_to_local_input_named_zone(self):
        """Named zones should behave like their fixed offset."""
        assert to_local_input("2025-03-01T10:00:00.000Z", ZoneInfo("Asia/Kolkata")) == "2025-03-01T15:30"

    def test_to_local_input_truncates_seconds(self):
        """Seconds are dropped, not rounded."""
        assert to_local_input("2025-03-01T10:00:59Z", timezone.utc) == "2025-03-01T10:00"

    def test_to_local_input_crosses_midnight(self):
        """Negative offsets may move the date back."""
        tz = timezone(timedelta(hours=-5))
        assert to_local_input("2025-03-01T02:00:00Z", tz) == "2025-02-28T21:00"

    def test_from_local_input_ist(self):
        """Local value should convert back to the UTC instant."""
        assert from_local_input("2025-03-01T15:30", IST) == "2025-03-01T10:00:00.000Z"

    def test_from_local_input_invalid(self):
        """Invalid local values raise ValueError."""
        with pytest.raises(ValueError):
            from_local_input("01/03/2025 15:30", IST)

    def test_format_instant_milliseconds(self):
        """Instants are written with millisecond precision and a Z suffix."""
        moment = datetime(2025, 3, 1, 10, 0, 0, 123456, tzinfo=timezone.utc)
        assert format_instant(moment) == "2025-03-01T10:00:00.123Z"


class TestPickerValues:
    """Test splitting and joining picker values."""

    def test_split_empty(self):
        """Empty value gives no picker values."""
        assert split_local_input("") == (None, None)

    def test_split_value(self):
        """Value splits into date and time."""
        assert split_local_input("2025-03-01T15:30") == (date(2025, 3, 1), time(15, 30))

    def test_join_values(self):
        """Date and time join into a local value."""
        assert join_local_input(date(2025, 3, 1), time(15, 30)) == "2025-03-01T15:30"

    def test_join_missing_part_is_empty(self):
        """A missing date or time gives an empty value."""
        assert join_local_input(None, time(15, 30)) == ""
        assert join_local_input(date(2025, 3, 1), None) == ""


class TestDisplayFormats:
    """Test human-readable formatting."""

    def test_format_registered_at(self):
        """Registered-at should show in the viewer timezone."""
        assert format_registered_at("2025-03-01T10:00:00Z", IST) == "1 Mar 2025, 03:30 pm"

    def test_format_registered_at_morning(self):
        """Morning times use am."""
        assert format_registered_at("2025-03-01T01:05:00Z", timezone.utc) == "1 Mar 2025, 01:05 am"

    def test_format_registered_at_passes_through_invalid(self):
        """Unparsable values are shown as stored."""
        assert format_registered_at("unknown", IST) == "unknown"

    def test_format_local_input(self):
        """Caption uses the long month name."""
        assert format_local_input("2025-03-01T15:30") == "1 March 2025, 03:30 pm"


class TestExportDateStamp:
    """Test export filename dates."""

    def test_uses_utc_date(self):
        """Early-morning IST exports still use the UTC date."""
        moment = datetime(2025, 3, 2, 3, 0, tzinfo=IST)
        assert export_date_stamp(moment) == "2025-03-01"

    def test_default_is_today(self):
        """Default stamp is today's UTC date."""
        assert export_date_stamp() == datetime.now(timezone.utc).strftime("%Y-%m-%d")


class TestResolveTimezone:
    """Test viewer timezone resolution."""

    def test_first_valid_name_wins(self):
        """The first known zone name should be used."""
        assert resolve_timezone("Asia/Kolkata", "Europe/London") == ZoneInfo("Asia/Kolkata")

    def test_skips_empty_and_unknown(self):
        """Empty and unknown names are skipped."""
        assert resolve_timezone(None, "Not/AZone", "UTC") == ZoneInfo("UTC")

    def test_falls_back_to_server_timezone(self):
        """No candidates gives the server's local timezone."""
        tz = resolve_timezone(None, "")
        assert datetime.now(tz).utcoffset() is not None
