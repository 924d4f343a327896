"""Tests for deadline parsing and formatting."""

from datetime import datetime

import pytest

from yougile_cli.utils.dates import (
    format_deadline,
    from_epoch_ms,
    is_overdue,
    parse_date,
    to_epoch_ms,
)


class TestParseDate:
    """Test the accepted date formats."""

    @pytest.mark.parametrize("text", ["2024-03-31", "31.03.2024", "31/03/2024", " 2024-03-31 "])
    def test_supported_formats(self, text):
        assert parse_date(text) == datetime(2024, 3, 31)

    @pytest.mark.parametrize("text", ["", "tomorrow", "2024-3-31", "31-03-2024", "2024/03/31", "31.03.24"])
    def test_unsupported_formats(self, text):
        assert parse_date(text) is None

    def test_impossible_date(self):
        """Well-formed but non-existent dates are rejected."""
        assert parse_date("2023-02-29") is None
        assert parse_date("32.01.2024") is None

    def test_leap_day(self):
        assert parse_date("29.02.2024") == datetime(2024, 2, 29)


class TestEpochConversion:
    def test_local_midnight_round_trip(self):
        dt = datetime(2024, 3, 31)
        assert from_epoch_ms(to_epoch_ms(dt)) == dt

    def test_milliseconds(self):
        dt = datetime(2024, 3, 31)
        assert to_epoch_ms(dt) % 1000 == 0

    def test_format_deadline(self):
        assert format_deadline(to_epoch_ms(datetime(2024, 3, 31))) == "2024-03-31"


class TestIsOverdue:
    def test_past(self):
        ms = to_epoch_ms(datetime(2024, 1, 1))
        assert is_overdue(ms, now=datetime(2024, 1, 2)) is True

    def test_future(self):
        ms = to_epoch_ms(datetime(2024, 1, 3))
        assert is_overdue(ms, now=datetime(2024, 1, 2)) is False


class TestOutOfRangeDeadline:
    """Server timestamps beyond what datetime can represent."""

    @pytest.mark.parametrize("ms", [10**17, -(10**17), 10**30])
    def test_format_shows_raw_value(self, ms):
        assert format_deadline(ms) == str(ms)

    @pytest.mark.parametrize("ms", [10**17, 10**30])
    def test_never_overdue(self, ms):
        assert is_overdue(ms, now=datetime(2024, 1, 2)) is False
