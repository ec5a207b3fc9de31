"""Unit tests for deriver.dates module."""

from datetime import datetime

import pytest

from media_metadata.deriver.dates import parse_tag_date, to_epoch_millis


class TestParseTagDate:
    """Tests for parse_tag_date() function."""

    def test_parse_valid_date(self):
        """Test parsing the EXIF date layout."""
        assert parse_tag_date("2016:10:28 17:34:58") == datetime(2016, 10, 28, 17, 34, 58)

    def test_result_is_naive(self):
        """Test that parsed dates carry no timezone."""
        assert parse_tag_date("2016:10:28 17:34:58").tzinfo is None

    @pytest.mark.parametrize("value", [
        "2016:10:28 17:34:58+02:00",   # timezone offset
        "2016:10:28 17:34:58.123",     # sub-seconds
        "2016-10-28 17:34:58",         # ISO separators
        "2016:10:28",                  # date only
        "2016:1:28 17:34:58",          # single-digit month
        " 2016:10:28 17:34:58",        # leading space
        "0000:00:00 00:00:00",         # empty camera date
        "2016:02:30 12:00:00",         # impossible day
        "2016:10:28 25:00:00",         # impossible hour
        "",
    ])
    def test_rejects_other_formats(self, value):
        """Test that anything but the exact layout is rejected."""
        assert parse_tag_date(value) is None

    @pytest.mark.parametrize("value", [None, 20161028, 2016.5, ["2016:10:28 17:34:58"]])
    def test_rejects_non_strings(self, value):
        """Test that non-string values are rejected."""
        assert parse_tag_date(value) is None


class TestToEpochMillis:
    """Tests for to_epoch_millis() function."""

    def test_local_time_conversion(self):
        """Test that naive datetimes are read as local time."""
        moment = datetime(2016, 10, 28, 17, 34, 58)
        assert to_epoch_millis(moment) == int(moment.timestamp()) * 1000

    def test_returns_int(self):
        """Test that the result is an integer."""
        assert isinstance(to_epoch_millis(datetime(2017, 2, 20, 11, 40, 6)), int)

    def test_keeps_milliseconds(self):
        """Test that microseconds are rounded to milliseconds."""
        base = datetime(2017, 2, 20, 11, 40, 6)
        moment = base.replace(microsecond=250000)
        assert to_epoch_millis(moment) - to_epoch_millis(base) == 250
