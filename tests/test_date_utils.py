"""Tests for date-like normalisation."""

from datetime import date, datetime, timedelta, timezone

import pandas as pd
import pytest
from dateutil import tz

from datecalc.config import CalendarSettings
from datecalc.utils.date import (
    InvalidDateError,
    format_day_first,
    parse_datetime,
    to_date,
    to_datetime,
    to_utc,
)


class TestParseDatetime:
    """Tests for parse_datetime."""

    def test_day_first_format(self):
        """'DD-MM-YYYY' is read day first."""
        assert parse_datetime("01-02-2024") == datetime(2024, 2, 1)

    def test_compact_format(self):
        assert parse_datetime("20240315") == datetime(2024, 3, 15)

    def test_iso_with_zone(self):
        """ISO strings keep their offset."""
        parsed = parse_datetime("2024-01-30T00:00:00.000Z")
        assert parsed.utcoffset() == timedelta(0)
        assert parsed.replace(tzinfo=None) == datetime(2024, 1, 30)

    def test_iso_date_only_is_naive(self):
        assert parse_datetime("2024-02-02") == datetime(2024, 2, 2)

    def test_free_form_with_zone_name(self):
        """Strings like '04 Dec 1995 00:12:00 UTC' go through the free-form parser."""
        parsed = parse_datetime("04 Dec 1995 00:12:00 UTC")
        assert parsed.utcoffset() == timedelta(0)
        assert parsed.replace(tzinfo=None) == datetime(1995, 12, 4, 0, 12)

    def test_gmt_prefixed_offset_keeps_sign(self):
        parsed = parse_datetime("04 Dec 1995 00:12:00 GMT+0200")
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_named_zone_offset(self):
        assert parse_datetime("04 Dec 1995 00:12:00 PST").utcoffset() == timedelta(hours=-8)

    def test_free_form_without_zone_is_naive(self):
        assert parse_datetime("04 Dec 1995 00:12:00") == datetime(1995, 12, 4, 0, 12)

    def test_unknown_zone_name_raises(self):
        with pytest.raises(InvalidDateError):
            parse_datetime("04 Dec 1995 00:12:00 QQT")

    def test_custom_zone_names(self):
        settings = CalendarSettings(tzinfos={"JST": tz.tzoffset("JST", 9 * 3600)})
        parsed = parse_datetime("04 Dec 1995 09:12:00 JST", settings)
        assert parsed.utcoffset() == timedelta(hours=9)
        with pytest.raises(InvalidDateError):
            parse_datetime("04 Dec 1995 00:12:00 UTC", settings)

    def test_surrounding_whitespace(self):
        assert parse_datetime("  2024-02-02  ") == datetime(2024, 2, 2)

    @pytest.mark.parametrize("text", ["", "   ", "not a date", "2024-13-45"])
    def test_invalid_strings_raise(self, text):
        with pytest.raises(InvalidDateError):
            parse_datetime(text)

    def test_invalid_date_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_datetime("not a date")


class TestToDatetime:
    """Tests for to_datetime."""

    def test_naive_string_gets_parse_zone(self):
        assert to_datetime("2024-02-02").tzinfo is not None
        assert to_datetime("2024-02-02") == datetime(2024, 2, 2, tzinfo=timezone.utc)

    def test_bare_date_is_midnight(self):
        assert to_datetime(date(2024, 2, 2)) == datetime(2024, 2, 2, tzinfo=timezone.utc)

    def test_aware_datetime_unchanged(self):
        value = datetime(2024, 2, 2, 8, 0, tzinfo=tz.gettz("Asia/Tokyo"))
        assert to_datetime(value) is value

    def test_custom_parse_zone(self):
        settings = CalendarSettings(parse_zone="Asia/Tokyo")
        result = to_datetime("2024-02-02T09:00:00", settings)
        assert result == datetime(2024, 2, 2, 0, 0, tzinfo=timezone.utc)

    def test_pandas_timestamp(self):
        result = to_datetime(pd.Timestamp("2024-02-02 10:30"))
        assert result == datetime(2024, 2, 2, 10, 30, tzinfo=timezone.utc)

    def test_nat_rejected(self):
        with pytest.raises(InvalidDateError):
            to_datetime(pd.NaT)

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            to_datetime(3.5)

    def test_to_utc_converts_offset(self):
        result = to_utc("2024-01-30T23:30:00-05:00")
        assert result == datetime(2024, 1, 31, 4, 30, tzinfo=timezone.utc)


class TestToDate:
    """Tests for to_date."""

    def test_datetime_keeps_wall_clock_date(self):
        value = datetime(2024, 1, 30, 23, 30, tzinfo=tz.gettz("America/New_York"))
        assert to_date(value) == date(2024, 1, 30)

    def test_date_passthrough(self):
        value = date(2024, 1, 30)
        assert to_date(value) is value

    def test_string(self):
        assert to_date("30-01-2024") == date(2024, 1, 30)

    def test_timestamp(self):
        assert to_date(pd.Timestamp("2024-01-30 12:00")) == date(2024, 1, 30)

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            to_date(["2024-01-30"])


class TestFormatDayFirst:
    def test_zero_padding(self):
        assert format_day_first(date(2024, 1, 5)) == "05-01-2024"

    def test_four_digit_year(self):
        assert format_day_first(date(987, 12, 25)) == "25-12-0987"
