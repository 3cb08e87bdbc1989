"""
Unit tests for the chart filename parser.

Tests:
- Group key derivation (trailing date/time/extension fields dropped)
- Basic calendar date parsing
- Too few fields -> None
- Malformed date token -> DateFormatError
"""

from datetime import date
from pathlib import Path

import pytest
from chart_pruner.config.exceptions import DateFormatError
from chart_pruner.dedup.parser import parse_basic_calendar_date, parse_chart_path


class TestGroupKey:
    """Group key comes from the filename only."""

    def test_single_prefix_field(self):
        assert parse_chart_path("/charts/A_20230101_1200_TIF") == ("A", date(2023, 1, 1))

    def test_multi_field_prefix_rejoined(self):
        group_key, tile_date = parse_chart_path(Path("/charts/CA_Los_Angeles_20230215_0900_TIF"))

        assert group_key == "CA_Los_Angeles"
        assert tile_date == date(2023, 2, 15)

    def test_exactly_three_fields_relative_gives_empty_key(self):
        """Only date, time and extension, no parent: the key is empty."""
        assert parse_chart_path("20230101_1200_TIF") == ("", date(2023, 1, 1))

    def test_exactly_three_fields_under_directory_is_fatal(self):
        """The date token is counted on the full path and picks up the parent."""
        with pytest.raises(DateFormatError) as excinfo:
            parse_chart_path("/charts/20230101_1200_TIF")

        assert excinfo.value.token == "/charts/20230101"

    def test_extension_with_dot_is_just_a_field(self):
        assert parse_chart_path("/charts/A_20230101_1200_x.tif") == ("A", date(2023, 1, 1))

    def test_directories_with_underscores_do_not_leak_into_key(self):
        group_key, tile_date = parse_chart_path("/chart_data/usgs_topo/A_20230101_1200_TIF")

        assert group_key == "A"
        assert tile_date == date(2023, 1, 1)

    def test_relative_path(self):
        assert parse_chart_path("B_20221231_0000_TIF") == ("B", date(2022, 12, 31))


class TestTooFewFields:
    """Names without room for a date are skipped (None), not fatal."""

    @pytest.mark.parametrize("name", ["README", "A_TIF", "notes_20230101"])
    def test_returns_none(self, name):
        assert parse_chart_path(f"/charts/{name}") is None

    def test_returns_none_even_if_directory_has_underscores(self):
        """The filename decides; the parent directory is not counted."""
        assert parse_chart_path("/chart_data/x_y/A_TIF") is None


class TestDateToken:
    """Date token must be a basic calendar date."""

    def test_parse_valid(self):
        assert parse_basic_calendar_date("20240229") == date(2024, 2, 29)

    def test_extended_format_rejected(self):
        with pytest.raises(DateFormatError) as excinfo:
            parse_basic_calendar_date("2023-99-99")

        assert excinfo.value.token == "2023-99-99"
        assert str(excinfo.value).startswith("FormatError: ")

    def test_impossible_date_rejected(self):
        with pytest.raises(DateFormatError) as excinfo:
            parse_basic_calendar_date("20230230")

        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_non_ascii_digits_rejected_by_shape_check(self):
        """Fullwidth digits never reach strptime."""
        with pytest.raises(DateFormatError) as excinfo:
            parse_basic_calendar_date("\uff12\uff10\uff12\uff13\uff10\uff11\uff10\uff11")

        assert excinfo.value.__cause__ is None
        assert "YYYYMMDD" in str(excinfo.value)

    @pytest.mark.parametrize("token", ["2023011", "202301011", "2023O101", ""])
    def test_wrong_shape_rejected(self, token):
        with pytest.raises(DateFormatError):
            parse_basic_calendar_date(token)

    def test_malformed_date_in_path_is_fatal(self):
        with pytest.raises(DateFormatError):
            parse_chart_path("/charts/A_2023-99-99_1200_TIF")

    def test_non_date_third_field_is_fatal(self):
        with pytest.raises(DateFormatError):
            parse_chart_path("/charts/A_B_C_D")
