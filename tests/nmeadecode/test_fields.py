"""Tests for field tokenizing and parsing utilities."""

import pytest

from nmeadecode import Coordinate
from nmeadecode.fields import (
    parse_coordinate,
    parse_float_field,
    parse_int_field,
    parse_letter_field,
    parse_string_field,
    split_fields,
)


class TestSplitFields:
    """Tests for split_fields function."""

    def test_splits_on_comma(self):
        assert split_fields("$GPVTG,054.7,T") == ("$GPVTG", "054.7", "T")

    def test_preserves_empty_fields(self):
        assert split_fields("$GPVTG,,T,,M") == ("$GPVTG", "", "T", "", "M")

    def test_trailing_delimiter_yields_empty_field(self):
        assert split_fields("$GPGGA,1,") == ("$GPGGA", "1", "")

    def test_empty_string(self):
        assert split_fields("") == ("",)

    def test_no_trimming(self):
        assert split_fields("$GPGGA, 1 ") == ("$GPGGA", " 1 ")


class TestNumericFields:
    """Tests for parse_float_field and parse_int_field."""

    def test_float(self):
        assert parse_float_field("545.4") == pytest.approx(545.4)

    def test_negative_float(self):
        assert parse_float_field("-30.0") == pytest.approx(-30.0)

    def test_empty_float_is_none(self):
        assert parse_float_field("") is None

    def test_non_numeric_float_raises(self):
        with pytest.raises(ValueError):
            parse_float_field("abc")

    def test_non_finite_float_raises(self):
        with pytest.raises(ValueError):
            parse_float_field("nan")

    @pytest.mark.parametrize(
        "value",
        ["1_2", " 46", "46 ", "+4.5", "5e1", "inf", "٠٤.5", "1.2.3", "-", "."],
    )
    def test_non_decimal_float_raises(self, value):
        with pytest.raises(ValueError):
            parse_float_field(value)

    @pytest.mark.parametrize("value", ["5.", ".5", "-.5", "-0.25"])
    def test_decimal_forms(self, value):
        assert parse_float_field(value) == pytest.approx(float(value))

    @pytest.mark.parametrize(
        "value",
        ["1_2", " 46", "46 ", "-4", "+4", "5e1", "٠٤", "４"],
    )
    def test_non_digit_int_raises(self, value):
        with pytest.raises(ValueError):
            parse_int_field(value)

    def test_int_with_leading_zero(self):
        assert parse_int_field("08") == 8

    def test_empty_int_is_none(self):
        assert parse_int_field("") is None

    def test_decimal_int_raises(self):
        with pytest.raises(ValueError):
            parse_int_field("1.5")

    def test_string(self):
        assert parse_string_field("123519.00") == "123519.00"
        assert parse_string_field("") is None


class TestLetterField:
    """Tests for parse_letter_field function."""

    def test_allowed_letter(self):
        assert parse_letter_field("S", "NS") == "S"

    def test_empty_is_none(self):
        assert parse_letter_field("", "NS") is None

    def test_unexpected_letter_raises(self):
        with pytest.raises(ValueError):
            parse_letter_field("E", "NS")

    def test_multiple_letters_raise(self):
        with pytest.raises(ValueError):
            parse_letter_field("NS", "NS")


class TestParseCoordinate:
    """Tests for parse_coordinate function."""

    def test_latitude(self):
        result = parse_coordinate("4807.038", "N", "NS")
        assert result == Coordinate(degrees=48, minutes=pytest.approx(7.038), hemisphere="N")
        assert result.decimal_degrees == pytest.approx(48.1173, rel=1e-4)

    def test_longitude_three_digit_degrees(self):
        result = parse_coordinate("01131.000", "E", "EW")
        assert result.degrees == 11
        assert result.minutes == pytest.approx(31.0)

    def test_southern_hemisphere_is_negative(self):
        result = parse_coordinate("3356.123", "S", "NS")
        assert result.decimal_degrees == pytest.approx(-33.93538333, rel=1e-6)

    def test_western_hemisphere_is_negative(self):
        result = parse_coordinate("15112.456", "W", "EW")
        assert result.decimal_degrees == pytest.approx(-151.20760, rel=1e-6)

    def test_without_fraction(self):
        result = parse_coordinate("4807", "N", "NS")
        assert result.degrees == 48
        assert result.minutes == pytest.approx(7.0)

    def test_both_empty_is_none(self):
        assert parse_coordinate("", "", "NS") is None

    def test_missing_hemisphere_raises(self):
        with pytest.raises(ValueError):
            parse_coordinate("4807.038", "", "NS")

    def test_missing_value_raises(self):
        with pytest.raises(ValueError):
            parse_coordinate("", "N", "NS")

    def test_wrong_hemisphere_raises(self):
        with pytest.raises(ValueError):
            parse_coordinate("4807.038", "E", "NS")

    def test_non_numeric_raises(self):
        with pytest.raises(ValueError):
            parse_coordinate("48O7.038", "N", "NS")

    def test_too_short_raises(self):
        with pytest.raises(ValueError):
            parse_coordinate("7.038", "N", "NS")

    def test_minutes_out_of_range_raises(self):
        with pytest.raises(ValueError):
            parse_coordinate("4875.000", "N", "NS")

    def test_pole_and_antimeridian(self):
        assert parse_coordinate("9000.000", "S", "NS").decimal_degrees == pytest.approx(-90.0)
        assert parse_coordinate("18000.000", "E", "EW").decimal_degrees == pytest.approx(180.0)

    @pytest.mark.parametrize(
        ("value", "hemisphere", "allowed"),
        [
            ("9100.000", "N", "NS"),
            ("9000.001", "N", "NS"),
            ("123407.038", "N", "NS"),
            ("04807.038", "N", "NS"),
            ("18100.000", "E", "EW"),
            ("99931.000", "E", "EW"),
            ("1131.000", "E", "EW"),
            ("4807.0_38", "N", "NS"),
            ("48٠٧.038", "N", "NS"),
            ("4807.038 ", "N", "NS"),
        ],
    )
    def test_out_of_range_or_malformed_raises(self, value, hemisphere, allowed):
        with pytest.raises(ValueError):
            parse_coordinate(value, hemisphere, allowed)
