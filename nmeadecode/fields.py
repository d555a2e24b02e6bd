"""NMEA field tokenizing and parsing utilities.

A sentence body is a comma-separated list of fields, and any field may be
empty (consecutive commas indicate missing data). The parsers here map an
empty field to None so callers can distinguish "no data" from "zero value",
and raise ``ValueError`` when a field is present but not in the expected
format. Decoders turn that ``ValueError`` into ``ErrorCode.MALFORMED_FIELD``.

Numeric fields are plain ASCII decimals: no whitespace, exponents, digit
separators or Unicode digits, and integers carry no sign.
"""

import re

from nmeadecode.types import Coordinate

FIELD_DELIMITER = ","

_INTEGER_PATTERN = re.compile(r"\d+", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"-?\d+(\.\d*)?|-?\.\d+", re.ASCII)

# DDMM.MMMM / DDDMM.MMMM: whole degrees, then two-digit whole minutes
_COORDINATE_PATTERN = re.compile(r"(\d+)(\d{2}(?:\.\d*)?)", re.ASCII)

# Hemisphere letters -> (degree digits, maximum degrees)
_COORDINATE_AXES = {
    "NS": (2, 90),
    "EW": (3, 180),
}


def split_fields(sentence: str) -> tuple[str, ...]:
    """Split a sentence into its ordered fields, keeping empty ones.

    The first field is the address field (e.g. "$GPGGA"). A fresh tuple is
    built on every call; the input string is left untouched.

    Example:
        >>> split_fields("$GPVTG,,T,,M")
        ('$GPVTG', '', 'T', '', 'M')
    """
    return tuple(sentence.split(FIELD_DELIMITER))


def parse_float_field(value: str) -> float | None:
    """Parse a string field to float, returning None if empty.

    Args:
        value: String value from an NMEA field

    Returns:
        Parsed float value, or None if the field is empty

    Raises:
        ValueError: If the field is present but not a plain decimal number

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")  # empty field
        None
    """
    if not value:
        return None
    if not _DECIMAL_PATTERN.fullmatch(value):
        raise ValueError(f"Malformed decimal field: {value!r}")
    return float(value)


def parse_int_field(value: str) -> int | None:
    """Parse a string field to int, returning None if empty.

    Similar to parse_float_field but for unsigned values like satellite
    count, PRNs or fix quality indicators.

    Raises:
        ValueError: If the field is present but not an unsigned base-10 integer

    Example:
        >>> parse_int_field("08")
        8
        >>> parse_int_field("")
        None
    """
    if not value:
        return None
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"Malformed integer field: {value!r}")
    return int(value, 10)


def parse_string_field(value: str) -> str | None:
    """Parse a string field, returning None if empty.

    Used for fields like UTC time or station IDs where the raw string value
    is meaningful.
    """
    if not value:
        return None
    return value


def parse_letter_field(value: str, allowed: str) -> str | None:
    """Parse a single-letter indicator field against a closed character set.

    Args:
        value: String value from an NMEA field
        allowed: Every accepted letter, e.g. "NS" for a latitude hemisphere

    Returns:
        The letter, or None if the field is empty

    Raises:
        ValueError: If the field is not exactly one of the allowed letters

    Example:
        >>> parse_letter_field("T", "T")
        'T'
        >>> parse_letter_field("X", "NS")
        Traceback (most recent call last):
        ...
        ValueError: Unexpected indicator 'X', expected one of 'NS'
    """
    if not value:
        return None
    if len(value) != 1 or value not in allowed:
        raise ValueError(f"Unexpected indicator {value!r}, expected one of {allowed!r}")
    return value


def _parse_coordinate_parts(value: str, width: int, max_degrees: int) -> tuple[int, float]:
    """Parse NMEA coordinate into degrees and minutes components.

    NMEA coordinates use DDDMM.MMMM format where:
    - DDD (or DD for latitude) = degrees, exactly *width* digits
    - MM.MMMM = decimal minutes

    The 2 digits before the decimal point are always minutes.

    Example:
        >>> _parse_coordinate_parts("4807.038", 2, 90)  # 48° 07.038'
        (48, 7.038)
        >>> _parse_coordinate_parts("01131.000", 3, 180)  # 11° 31.000'
        (11, 31.0)
    """
    match = _COORDINATE_PATTERN.fullmatch(value)
    if match is None or len(match.group(1)) != width:
        raise ValueError(f"Malformed coordinate: {value!r}")

    degrees = int(match.group(1))
    minutes = float(match.group(2))
    if minutes >= 60.0:
        raise ValueError(f"Coordinate minutes out of range: {value!r}")
    if degrees > max_degrees or (degrees == max_degrees and minutes > 0.0):
        raise ValueError(f"Coordinate degrees out of range: {value!r}")
    return degrees, minutes


def parse_coordinate(
    value: str,
    hemisphere: str,
    allowed: str,
) -> Coordinate | None:
    """Parse a coordinate field and its hemisphere letter into a ``Coordinate``.

    Args:
        value: Coordinate in DDMM.MMMM (latitude) or DDDMM.MMMM (longitude)
            format (e.g., "4807.038")
        hemisphere: Hemisphere indicator field
        allowed: "NS" for latitude (up to 90°), "EW" for longitude (up to 180°)

    Returns:
        ``Coordinate``, or None if both fields are empty (no fix)

    Raises:
        ValueError: If only one of the two fields is present, or either
            is malformed or out of range
    """
    if not value and not hemisphere:
        return None
    if not value or not hemisphere:
        raise ValueError("Coordinate and hemisphere must be present together")

    letter = parse_letter_field(hemisphere, allowed)
    width, max_degrees = _COORDINATE_AXES[allowed]
    degrees, minutes = _parse_coordinate_parts(value, width, max_degrees)
    return Coordinate(degrees=degrees, minutes=minutes, hemisphere=letter)
