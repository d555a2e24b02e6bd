"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,
           |         |        | |         | | |  |   |     | |     | |
           |         |        | |         | | |  |   |     | |     | +-- DGPS station ID (optional)
           |         |        | |         | | |  |   |     | |     +-- DGPS age (seconds)
           |         |        | |         | | |  |   |     | +-----+-- Geoid separation + units
           |         |        | |         | | |  |   +-----+-- Altitude above MSL + units
           |         |        | |         | | |  +-- HDOP (horizontal dilution)
           |         |        | |         | | +-- Number of satellites
           |         |        | |         | +-- Fix quality (0-6)
           |         |        | +---------+-- Longitude + E/W
           |         +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)
"""

import re
from collections.abc import Sequence

from nmeadecode.fields import (
    parse_coordinate,
    parse_float_field,
    parse_int_field,
    parse_letter_field,
    parse_string_field,
)
from nmeadecode.types import ErrorCode, GGAData

# Address field plus 13 data fields, up to the DGPS age.
# The DGPS station ID is frequently omitted.
_MINIMUM_FIELD_COUNT = 14

_DGPS_STATION_INDEX = 14

# HHMMSS with optional fractional seconds
_UTC_TIME_PATTERN = re.compile(r"(\d{2})(\d{2})(\d{2})(?:\.\d*)?", re.ASCII)


def _parse_utc_time(value: str) -> str | None:
    """Validate an HHMMSS.ss time field and return it unchanged."""
    utc_time = parse_string_field(value)
    if utc_time is None:
        return None

    match = _UTC_TIME_PATTERN.fullmatch(utc_time)
    if match is None:
        raise ValueError(f"Malformed UTC time: {value!r}")

    hours, minutes, seconds = (int(part) for part in match.groups())
    # Second 60 is a leap second
    if hours >= 24 or minutes >= 60 or seconds > 60:
        raise ValueError(f"UTC time out of range: {value!r}")
    return utc_time


def _build_gga_data(fields: Sequence[str]) -> GGAData:
    """Construct a GGAData object from tokenized fields.

    Note: fix_quality defaults to 0 (invalid) if the field is empty,
    since 0 already means "no fix" semantically.

    Raises:
        ValueError: If any present field is malformed.
    """
    fix_quality = parse_int_field(fields[6]) or 0

    dgps_station_id = None
    if len(fields) > _DGPS_STATION_INDEX:
        dgps_station_id = parse_string_field(fields[_DGPS_STATION_INDEX])

    return GGAData(
        utc_time=_parse_utc_time(fields[1]),
        latitude=parse_coordinate(fields[2], fields[3], "NS"),
        longitude=parse_coordinate(fields[4], fields[5], "EW"),
        fix_quality=fix_quality,
        num_satellites=parse_int_field(fields[7]),
        horizontal_dilution_of_precision=parse_float_field(fields[8]),
        altitude=parse_float_field(fields[9]),
        altitude_units=parse_letter_field(fields[10], "M"),
        geoid_separation=parse_float_field(fields[11]),
        geoid_separation_units=parse_letter_field(fields[12], "M"),
        dgps_age_seconds=parse_float_field(fields[13]),
        dgps_station_id=dgps_station_id,
        # Navigation validity: only valid if we have a fix
        valid=fix_quality > 0,
    )


def decode_gga(fields: Sequence[str]) -> tuple[GGAData | None, ErrorCode | None]:
    """Decode the tokenized fields of a GGA sentence.

    Args:
        fields: Fields of a sentence already classified as GGA, address
            field included.

    Returns:
        ``(GGAData, None)`` on success, or ``(None, error)`` where error is
        ``INSUFFICIENT_FIELDS`` for a truncated sentence or
        ``MALFORMED_FIELD`` for a field that does not parse.

    Note:
        A returned GGAData with valid=False is a successfully decoded
        sentence that has no GPS fix (fix_quality=0).
    """
    if len(fields) < _MINIMUM_FIELD_COUNT:
        return None, ErrorCode.INSUFFICIENT_FIELDS

    try:
        return _build_gga_data(fields), None
    except (ValueError, IndexError):
        return None, ErrorCode.MALFORMED_FIELD
