"""GSV sentence decoder.

GSV (GNSS Satellites in View) lists the satellites the receiver can see.
The full view is spread across several sentences of up to four satellites
each.

GSV Sentence Format:
    $GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45
           | | |  |              |              |              |
           | | |  +--------------+--------------+--------------+-- Up to 4 groups of
           | | |                                                   PRN, elevation,
           | | |                                                   azimuth, SNR
           | | +-- Satellites in view
           | +-- Message number
           +-- Total number of messages

NMEA 4.10 receivers append a signal ID after the last group.
"""

from collections.abc import Sequence

from nmeadecode.fields import parse_int_field, parse_string_field
from nmeadecode.types import ErrorCode, GSVData, SatelliteInfo

# Address, total messages, message number, satellites in view
_HEADER_FIELD_COUNT = 4
_MINIMUM_FIELD_COUNT = _HEADER_FIELD_COUNT

_GROUP_WIDTH = 4
_MAX_GROUPS = 4


def _parse_required_int(value: str) -> int:
    number = parse_int_field(value)
    if number is None:
        raise ValueError("Missing required GSV message counter")
    return number


def _parse_satellite(group: Sequence[str]) -> SatelliteInfo:
    return SatelliteInfo(
        prn=parse_int_field(group[0]),
        elevation=parse_int_field(group[1]),
        azimuth=parse_int_field(group[2]),
        snr=parse_int_field(group[3]),
    )


def _build_gsv_data(fields: Sequence[str], group_count: int, remainder: int) -> GSVData:
    total_messages = _parse_required_int(fields[1])
    message_number = _parse_required_int(fields[2])
    if not 1 <= message_number <= total_messages:
        raise ValueError(f"GSV message {message_number} of {total_messages}")

    satellites = tuple(
        _parse_satellite(fields[start : start + _GROUP_WIDTH])
        for start in range(
            _HEADER_FIELD_COUNT,
            _HEADER_FIELD_COUNT + group_count * _GROUP_WIDTH,
            _GROUP_WIDTH,
        )
    )

    signal_id = None
    if remainder == 1:
        signal_id = parse_string_field(fields[-1])

    return GSVData(
        total_messages=total_messages,
        message_number=message_number,
        satellites_in_view=parse_int_field(fields[3]),
        satellites=satellites,
        signal_id=signal_id,
    )


def decode_gsv(fields: Sequence[str]) -> tuple[GSVData | None, ErrorCode | None]:
    """Decode the tokenized fields of a GSV sentence.

    The number of satellite groups is derived from the field count. A
    single trailing field after the last full group is the signal ID; two
    or three trailing fields are a truncated group.

    Returns:
        ``(GSVData, None)`` on success, or ``(None, error)``.
    """
    if len(fields) < _MINIMUM_FIELD_COUNT:
        return None, ErrorCode.INSUFFICIENT_FIELDS

    group_count, remainder = divmod(len(fields) - _HEADER_FIELD_COUNT, _GROUP_WIDTH)
    if remainder > 1:
        return None, ErrorCode.INSUFFICIENT_FIELDS
    if group_count > _MAX_GROUPS:
        return None, ErrorCode.MALFORMED_FIELD

    try:
        return _build_gsv_data(fields, group_count, remainder), None
    except (ValueError, IndexError):
        return None, ErrorCode.MALFORMED_FIELD
