"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.

VTG Sentence Format:
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (optional)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Mode Indicators (FAA mode, NMEA 2.3+):
    A = Autonomous (standard GPS positioning)
    D = Differential (DGPS or RTK)
    E = Estimated (dead reckoning)
    M = Manual input
    S = Simulator
    N = Not valid (no fix)

Note: When stationary, the track angle may be empty (no heading when not moving).
"""

from collections.abc import Sequence

from nmeadecode.fields import parse_float_field, parse_letter_field
from nmeadecode.types import ErrorCode, VTGData

# VTG has 9 fields in basic format, 10 with FAA mode indicator
_MINIMUM_FIELD_COUNT = 9

_MODE_INDEX = 9
_VALID_MODES = "ADEMSN"


def _extract_mode(fields: Sequence[str]) -> str | None:
    """Extract the FAA mode indicator, None on receivers older than NMEA 2.3."""
    if len(fields) <= _MODE_INDEX:
        return None
    return parse_letter_field(fields[_MODE_INDEX], _VALID_MODES)


def _build_vtg_data(fields: Sequence[str]) -> VTGData:
    mode = _extract_mode(fields)

    return VTGData(
        track_true_degrees=parse_float_field(fields[1]),
        track_true_reference=parse_letter_field(fields[2], "T"),
        track_magnetic_degrees=parse_float_field(fields[3]),
        track_magnetic_reference=parse_letter_field(fields[4], "M"),
        speed_knots=parse_float_field(fields[5]),
        speed_knots_unit=parse_letter_field(fields[6], "N"),
        speed_kilometers_per_hour=parse_float_field(fields[7]),
        speed_kilometers_per_hour_unit=parse_letter_field(fields[8], "K"),
        mode=mode,
        # Navigation validity: mode must exist and not be 'N' (not valid)
        valid=mode is not None and mode != "N",
    )


def decode_vtg(fields: Sequence[str]) -> tuple[VTGData | None, ErrorCode | None]:
    """Decode the tokenized fields of a VTG sentence.

    Returns:
        ``(VTGData, None)`` on success, or ``(None, error)``.

    Example:
        >>> fields = "$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K".split(",")
        >>> data, error = decode_vtg(fields)
        >>> data.track_magnetic_degrees
        34.4
    """
    if len(fields) < _MINIMUM_FIELD_COUNT:
        return None, ErrorCode.INSUFFICIENT_FIELDS

    try:
        return _build_vtg_data(fields), None
    except (ValueError, IndexError):
        return None, ErrorCode.MALFORMED_FIELD
