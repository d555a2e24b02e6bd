"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) reports the satellites used in the
navigation solution and the dilution of precision of that solution.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1
           | | |                       | |   |   |
           | | |                       | |   |   +-- VDOP
           | | |                       | |   +-- HDOP
           | | |                       | +-- PDOP
           | | +-----------------------+-- 12 PRN slots, unused slots empty
           | +-- Fix type (1 = no fix, 2 = 2D, 3 = 3D)
           +-- Selection mode (A = automatic, M = manual)

NMEA 4.10 receivers append a GNSS system ID after VDOP.
"""

from collections.abc import Sequence

from nmeadecode.fields import parse_float_field, parse_int_field, parse_letter_field
from nmeadecode.types import ErrorCode, GSAData

_PRN_SLOT_COUNT = 12
_FIRST_PRN_INDEX = 3
_PDOP_INDEX = _FIRST_PRN_INDEX + _PRN_SLOT_COUNT
_SYSTEM_ID_INDEX = _PDOP_INDEX + 3

# Address, mode, fix type, 12 PRN slots, PDOP, HDOP, VDOP
_MINIMUM_FIELD_COUNT = _SYSTEM_ID_INDEX

_VALID_FIX_TYPES = (1, 2, 3)


def _parse_fix_type(value: str) -> int | None:
    fix_type = parse_int_field(value)
    if fix_type is not None and fix_type not in _VALID_FIX_TYPES:
        raise ValueError(f"Unknown GSA fix type: {value!r}")
    return fix_type


def _build_gsa_data(fields: Sequence[str]) -> GSAData:
    prn_fields = fields[_FIRST_PRN_INDEX:_PDOP_INDEX]

    system_id = None
    if len(fields) > _SYSTEM_ID_INDEX:
        system_id = parse_int_field(fields[_SYSTEM_ID_INDEX])

    return GSAData(
        selection_mode=parse_letter_field(fields[1], "AM"),
        fix_type=_parse_fix_type(fields[2]),
        satellite_prns=tuple(parse_int_field(prn) for prn in prn_fields),
        position_dilution_of_precision=parse_float_field(fields[_PDOP_INDEX]),
        horizontal_dilution_of_precision=parse_float_field(fields[_PDOP_INDEX + 1]),
        vertical_dilution_of_precision=parse_float_field(fields[_PDOP_INDEX + 2]),
        system_id=system_id,
    )


def decode_gsa(fields: Sequence[str]) -> tuple[GSAData | None, ErrorCode | None]:
    """Decode the tokenized fields of a GSA sentence.

    Empty PRN slots decode to None; the record always has exactly 12 slots.

    Returns:
        ``(GSAData, None)`` on success, or ``(None, error)``.
    """
    if len(fields) < _MINIMUM_FIELD_COUNT:
        return None, ErrorCode.INSUFFICIENT_FIELDS

    try:
        return _build_gsa_data(fields), None
    except (ValueError, IndexError):
        return None, ErrorCode.MALFORMED_FIELD
