"""NMEA data types for decoded sentences.

This module defines the tagged union returned by ``nmeadecode.parse``.

Design Decisions:
    1. Tagged union, not a class hierarchy: every decoded sentence comes back
       as an ``NMEAMessage`` whose ``sentence_type`` names which record class
       ``data`` holds. Callers switch on the tag before touching
       type-specific fields.

    2. Optional fields (float | None): NMEA fields may be empty, indicated by
       consecutive commas. Using None distinguishes "no data received" from
       "measured zero". Every slot of a returned record is either a parsed
       value or None, never left unset.

    3. Errors are values: a failed decode yields an ``ErrorCode`` in the
       ``ParseResult`` instead of an exception.
"""

import enum
from dataclasses import dataclass


class SentenceType(enum.Enum):
    """Sentence-type tag identifying which record an ``NMEAMessage`` carries."""

    GGA = "GGA"
    GSA = "GSA"
    GSV = "GSV"
    VTG = "VTG"
    UNKNOWN = "UNKNOWN"


class ErrorCode(enum.Enum):
    """Reason a sentence could not be decoded."""

    TYPE_NOT_UNDERSTOOD = "type_not_understood"
    INSUFFICIENT_FIELDS = "insufficient_fields"
    MALFORMED_FIELD = "malformed_field"


@dataclass
class Coordinate:
    """A latitude or longitude in NMEA degrees-minutes form.

    Attributes:
        degrees: Whole degrees (DD for latitude, DDD for longitude).
        minutes: Decimal minutes (MM.MMMM).
        hemisphere: "N"/"S" for latitude, "E"/"W" for longitude.

    Example:
        >>> Coordinate(degrees=48, minutes=7.038, hemisphere="N").decimal_degrees
        48.1173
    """

    degrees: int
    minutes: float
    hemisphere: str

    @property
    def decimal_degrees(self) -> float:
        """Signed decimal degrees, negative for the southern/western hemisphere."""
        value = self.degrees + self.minutes / 60.0
        if self.hemisphere in ("S", "W"):
            return -value
        return value


@dataclass
class GGAData:
    """Decoded GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        utc_time: UTC timestamp in HHMMSS.ss format (e.g., "123519.00").
            None if field was empty.

        latitude: Latitude with N/S hemisphere, None if no fix.

        longitude: Longitude with E/W hemisphere, None if no fix.

        fix_quality: GPS fix quality indicator (always present, defaults to 0):
            0 = Invalid (no fix)
            1 = GPS fix (SPS - Standard Positioning Service)
            2 = DGPS fix (Differential GPS)
            4 = RTK Fixed (centimeter-level accuracy)
            5 = RTK Float (decimeter-level accuracy, converging)
            6 = Dead reckoning mode

        num_satellites: Number of satellites used in the fix solution.

        horizontal_dilution_of_precision: HDOP value. Lower is better.

        altitude: Antenna altitude above mean sea level.

        altitude_units: Unit letter of ``altitude`` ("M" = meters).

        geoid_separation: Height of geoid (MSL) above the WGS84 ellipsoid.

        geoid_separation_units: Unit letter of ``geoid_separation``.

        dgps_age_seconds: Age of differential corrections, None without DGPS.

        dgps_station_id: Differential reference station ID, None without DGPS.

        valid: Navigation validity flag. True only if fix_quality > 0.
    """

    utc_time: str | None
    latitude: Coordinate | None
    longitude: Coordinate | None
    fix_quality: int
    num_satellites: int | None
    horizontal_dilution_of_precision: float | None
    altitude: float | None
    altitude_units: str | None
    geoid_separation: float | None
    geoid_separation_units: str | None
    dgps_age_seconds: float | None
    dgps_station_id: str | None
    valid: bool


@dataclass
class GSAData:
    """Decoded GSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        selection_mode: "A" (automatic 2D/3D) or "M" (manual), None if empty.

        fix_type: 1 = no fix, 2 = 2D fix, 3 = 3D fix. None if empty.

        satellite_prns: Exactly 12 PRN slots in sentence order. Unused
            slots are None.

        position_dilution_of_precision: PDOP, None if empty.

        horizontal_dilution_of_precision: HDOP, None if empty.

        vertical_dilution_of_precision: VDOP, None if empty.

        system_id: GNSS system ID (NMEA 4.10+), None on older receivers.
    """

    selection_mode: str | None
    fix_type: int | None
    satellite_prns: tuple[int | None, ...]
    position_dilution_of_precision: float | None
    horizontal_dilution_of_precision: float | None
    vertical_dilution_of_precision: float | None
    system_id: int | None = None


@dataclass
class SatelliteInfo:
    """One satellite group of a GSV sentence.

    Attributes:
        prn: Satellite PRN number.
        elevation: Elevation in degrees (0-90).
        azimuth: Azimuth in degrees true (0-359).
        snr: Signal-to-noise ratio in dB-Hz, None when not tracking.
    """

    prn: int | None
    elevation: int | None
    azimuth: int | None
    snr: int | None


@dataclass
class GSVData:
    """Decoded GSV (GNSS Satellites in View) sentence.

    A full sky view is split across ``total_messages`` sentences, each
    carrying up to four satellites. Stitching them together is left to the
    caller.

    Attributes:
        total_messages: Number of GSV sentences in this cycle.
        message_number: 1-based index of this sentence within the cycle.
        satellites_in_view: Total satellites in view across the cycle.
        satellites: Satellite groups carried by this sentence (0 to 4).
        signal_id: GNSS signal ID (NMEA 4.10+), None on older receivers.
    """

    total_messages: int
    message_number: int
    satellites_in_view: int | None
    satellites: tuple[SatelliteInfo, ...]
    signal_id: str | None = None


@dataclass
class VTGData:
    """Decoded VTG (Track Made Good and Ground Speed) sentence.

    Attributes:
        track_true_degrees: Track relative to true north, None when stationary.
        track_true_reference: Reference letter, "T".
        track_magnetic_degrees: Track relative to magnetic north.
        track_magnetic_reference: Reference letter, "M".
        speed_knots: Ground speed in knots.
        speed_knots_unit: Unit letter, "N".
        speed_kilometers_per_hour: Ground speed in km/h.
        speed_kilometers_per_hour_unit: Unit letter, "K".
        mode: FAA mode indicator (NMEA 2.3+), None on older receivers:
            'A' = Autonomous, 'D' = Differential, 'E' = Estimated,
            'M' = Manual, 'S' = Simulator, 'N' = Not valid.
        valid: True only if mode is present and not 'N'.
    """

    track_true_degrees: float | None
    track_true_reference: str | None
    track_magnetic_degrees: float | None
    track_magnetic_reference: str | None
    speed_knots: float | None
    speed_knots_unit: str | None
    speed_kilometers_per_hour: float | None
    speed_kilometers_per_hour_unit: str | None
    mode: str | None
    valid: bool


SentenceData = GGAData | GSAData | GSVData | VTGData


@dataclass
class NMEAMessage:
    """A decoded sentence: the type tag plus the record it describes.

    ``data`` is always the record class matching ``sentence_type``;
    ``sentence_type`` is never ``SentenceType.UNKNOWN``.
    """

    sentence_type: SentenceType
    data: SentenceData


@dataclass
class ParseResult:
    """Outcome of ``nmeadecode.parse``: exactly one of message/error is set."""

    message: NMEAMessage | None = None
    error: ErrorCode | None = None

    @property
    def ok(self) -> bool:
        return self.message is not None
