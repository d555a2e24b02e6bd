"""NMEA 0183 decoder for GGA, GSA, GSV and VTG sentences."""

from nmeadecode.engine import classify, parse
from nmeadecode.types import (
    Coordinate,
    ErrorCode,
    GGAData,
    GSAData,
    GSVData,
    NMEAMessage,
    ParseResult,
    SatelliteInfo,
    SentenceType,
    VTGData,
)

__all__ = [
    "Coordinate",
    "ErrorCode",
    "GGAData",
    "GSAData",
    "GSVData",
    "NMEAMessage",
    "ParseResult",
    "SatelliteInfo",
    "SentenceType",
    "VTGData",
    "classify",
    "parse",
]
