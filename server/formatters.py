"""JSON formatting utilities for decoded sentences."""

import dataclasses
import json

from nmeadecode import Coordinate, ErrorCode, NMEAMessage

__all__ = ["format_error", "format_message"]


def _format_coordinate(coordinate: Coordinate | None) -> dict[str, object] | None:
    if coordinate is None:
        return None
    return {
        "degrees": coordinate.degrees,
        "minutes": coordinate.minutes,
        "hemisphere": coordinate.hemisphere,
        "decimal_degrees": coordinate.decimal_degrees,
    }


def format_message(message: NMEAMessage) -> str:
    """Serialize a decoded message into a JSON string, keyed by its type tag."""
    payload = dataclasses.asdict(message.data)
    for key in ("latitude", "longitude"):
        if key in payload:
            payload[key] = _format_coordinate(getattr(message.data, key))
    return json.dumps({"type": message.sentence_type.value, **payload})


def format_error(error: ErrorCode) -> str:
    """Serialize a decode failure into a JSON string."""
    return json.dumps({"type": "error", "error": error.value})
