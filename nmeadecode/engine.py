"""Sentence dispatch: classify, select a decoder, decode, tag the result.

``parse`` is the public entry point. It never raises for bad input; the
outcome is a ``ParseResult`` carrying either a tagged ``NMEAMessage`` or an
``ErrorCode``. Each call works on its own freshly tokenized fields and keeps
no state between calls, so it is safe to call from several threads at once.
"""

import logging
from collections.abc import Callable, Sequence

from nmeadecode.classifier import classify_sentence
from nmeadecode.fields import split_fields
from nmeadecode.gga import decode_gga
from nmeadecode.gsa import decode_gsa
from nmeadecode.gsv import decode_gsv
from nmeadecode.types import (
    ErrorCode,
    NMEAMessage,
    ParseResult,
    SentenceData,
    SentenceType,
)
from nmeadecode.vtg import decode_vtg

__all__ = ["classify", "parse"]

logger = logging.getLogger(__name__)

Decoder = Callable[[Sequence[str]], tuple[SentenceData | None, ErrorCode | None]]

# UNKNOWN has no decoder.
_DECODERS: dict[SentenceType, Decoder] = {
    SentenceType.GGA: decode_gga,
    SentenceType.GSA: decode_gsa,
    SentenceType.GSV: decode_gsv,
    SentenceType.VTG: decode_vtg,
}


def _require_sentence(sentence: str) -> None:
    if sentence is None:
        raise TypeError("sentence must be a str, not None")


def classify(sentence: str) -> SentenceType:
    """Return the sentence type of *sentence* without decoding it.

    Raises:
        TypeError: If *sentence* is None.
    """
    _require_sentence(sentence)
    return classify_sentence(sentence)


def parse(sentence: str) -> ParseResult:
    """Decode one NMEA sentence into a tagged message.

    The sentence must already be stripped of its line terminator and
    checksum; see ``server.framing`` for a helper that does that.

    Args:
        sentence: A single sentence, e.g. "$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K".

    Returns:
        ``ParseResult`` with ``message`` set on success, or ``error`` set to:
        - ``TYPE_NOT_UNDERSTOOD`` if the prefix matches no known type
          (no decoder runs)
        - ``INSUFFICIENT_FIELDS`` if the sentence is truncated
        - ``MALFORMED_FIELD`` if a field does not parse

    Raises:
        TypeError: If *sentence* is None.
        RuntimeError: If a decoder returns neither a record nor an error.

    Example:
        >>> result = parse("$GPXXX,1,2,3")
        >>> result.error
        <ErrorCode.TYPE_NOT_UNDERSTOOD: 'type_not_understood'>
    """
    _require_sentence(sentence)

    sentence_type = classify_sentence(sentence)
    decoder = _DECODERS.get(sentence_type)
    if decoder is None:
        logger.debug("Rejected sentence of unknown type: %r", sentence)
        return ParseResult(error=ErrorCode.TYPE_NOT_UNDERSTOOD)

    data, error = decoder(split_fields(sentence))

    if error is not None:
        logger.debug("Failed to decode %s sentence (%s): %r",
                     sentence_type.value, error.value, sentence)
        return ParseResult(error=error)

    if data is None:
        raise RuntimeError(
            f"{sentence_type.value} decoder returned neither a record nor an error"
        )

    return ParseResult(message=NMEAMessage(sentence_type=sentence_type, data=data))
