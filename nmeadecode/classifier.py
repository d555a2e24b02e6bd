"""Sentence type classification.

A sentence is classified by its fixed-width address window: the '$' start
delimiter, a two-letter talker ID and a three-letter sentence ID, e.g.
"$GPGGA". The window is compared against a read-only table of known
prefixes; the first exact match wins and anything else is UNKNOWN.
"""

from nmeadecode.types import SentenceType

# Supported NMEA talker IDs for multi-constellation GNSS receivers.
# Each 2-character prefix identifies the satellite system:
#   GP = GPS (USA)
#   GN = Multi-GNSS (combined solution)
#   GL = GLONASS (Russia)
#   GA = Galileo (Europe)
#   GB = BeiDou (China)
#   GQ = QZSS (Japan)
VALID_TALKER_IDS = ("GP", "GN", "GL", "GA", "GB", "GQ")

_DECODABLE_TYPES = (
    SentenceType.GGA,
    SentenceType.GSA,
    SentenceType.GSV,
    SentenceType.VTG,
)

# "$" + talker ID + sentence ID
_PREFIX_WIDTH = 6

SENTENCE_TYPE_TABLE: tuple[tuple[str, SentenceType], ...] = tuple(
    (f"${talker_id}{sentence_type.value}", sentence_type)
    for talker_id in VALID_TALKER_IDS
    for sentence_type in _DECODABLE_TYPES
)


def classify_sentence(sentence: str) -> SentenceType:
    """Return the sentence type named by the sentence's address window.

    Example:
        >>> classify_sentence("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K")
        <SentenceType.VTG: 'VTG'>
        >>> classify_sentence("$GPXXX,1,2,3")
        <SentenceType.UNKNOWN: 'UNKNOWN'>
    """
    window = sentence[:_PREFIX_WIDTH]
    for prefix, sentence_type in SENTENCE_TYPE_TABLE:
        if window == prefix:
            return sentence_type
    return SentenceType.UNKNOWN
