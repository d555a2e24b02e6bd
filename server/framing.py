"""Checksum framing for sentences arriving at the host.

Receivers frame each sentence as ``$<body>*hh`` followed by CR LF, where
``hh`` is the XOR of every body character as two hex digits. The decoder
wants the bare ``$<body>`` text, so the host checks and removes the frame
before calling ``nmeadecode.parse``.
"""

__all__ = ["calculate_checksum", "unframe_sentence", "validate_checksum"]

_CHECKSUM_DELIMITER = "*"
_CHECKSUM_DIGITS = 2
_HEX_DIGITS = "0123456789abcdefABCDEF"


def calculate_checksum(body: str) -> int:
    """XOR of the character codes of *body*, the text between '$' and '*'.

    Example:
        >>> f"{calculate_checksum('GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A'):02X}"
        '25'
    """
    checksum = 0
    for character in body:
        checksum ^= ord(character)
    return checksum


def validate_checksum(sentence: str) -> bool:
    """Return True if *sentence* is ``$<body>*hh`` with a matching checksum.

    Surrounding whitespace (e.g. a CR LF terminator) is ignored. A missing
    '$' or '*', a checksum that is not exactly two hex digits, or a
    mismatch all give False.
    """
    sentence = sentence.strip()
    if not sentence.startswith("$"):
        return False

    body, delimiter, provided = sentence[1:].partition(_CHECKSUM_DELIMITER)
    if not delimiter or len(provided) != _CHECKSUM_DIGITS:
        return False
    if not all(digit in _HEX_DIGITS for digit in provided):
        return False

    return calculate_checksum(body) == int(provided, 16)


def unframe_sentence(line: str) -> str | None:
    """Strip the line terminator and checksum from a received line.

    Lines without a '*' are passed through with only surrounding whitespace
    removed.

    Returns:
        The bare sentence, or None if a checksum is present but wrong.

    Example:
        >>> unframe_sentence("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25\\r\\n")
        '$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A'
    """
    line = line.strip()
    if _CHECKSUM_DELIMITER not in line:
        return line
    if not validate_checksum(line):
        return None
    return line[: line.index(_CHECKSUM_DELIMITER)]
