import re

from ...errors import HexCharacterError, HexTooWideError

_DECIMAL_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")

_HEX_VALUES = {c: int(c, 16) for c in "0123456789abcdefABCDEF"}


def x32ntoi(text: str) -> int:
    """
    Converts a hexadecimal string of at most 8 digits to an unsigned int.

    Digits are accumulated from the least significant end. An empty string
    converts to 0.

    Raises:
        HexTooWideError: more than 8 characters.
        HexCharacterError: a non-hex character was found. The value
            accumulated up to that point is attached as ``partial``.
    """
    if len(text) > 8:
        raise HexTooWideError(text)

    result = 0
    fact = 1
    for i in range(len(text) - 1, -1, -1):
        xv = _HEX_VALUES.get(text[i])
        if xv is None:
            raise HexCharacterError(text, i, result)
        result += xv * fact
        fact *= 16
    return result


def atoi(text: str) -> int:
    """Parses a leading decimal integer, returning 0 when there is none."""
    m = _DECIMAL_PREFIX_RE.match(text)
    if not m:
        return 0
    return int(m.group(1))


def to_uint32(value: int) -> int:
    return value & 0xFFFFFFFF
