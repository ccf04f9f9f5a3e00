"""
Exception types raised by lsreg.

Parsing problems inside a record are logged and never raised past the
record parser; these exceptions mark the few places where a caller has to
decide what to do (hex conversion, opening the dump, loading config).
"""

from typing import Optional


class LsregError(Exception):
    """Base exception for lsreg errors."""
    pass


class HexError(LsregError, ValueError):
    """A hexadecimal span could not be converted to a 32-bit integer."""

    def __init__(self, message: str, text: str, partial: Optional[int] = None):
        super().__init__(message)
        self.text = text
        self.partial = partial


class HexTooWideError(HexError):
    def __init__(self, text: str):
        super().__init__(f"Hexadecimal value too wide for 32 bits: '{text}'", text)


class HexCharacterError(HexError):
    def __init__(self, text: str, position: int, partial: int):
        super().__init__(
            f"Invalid hexadecimal character {text[position]!r} at position {position} in '{text}'",
            text,
            partial,
        )
        self.position = position


class RegdumpError(LsregError):
    """The registry dump could not be opened or read."""
    pass


class ConfigError(LsregError):
    """Configuration file is missing required values or is malformed."""
    pass
