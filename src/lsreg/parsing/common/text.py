from typing import Optional

_TERMINATORS = ("\r\n", "\n", "\r")


def strip_terminator(line: str) -> str:
    """Removes exactly one trailing line terminator, if present."""
    for term in _TERMINATORS:
        if line.endswith(term):
            return line[: -len(term)]
    return line


def is_blank(line: Optional[str]) -> bool:
    return line is not None and not line.strip()


def unquote(value: str) -> str:
    """Drops the one-character wrapping of values like 'APPL'."""
    if len(value) < 2:
        return ""
    return value[1:-1]
