from typing import Optional, Tuple

from .common.text import strip_terminator


def split_key_value(line: str) -> Optional[Tuple[str, str]]:
    """
    Splits "\\tpath:          /Applications/Foo.app\\n" on the first colon.

    The key is left-trimmed; the value is left-trimmed and loses its line
    terminator. Returns None when there is no colon.
    """
    colon = line.find(":")
    if colon == -1:
        return None

    key = line[:colon].lstrip()
    value = line[colon + 1:].lstrip()
    if value:
        value = strip_terminator(value)
    return key, value
