import logging
from typing import Tuple

from ..errors import HexError
from ..models import Identifier
from .common.numbers import x32ntoi

logger = logging.getLogger(__name__)

# "(0x"
_HASH_PREFIX_LEN = 3


def parse_identifier(value: str) -> Tuple[Identifier, bool]:
    """
    Parses "foo.bar.SomeThing (0x8000702f)" or a bare "foo.bar.SomeThing".

    Returns the identifier and whether its hash is reliable. A malformed
    hash is logged and left at 0; the name is populated either way.
    """
    ident = Identifier()
    hash_ok = True
    name = value

    paren = value.rfind("(")
    if paren != -1:
        start = paren + _HASH_PREFIX_LEN
        hash_len = len(value) - start - 1
        name = value[:paren]
        if hash_len < 0:
            logger.warning(f"Failed to parse hexadecimal number in string '{value[paren:]}'")
            hash_ok = False
        else:
            hash_text = value[start:start + hash_len]
            try:
                ident.hash = x32ntoi(hash_text)
            except HexError as e:
                logger.warning(f"Failed to parse hexadecimal number in string '{hash_text}': {e}")
                hash_ok = False

    ident.name = name.rstrip()
    return ident, hash_ok
