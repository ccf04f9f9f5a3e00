import logging
from typing import Optional, TextIO

from ...config.schema import AppConfig
from ...iterate import iterate
from ...models import Record, RecordType

logger = logging.getLogger(__name__)


def find_command(config: AppConfig, prefix: str, out: TextIO, input_path: Optional[str] = None) -> int:
    """Prints the path of every bundle whose identifier starts with ``prefix``."""
    scratch = Record()
    needle = prefix.lower()
    matches = 0

    def match(record: Record, _context) -> int:
        nonlocal matches
        if record.type != RecordType.BUNDLE:
            return 0
        bundle = record.rec
        name = bundle.identifier.name
        if name is not None and name.lower().startswith(needle) and bundle.path is not None:
            out.write(f"{bundle.path}\n")
            matches += 1
        return 0

    iterate(lambda _context: scratch, match, config=config, input_path=input_path)
    logger.info(f"[Find] {matches} bundles match '{prefix}'")
    return matches
