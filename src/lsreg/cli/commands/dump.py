import logging
from typing import Optional, TextIO

from ...config.schema import AppConfig
from ...iterate import iterate
from ...models import Record
from ...render.register_builtin import get_renderer_registry

logger = logging.getLogger(__name__)


def dump_command(config: AppConfig, out: TextIO, input_path: Optional[str] = None) -> int:
    """Renders every record of the dump to ``out``. Returns the record count."""
    renderer = get_renderer_registry().get(config.output.format)
    scratch = Record()

    def render(record: Record, _context) -> int:
        renderer.render(record, out)
        return 0

    renderer.begin(out)
    count = iterate(lambda _context: scratch, render, config=config, input_path=input_path)
    renderer.end(out)

    logger.info(f"[Dump] Rendered {count} records as '{config.output.format}'")
    return count
