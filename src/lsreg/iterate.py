"""
Record iteration over a registry dump.

Two ways to consume records:

* ``iter_records(stream)`` yields a new Record per section; the caller
  owns every yielded value.
* ``iterate(factory, handler, context)`` asks ``factory(context)`` for
  storage before every section and calls ``handler(record, context)``
  after it. A factory may hand out the same Record each time, in which case
  the handler must not keep it past the call. A truthy handler return value
  stops the iteration.

Both skip the dump's fixed preamble first.
"""

import logging
from typing import Any, BinaryIO, Callable, Iterator, Optional

from .config.schema import AppConfig, DEFAULT_HEADER_LINES
from .models import ParseStatus, Record
from .parsing.line_source import LineSource
from .parsing.record_parser import ON_UNKNOWN_STOP, RecordParser
from .regdump.sources import open_regdump

logger = logging.getLogger(__name__)

RecordFactory = Callable[[Any], Record]
RecordHandler = Callable[[Record, Any], Any]


def iter_records(stream: BinaryIO, header_lines: int = DEFAULT_HEADER_LINES,
                 on_unknown: str = ON_UNKNOWN_STOP, encoding: str = "utf-8") -> Iterator[Record]:
    lines = LineSource(stream, encoding=encoding)
    if not lines.skip(header_lines):
        logger.error("Registry dump ended inside its header")
        return

    parser = RecordParser(lines, on_unknown=on_unknown)
    while True:
        record = Record()
        status = parser.parse(record)
        if status == ParseStatus.EXHAUSTED:
            return
        yield record
        if status != ParseStatus.CONTINUE:
            return


def iterate(factory: RecordFactory, handler: RecordHandler, context: Any = None,
            stream: Optional[BinaryIO] = None, config: Optional[AppConfig] = None,
            input_path: Optional[str] = None) -> int:
    """
    Runs ``handler`` over every record of the dump.

    Reads ``stream`` if given; otherwise opens the dump (``input_path`` or
    the lsregister process) and closes it when done. Returns the number of
    handler calls.
    """
    if config is None:
        config = AppConfig()

    if stream is not None:
        return _iterate_stream(stream, factory, handler, context, config)

    with open_regdump(config, input_path) as source:
        return _iterate_stream(source.stream, factory, handler, context, config)


def _iterate_stream(stream: BinaryIO, factory: RecordFactory, handler: RecordHandler,
                    context: Any, config: AppConfig) -> int:
    lines = LineSource(stream, encoding=config.regdump.encoding)
    if not lines.skip(config.regdump.header_lines):
        logger.error("Registry dump ended inside its header")
        return 0

    parser = RecordParser(lines, on_unknown=config.parser.on_unknown)
    count = 0
    while True:
        record = factory(context)
        record.reset()
        status = parser.parse(record)
        if status == ParseStatus.EXHAUSTED:
            break

        count += 1
        if handler(record, context):
            logger.debug(f"Handler stopped iteration after {count} records")
            break
        if status != ParseStatus.CONTINUE:
            break

    logger.debug(f"Iterated {count} records ({lines.line_number} lines)")
    return count
