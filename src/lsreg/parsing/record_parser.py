import logging
from typing import Optional

from ..models import ParseStatus, Record, RecordType
from .common.numbers import atoi, to_uint32
from .common.text import is_blank
from .fields.base import FieldParser
from .fields.register_builtin import register_missing_builtin_parsers
from .fields.registry import FieldParserRegistry
from .kv import split_key_value
from .line_source import LineSource

logger = logging.getLogger(__name__)

# Shorter lines cannot hold both a type token and a uid
MIN_HEADER_LEN = 8

_HEADER_TOKENS = (
    ("bundle", RecordType.BUNDLE),
    ("volume", RecordType.VOLUME),
    ("handler", RecordType.HANDLER),
)

ON_UNKNOWN_STOP = "stop"
ON_UNKNOWN_RESYNC = "resync"


def detect_record_type(line: str) -> RecordType:
    if len(line) < MIN_HEADER_LEN:
        return RecordType.UNKNOWN
    for token, record_type in _HEADER_TOKENS:
        if line.startswith(token):
            return record_type
    return RecordType.UNKNOWN


def parse_uid(line: str) -> int:
    colon = line.find(":")
    if colon == -1:
        return 0
    return to_uint32(atoi(line[colon + 1:]))


class RecordParser:
    """
    Reads one section of the dump into a Record.

    A section starts with a "<type> id: <uid>" header, continues with
    key/value lines until a "\\t-----" line closes the main info, and ends at
    the next line starting with "-". Everything after the main info is
    read and discarded.
    """

    def __init__(self, lines: LineSource, registry: Optional[FieldParserRegistry] = None,
                 on_unknown: str = ON_UNKNOWN_STOP):
        if on_unknown not in (ON_UNKNOWN_STOP, ON_UNKNOWN_RESYNC):
            raise ValueError(f"Unknown on_unknown policy: {on_unknown}")
        self.lines = lines
        self.on_unknown = on_unknown
        if registry is None:
            registry = FieldParserRegistry.get_instance()
            register_missing_builtin_parsers(registry)
        self.registry = registry

    def parse(self, record: Record) -> ParseStatus:
        line = self.lines.read_line()
        if line is None:
            return ParseStatus.EXHAUSTED

        parser = self._start_record(line, record)
        if parser is None:
            logger.error(
                f"Unsupported record type at line {self.lines.line_number}: '{line.rstrip()}'"
            )
            if self.on_unknown == ON_UNKNOWN_RESYNC:
                return self._drain()
            return ParseStatus.DONE

        return self._read_main(parser, record)

    def _start_record(self, line: str, record: Record) -> Optional[FieldParser]:
        # Unknown records keep the header uid too
        if len(line) >= MIN_HEADER_LEN:
            record.uid = parse_uid(line)
        record_type = detect_record_type(line)
        if record_type == RecordType.UNKNOWN:
            return None
        parser = self.registry.get(record_type)
        if parser is None:
            return None
        record.assign(record_type, record.uid)
        return parser

    def _read_main(self, parser: FieldParser, record: Record) -> ParseStatus:
        while True:
            line = self.lines.read_line()
            if line is None:
                return ParseStatus.DONE
            if is_blank(line):
                continue
            if line.startswith("-"):
                return ParseStatus.CONTINUE
            if line.startswith("\t-"):
                return self._drain()

            pair = split_key_value(line)
            if pair is None:
                logger.warning(f"Unable to parse line {self.lines.line_number}: '{line.rstrip()}'")
                continue

            key, value = pair
            status = parser.parse(self.lines, key, value, record)
            if status != ParseStatus.CONTINUE:
                return status

    def _drain(self) -> ParseStatus:
        """Discards lines up to and including the section terminator."""
        while True:
            line = self.lines.read_line()
            if line is None:
                return ParseStatus.DONE
            if line.startswith("-"):
                return ParseStatus.CONTINUE
