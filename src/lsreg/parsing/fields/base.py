from enum import IntEnum
from typing import Protocol, runtime_checkable

from ...models import ParseStatus, Record, RecordType
from ..line_source import LineSource


class FieldStatus(IntEnum):
    SET = 0
    UNKNOWN_KEY = 1
    INVALID_VALUE = 2


@runtime_checkable
class FieldParser(Protocol):
    @property
    def record_type(self) -> RecordType:
        """The record type this parser populates."""
        ...

    def parse(self, lines: LineSource, key: str, value: str, record: Record) -> ParseStatus:
        """
        Apply one key/value pair to ``record.rec``.

        Parsers that need more than the current line may read further lines
        from ``lines``; a line that does not belong to them must be pushed
        back. Returns DONE if the stream ended while reading.
        """
        ...
