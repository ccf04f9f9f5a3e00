from typing import Protocol, TextIO, runtime_checkable

from ..models import Record


@runtime_checkable
class Renderer(Protocol):
    @property
    def format_id(self) -> str:
        """Unique ID for this output format (e.g. 'c', 'xml')."""
        ...

    def begin(self, out: TextIO) -> None:
        """Write anything that precedes the first record."""
        ...

    def render(self, record: Record, out: TextIO) -> None:
        """Write a single record."""
        ...

    def end(self, out: TextIO) -> None:
        """Write anything that follows the last record."""
        ...
