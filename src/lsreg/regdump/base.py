from typing import BinaryIO, Protocol


class DumpSource(Protocol):
    stream: BinaryIO

    def close(self) -> None:
        """Release the stream (and reap the dump process, if any)."""
        ...

    def __enter__(self) -> "DumpSource":
        ...

    def __exit__(self, exc_type, exc, tb) -> None:
        ...
