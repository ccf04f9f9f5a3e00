import logging
from typing import BinaryIO, Optional

logger = logging.getLogger(__name__)


class LineSource:
    """
    Pulls one line at a time off a binary stream.

    Lines keep their terminator. Read failures are logged and reported the
    same way as end of stream, since the dump cannot be resumed anyway.
    A single line may be pushed back so the next reader sees it again.
    """

    def __init__(self, stream: BinaryIO, encoding: str = "utf-8"):
        self.stream = stream
        self.encoding = encoding
        self.line_number = 0
        self._pushed: Optional[str] = None
        self._eof = False

    def read_line(self) -> Optional[str]:
        if self._pushed is not None:
            line, self._pushed = self._pushed, None
            return line
        if self._eof:
            return None

        try:
            raw = self.stream.readline()
        except (OSError, ValueError) as e:
            logger.error(f"Error while reading line {self.line_number + 1}: {e}")
            self._eof = True
            return None

        if not raw:
            self._eof = True
            return None

        self.line_number += 1
        if isinstance(raw, bytes):
            return raw.decode(self.encoding, errors="replace")
        return raw

    def push_back(self, line: str):
        if self._pushed is not None:
            raise RuntimeError("Only one line can be pushed back")
        self._pushed = line

    def skip(self, count: int) -> bool:
        """Discards ``count`` lines. Returns False if the stream ended first."""
        for _ in range(count):
            if self.read_line() is None:
                return False
        return True
