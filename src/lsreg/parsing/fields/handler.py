import logging

from ...models import ParseStatus, Record, RecordType
from ..identifier import parse_identifier
from ..line_source import LineSource

logger = logging.getLogger(__name__)


class HandlerFieldParser:
    @property
    def record_type(self) -> RecordType:
        return RecordType.HANDLER

    def parse(self, lines: LineSource, key: str, value: str, record: Record) -> ParseStatus:
        handler = record.rec

        if key == "content type":
            handler.content_type = value
        elif key == "extension":
            handler.extension = value
        elif key == "unknown":
            # lsregister prints URL schemes under this label
            handler.uri_scheme = value
        elif key == "all roles":
            handler.roles, _ = parse_identifier(value)
        elif key == "options":
            # Option names are not decoded; options stay at 0.
            pass
        else:
            logger.debug(f"Ignoring handler key '{key}' (uid {handler.uid})")

        return ParseStatus.CONTINUE
