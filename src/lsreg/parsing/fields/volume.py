import logging

from ...models import ParseStatus, Record, RecordType
from ..common.numbers import atoi
from ..line_source import LineSource

logger = logging.getLogger(__name__)

# "mounted" vs "unmounted": the dump only ever uses those two words, so the
# length alone tells them apart.
_MOUNTED_LEN = len("mounted")


class VolumeFieldParser:
    @property
    def record_type(self) -> RecordType:
        return RecordType.VOLUME

    def parse(self, lines: LineSource, key: str, value: str, record: Record) -> ParseStatus:
        vol = record.rec

        if key == "path":
            vol.path = value
        elif key == "disk image":
            vol.disk_image = value
        elif key == "state":
            vol.is_mounted = len(value) == _MOUNTED_LEN
        elif key == "vrefnum":
            vol.vrefnum = atoi(value)
        elif key == "flags":
            # The textual flag names are not decoded; flags stay at 0.
            pass
        else:
            logger.debug(f"Ignoring volume key '{key}' (uid {vol.uid})")

        return ParseStatus.CONTINUE
