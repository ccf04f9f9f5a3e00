from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum, IntFlag
from typing import List, Optional, Union


class RecordType(IntEnum):
    UNKNOWN = 0
    BUNDLE = 1
    VOLUME = 2
    HANDLER = 3


class ParseStatus(IntEnum):
    CONTINUE = 0
    DONE = 1
    # Stream ended before a header line was read; there is no record.
    EXHAUSTED = 2


class VolumeFlags(IntFlag):
    LOCAL = 1
    DISK_IMAGE = 2
    SYSTEM_DEVICE = 4


class HandlerOptions(IntFlag):
    IGNORE_CREATOR = 1


@dataclass
class Identifier:
    name: Optional[str] = None   # "foo.bar.SomeThing"
    hash: int = 0                # 0x8000a10b

    @property
    def is_set(self) -> bool:
        return self.name is not None


@dataclass
class Bundle:
    uid: int = 0
    identifier: Identifier = field(default_factory=Identifier)
    canonical_identifier: Identifier = field(default_factory=Identifier)
    path: Optional[str] = None         # /Applications/Foo Bar.app
    name: Optional[str] = None         # "Foo Bar"
    version: Optional[str] = None      # "123", "1.2.3" or anything, really
    type_code: Optional[str] = None    # "APPL"
    executable: Optional[str] = None   # "Contents/MacOS/Slides"
    icon: Optional[str] = None         # "Contents/Resources/PPIcon.icns"
    reg_date: Optional[datetime] = None
    mod_date: Optional[datetime] = None
    library: Optional[str] = None      # "Contents/Library/"
    # None when the dump had no "library items" key
    library_items: Optional[List[str]] = None


@dataclass
class Volume:
    uid: int = 0
    path: Optional[str] = None         # mount path, may not exist
    disk_image: Optional[str] = None
    is_mounted: bool = False
    vrefnum: int = 0
    flags: VolumeFlags = VolumeFlags(0)


@dataclass
class Handler:
    uid: int = 0
    content_type: Optional[str] = None  # "com.apple.binhex-archive"
    extension: Optional[str] = None     # "html"
    uri_scheme: Optional[str] = None    # "http"
    roles: Identifier = field(default_factory=Identifier)
    options: HandlerOptions = HandlerOptions(0)


Payload = Union[Bundle, Volume, Handler]

_PAYLOAD_TYPES = {
    RecordType.BUNDLE: Bundle,
    RecordType.VOLUME: Volume,
    RecordType.HANDLER: Handler,
}


@dataclass
class Record:
    """
    One registry entry: a type tag plus the typed payload for that tag.

    ``rec`` is None while the record is UNKNOWN.
    """
    uid: int = 0
    type: RecordType = RecordType.UNKNOWN
    rec: Optional[Payload] = None

    def reset(self):
        """Returns reused storage to its empty state."""
        self.uid = 0
        self.type = RecordType.UNKNOWN
        self.rec = None

    def assign(self, record_type: RecordType, uid: int) -> Payload:
        """Tags the record and attaches a fresh payload carrying ``uid``."""
        self.uid = uid
        self.type = record_type
        self.rec = _PAYLOAD_TYPES[record_type](uid=uid)
        return self.rec

    @property
    def is_unknown(self) -> bool:
        return self.type == RecordType.UNKNOWN
