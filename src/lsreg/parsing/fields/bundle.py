import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from ...models import Bundle, ParseStatus, Record, RecordType
from ..common.text import strip_terminator, unquote
from ..identifier import parse_identifier
from ..line_source import LineSource
from .base import FieldStatus

logger = logging.getLogger(__name__)

# input example: "6/26/2006 2:41:56"
DATE_FORMAT = "%m/%d/%Y %H:%M:%S"

# Library item continuation lines look like "\t               Foo.bundle"
_ITEM_PREFIX = "\t  "
_ITEM_MIN_LEN = 16

_PLIST_END = "</plist>"

# Keys copied verbatim into the bundle attribute of the same meaning
_STRING_FIELDS = {
    "path": "path",
    "name": "name",
    "version": "version",
    "executable": "executable",
    "icon": "icon",
    "library": "library",
}

_DATE_FIELDS = {
    "mod date": "mod_date",
    "reg date": "reg_date",
}

_IDENTIFIER_FIELDS = {
    "identifier": "identifier",
    "canonical id": "canonical_identifier",
}


def parse_date(value: str) -> Optional[datetime]:
    try:
        return datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        logger.warning(f"Failed to parse date '{value}'")
        return None


def set_field(bundle: Bundle, key: str, value: str) -> FieldStatus:
    """Assigns a single-line bundle key. Unknown keys are left alone."""
    if key in _STRING_FIELDS:
        setattr(bundle, _STRING_FIELDS[key], value)
    elif key == "type code":
        bundle.type_code = unquote(value)
    elif key in _DATE_FIELDS:
        date = parse_date(value)
        setattr(bundle, _DATE_FIELDS[key], date)
        if date is None:
            return FieldStatus.INVALID_VALUE
    elif key in _IDENTIFIER_FIELDS:
        ident, hash_ok = parse_identifier(value)
        setattr(bundle, _IDENTIFIER_FIELDS[key], ident)
        if not hash_ok:
            return FieldStatus.INVALID_VALUE
    else:
        return FieldStatus.UNKNOWN_KEY
    return FieldStatus.SET


class BundleFieldParser:
    @property
    def record_type(self) -> RecordType:
        return RecordType.BUNDLE

    def parse(self, lines: LineSource, key: str, value: str, record: Record) -> ParseStatus:
        bundle = record.rec

        if key == "library items":
            return self._read_library_items(lines, value, bundle)
        if key == "properties":
            return self._skip_properties(lines, value)

        status = set_field(bundle, key, value)
        if status == FieldStatus.UNKNOWN_KEY:
            logger.debug(f"Ignoring bundle key '{key}' (uid {bundle.uid})")
        return ParseStatus.CONTINUE

    def _read_library_items(self, lines: LineSource, value: str, bundle: Bundle) -> ParseStatus:
        # "library items" always follows "canonical id", so when the latter
        # is missing the plain identifier is the canonical one.
        if not bundle.canonical_identifier.is_set and bundle.identifier.is_set:
            bundle.canonical_identifier = replace(bundle.identifier)

        items = []
        if value:
            items.append(value)
        bundle.library_items = items

        while True:
            line = lines.read_line()
            if line is None:
                return ParseStatus.DONE
            if len(line) > _ITEM_MIN_LEN and line.startswith(_ITEM_PREFIX):
                items.append(strip_terminator(line).lstrip())
            else:
                lines.push_back(line)
                return ParseStatus.CONTINUE

    def _skip_properties(self, lines: LineSource, value: str) -> ParseStatus:
        if _PLIST_END in value:
            return ParseStatus.CONTINUE

        known_to_be_plist = False
        while True:
            line = lines.read_line()
            if line is None:
                return ParseStatus.DONE
            if not known_to_be_plist:
                if line.startswith("\t"):
                    logger.warning(
                        f"Expected plist xml document but found new key at line {lines.line_number}: "
                        f"'{line.rstrip()}'"
                    )
                    lines.push_back(line)
                    return ParseStatus.CONTINUE
                known_to_be_plist = True
            stripped = line.strip()
            if len(stripped) >= len(_PLIST_END) and stripped.startswith(_PLIST_END):
                return ParseStatus.CONTINUE
