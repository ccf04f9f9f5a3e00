import re
from datetime import datetime
from typing import List, Optional, TextIO

from lxml import etree

from ..models import Bundle, Handler, Identifier, Record, RecordType, Volume

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Characters XML 1.0 cannot carry, even escaped
_XML_INVALID = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")

_INDENT = "  "


def _clean(value: Optional[str]) -> str:
    if not value:
        return ""
    return _XML_INVALID.sub("", value)


def _add_identifier(parent, ident: Identifier, tag: str):
    if ident.name is None:
        return
    el = etree.SubElement(parent, tag, hash=f"{ident.hash:x}")
    el.text = _clean(ident.name)


def _add_string(parent, value: Optional[str], tag: str):
    if not value:
        return
    etree.SubElement(parent, tag).text = _clean(value)


def _add_date(parent, value: Optional[datetime], tag: str):
    if value is None:
        return
    etree.SubElement(parent, tag).text = value.isoformat()


def _add_strings(parent, values: Optional[List[str]], tag: str, item_tag: str):
    if not values:
        return
    el = etree.SubElement(parent, tag)
    for value in values:
        _add_string(el, value, item_tag)


def bundle_element(b: Bundle):
    el = etree.Element(
        "bundle",
        id=str(b.uid),
        name=_clean(b.name),
        version=_clean(b.version),
        type_code=_clean(b.type_code),
        identifier=_clean(b.canonical_identifier.name),
    )
    _add_identifier(el, b.identifier, "identifier")
    _add_identifier(el, b.canonical_identifier, "canonical_identifier")
    _add_string(el, b.path, "path")
    _add_string(el, b.executable, "executable")
    _add_date(el, b.reg_date, "regdate")
    _add_date(el, b.mod_date, "moddate")
    _add_string(el, b.library, "library")
    _add_strings(el, b.library_items, "library_items", "item")
    return el


def volume_element(v: Volume):
    el = etree.Element(
        "volume",
        id=str(v.uid),
        mounted="true" if v.is_mounted else "false",
        vrefnum=str(v.vrefnum),
        flags=f"{int(v.flags):08x}",
    )
    _add_string(el, v.path, "path")
    _add_string(el, v.disk_image, "disk_image")
    return el


def handler_element(h: Handler):
    el = etree.Element(
        "handler",
        id=str(h.uid),
        content_type=_clean(h.content_type),
        extension=_clean(h.extension),
        uri_scheme=_clean(h.uri_scheme),
        options=f"{int(h.options):08x}",
    )
    _add_identifier(el, h.roles, "roles")
    return el


_BUILDERS = {
    RecordType.BUNDLE: bundle_element,
    RecordType.VOLUME: volume_element,
    RecordType.HANDLER: handler_element,
}


class XmlRenderer:
    """
    Streams a <records> document, one element per record.

    Unknown records are left out.
    """

    @property
    def format_id(self) -> str:
        return "xml"

    def begin(self, out: TextIO):
        out.write(XML_HEADER)
        out.write("<records>\n")

    def render(self, record: Record, out: TextIO):
        builder = _BUILDERS.get(record.type)
        if builder is None or record.rec is None:
            return
        text = etree.tostring(builder(record.rec), pretty_print=True, encoding="unicode")
        for line in text.splitlines():
            out.write(f"{_INDENT}{line}\n")

    def end(self, out: TextIO):
        out.write("</records>\n")
