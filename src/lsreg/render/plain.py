from datetime import datetime
from typing import List, Optional, TextIO

from ..models import Bundle, Handler, Identifier, Record, RecordType, Volume

NULL_DATE = "0000-00-00 00:00:00"


def _q(value: Optional[str]) -> str:
    return '"(null)"' if value is None else f'"{value}"'


def _date(value: Optional[datetime]) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else NULL_DATE


def format_identifier(ident: Identifier, indent: str) -> str:
    return (
        "<lsreg_identifier_t>{\n"
        f"{indent}  name = {_q(ident.name)}\n"
        f"{indent}  hash = 0x{ident.hash:x}\n"
        f"{indent}}}\n"
    )


def _format_items(items: Optional[List[str]]) -> str:
    if items is None:
        return "NULL\n"
    body = "".join(f'    "{item}"\n' for item in items)
    return f"[\n{body}  ]\n"


def format_bundle(b: Bundle) -> str:
    return (
        "<lsreg_bundle_t>{\n"
        f"  uid                  = {b.uid}\n"
        f"  identifier           = {format_identifier(b.identifier, '  ')}"
        f"  canonical_identifier = {format_identifier(b.canonical_identifier, '  ')}"
        f"  path                 = {_q(b.path)}\n"
        f"  name                 = {_q(b.name)}\n"
        f"  version              = {_q(b.version)}\n"
        f"  type_code            = {_q(b.type_code)}\n"
        f"  executable           = {_q(b.executable)}\n"
        f"  icon                 = {_q(b.icon)}\n"
        f"  regdate              = {_date(b.reg_date)}\n"
        f"  moddate              = {_date(b.mod_date)}\n"
        f"  library              = {_q(b.library)}\n"
        f"  library_items        = {_format_items(b.library_items)}"
        "}\n"
    )


def format_volume(v: Volume) -> str:
    return (
        "<lsreg_volume_t>{\n"
        f"  uid        = {v.uid}\n"
        f"  path       = {_q(v.path)}\n"
        f"  disk_image = {_q(v.disk_image)}\n"
        f"  is_mounted = {'YES' if v.is_mounted else 'NO'}\n"
        f"  vrefnum    = {v.vrefnum}\n"
        f"  flags      = 0x{int(v.flags):x}\n"
        "}\n"
    )


def format_handler(h: Handler) -> str:
    return (
        "<lsreg_handler_t>{\n"
        f"  uid          = {h.uid}\n"
        f"  content_type = {_q(h.content_type)}\n"
        f"  extension    = {_q(h.extension)}\n"
        f"  uri_scheme   = {_q(h.uri_scheme)}\n"
        f"  roles        = {format_identifier(h.roles, '  ')}"
        f"  options      = 0x{int(h.options):x}\n"
        "}\n"
    )


_FORMATTERS = {
    RecordType.BUNDLE: format_bundle,
    RecordType.VOLUME: format_volume,
    RecordType.HANDLER: format_handler,
}


class PlainRenderer:
    """Human readable dump, one struct-like block per record."""

    @property
    def format_id(self) -> str:
        return "c"

    def begin(self, out: TextIO):
        pass

    def render(self, record: Record, out: TextIO):
        formatter = _FORMATTERS.get(record.type)
        if formatter is None or record.rec is None:
            out.write("No dump function for record of type unknown\n")
            return
        out.write(formatter(record.rec))

    def end(self, out: TextIO):
        pass
