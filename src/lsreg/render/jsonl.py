import json
from dataclasses import asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict, TextIO

from ..models import Record


def _default(obj: Any):
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return int(value)
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def record_to_dict(record: Record) -> Dict[str, Any]:
    data: Dict[str, Any] = {"type": record.type.name.lower(), "uid": record.uid}
    if record.rec is not None:
        payload = _plain(asdict(record.rec))
        payload.pop("uid", None)
        data.update(payload)
    return data


class JsonRenderer:
    """One JSON object per line."""

    @property
    def format_id(self) -> str:
        return "json"

    def begin(self, out: TextIO):
        pass

    def render(self, record: Record, out: TextIO):
        out.write(json.dumps(record_to_dict(record), default=_default, ensure_ascii=False))
        out.write("\n")

    def end(self, out: TextIO):
        pass
