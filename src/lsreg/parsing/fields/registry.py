from typing import Dict, List, Optional

from ...models import RecordType
from .base import FieldParser


class FieldParserRegistry:
    _instance = None
    _parsers: Dict[RecordType, FieldParser] = {}

    @classmethod
    def get_instance(cls):
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register(self, parser: FieldParser):
        self._parsers[parser.record_type] = parser

    def get(self, record_type: RecordType) -> Optional[FieldParser]:
        return self._parsers.get(record_type)

    def list_types(self) -> List[RecordType]:
        return list(self._parsers.keys())
