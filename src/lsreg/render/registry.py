from typing import Dict
from .base import Renderer


class RendererRegistry:
    _instance = None
    _renderers: Dict[str, Renderer] = {}

    @classmethod
    def get_instance(cls):
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register(self, renderer: Renderer):
        self._renderers[renderer.format_id] = renderer

    def get(self, format_id: str) -> Renderer:
        key = format_id.lower()
        if key not in self._renderers:
            raise ValueError(f"Unsupported format: {format_id}")
        return self._renderers[key]

    def list_formats(self):
        return list(self._renderers.keys())
