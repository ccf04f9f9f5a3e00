from .registry import RendererRegistry
from .plain import PlainRenderer
from .xml import XmlRenderer
from .jsonl import JsonRenderer


def register_builtin_renderers(registry: RendererRegistry):
    registry.register(PlainRenderer())
    registry.register(XmlRenderer())
    registry.register(JsonRenderer())


def get_renderer_registry() -> RendererRegistry:
    registry = RendererRegistry.get_instance()
    if not registry.list_formats():
        register_builtin_renderers(registry)
    return registry
