from .registry import FieldParserRegistry
from .bundle import BundleFieldParser
from .volume import VolumeFieldParser
from .handler import HandlerFieldParser


def _builtin_parsers():
    return [BundleFieldParser(), VolumeFieldParser(), HandlerFieldParser()]


def register_builtin_parsers(registry: FieldParserRegistry):
    for parser in _builtin_parsers():
        registry.register(parser)


def register_missing_builtin_parsers(registry: FieldParserRegistry):
    """Fills in builtins only for record types nobody has registered yet."""
    for parser in _builtin_parsers():
        if registry.get(parser.record_type) is None:
            registry.register(parser)
