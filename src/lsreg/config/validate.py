from ..errors import ConfigError
from ..render.register_builtin import get_renderer_registry
from .schema import AppConfig


def validate_config(config: AppConfig):
    formats = get_renderer_registry().list_formats()
    if config.output.format not in formats:
        raise ConfigError(
            f"Unsupported output format '{config.output.format}' (expected one of: {', '.join(formats)})"
        )
