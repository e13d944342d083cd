"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, build_registry, load_record_types
from .runtime_settings import RecordTypesConfiguration

__all__ = [
    "RecordTypesConfiguration",
    "ConfigurationError",
    "build_registry",
    "load_record_types",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
