"""Configuration loader service."""

from __future__ import annotations

import importlib
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from rpc2_records.option_inheritance import (
    DEFAULT_ATOMIC_PATHS,
    AtomicOptionPaths,
    OptionPathError,
)
from rpc2_records.record_types import RecordSchema, RecordTypeError, RecordTypeRegistry

from .runtime_settings import RecordTypesConfiguration

PARAMS_FACTORY_KEY = "params_factory"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_record_types(config_path: Path | str) -> RecordTypesConfiguration:
    """Load and validate record type declarations from a YAML or JSON file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    record_types = _parse_record_types_section(parsed.get("record_types"))
    atomic_paths = _parse_atomic_paths(parsed.get("atomic_paths"))
    return RecordTypesConfiguration(
        path=path,
        record_types=record_types,
        atomic_paths=atomic_paths,
    )


def build_registry(configuration: RecordTypesConfiguration) -> RecordTypeRegistry:
    """Register every declared record type and check that each one resolves."""
    registry = RecordTypeRegistry(atomic_paths=configuration.atomic_paths)
    try:
        for schema in configuration.record_types:
            registry.register(schema)
        for name in registry.names():
            registry.resolve(name)
    except RecordTypeError as exc:
        raise ConfigurationError(str(exc)) from exc
    return registry


def _parse_record_types_section(value: Any) -> tuple[RecordSchema, ...]:
    section = _require_mapping(value, "record_types")
    if not section:
        raise ConfigurationError("record_types must declare at least one record type.")
    return tuple(
        _parse_record_type(_require_non_empty_string(name, "record_types key"), definition)
        for name, definition in section.items()
    )


def _parse_record_type(name: str, value: Any) -> RecordSchema:
    label = f"record_types.{name}"
    section = {} if value is None else _require_mapping(value, label)
    extends = _optional_string(section.get("extends"), f"{label}.extends")
    url = _optional_string(section.get("url"), f"{label}.url")
    rpc_options_raw = section.get("rpc_options")
    rpc_options = (
        {} if rpc_options_raw is None else _require_mapping(rpc_options_raw, f"{label}.rpc_options")
    )
    return RecordSchema(
        name=name,
        extends=extends,
        url=url,
        rpc_options=_parse_rpc_options(rpc_options, label=f"{label}.rpc_options"),
    )


def _parse_rpc_options(section: Mapping[str, Any], *, label: str) -> dict[str, Any]:
    options = dict(section)
    headers = options.get("headers")
    if headers is not None and not isinstance(headers, Mapping):
        raise ConfigurationError(f"{label}.headers must be a mapping.")
    methods = options.get("methods")
    if methods is None:
        return options
    methods_section = _require_mapping(methods, f"{label}.methods")
    options["methods"] = {
        verb: _parse_method_entry(entry, label=f"{label}.methods.{verb}")
        for verb, entry in methods_section.items()
    }
    return options


def _parse_method_entry(value: Any, *, label: str) -> dict[str, Any]:
    entry = dict(_require_mapping(value, label))
    if "method" in entry:
        entry["method"] = _require_non_empty_string(entry["method"], f"{label}.method")
    factory_path = entry.pop(PARAMS_FACTORY_KEY, None)
    if factory_path is not None:
        if "params" in entry:
            raise ConfigurationError(f"{label} must not set both params and {PARAMS_FACTORY_KEY}.")
        entry["params"] = _import_params_factory(factory_path, f"{label}.{PARAMS_FACTORY_KEY}")
    return entry


def _import_params_factory(value: Any, field_name: str) -> Callable[[Any], Any]:
    reference = _require_non_empty_string(value, field_name)
    module_name, separator, attribute_path = reference.partition(":")
    if not separator or not module_name or not attribute_path:
        raise ConfigurationError(f"{field_name} must have the form 'package.module:callable'.")
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(
            f"{field_name}: cannot import module {module_name}: {exc}"
        ) from exc
    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise ConfigurationError(f"{field_name}: {reference} does not exist.") from exc
    if not callable(target):
        raise ConfigurationError(f"{field_name}: {reference} is not callable.")
    return target


def _parse_atomic_paths(value: Any) -> AtomicOptionPaths:
    if value is None:
        return DEFAULT_ATOMIC_PATHS
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("atomic_paths must be a list of dotted option paths.")
    for item in value:
        _require_non_empty_string(item, "atomic_paths entry")
    try:
        return AtomicOptionPaths.from_dotted(item.strip() for item in value)
    except OptionPathError as exc:
        raise ConfigurationError(str(exc)) from exc


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
