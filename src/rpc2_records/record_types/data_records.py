"""Data records read by parameter templates."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rpc2_records.param_templates.attribute_references import AttributeSource

DataRecord = AttributeSource


class MappingRecord:  # pylint: disable=too-few-public-methods
    """Data record backed by a plain attribute mapping.

    ``get`` looks the field name up as-is first. Names containing dots that are
    not present as flat keys are read through nested mappings.
    """

    def __init__(self, attributes: Mapping[str, Any] | None = None) -> None:
        self._attributes = dict(attributes or {})

    @property
    def attributes(self) -> Mapping[str, Any]:
        return self._attributes

    def get(self, field_name: str) -> Any:
        if field_name in self._attributes:
            return self._attributes[field_name]
        if "." not in field_name:
            return None
        current: Any = self._attributes
        for part in field_name.split("."):
            if not isinstance(current, Mapping) or part not in current:
                return None
            current = current[part]
        return current

    def __repr__(self) -> str:
        return f"MappingRecord({self._attributes!r})"
