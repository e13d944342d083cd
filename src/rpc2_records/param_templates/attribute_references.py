"""Attribute reference resolution against data records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from rpc2_records.config_nodes import ATTRIBUTE_REFERENCE_PREFIX


class AttributeSource(Protocol):  # pylint: disable=too-few-public-methods
    """Read-only attribute accessor required from data records."""

    def get(self, field_name: str) -> Any: ...


class LookupStatus(str, Enum):
    """Outcome of resolving one template string."""

    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"
    NOT_A_REFERENCE = "not_a_reference"


@dataclass(frozen=True)
class AttributeLookup:
    """Result of an attribute reference lookup."""

    status: LookupStatus
    value: Any

    @property
    def resolved(self) -> bool:
        return self.status is LookupStatus.RESOLVED


def is_attribute_reference(value: object) -> bool:
    """Return True when the value is a string of the form ``attributes.<field>``."""
    return isinstance(value, str) and value.startswith(ATTRIBUTE_REFERENCE_PREFIX)


def referenced_field(reference: str) -> str:
    """Strip the reference prefix; the remainder is passed whole to the record."""
    return reference[len(ATTRIBUTE_REFERENCE_PREFIX) :]


def resolve_attribute_reference(record: AttributeSource, value: str) -> AttributeLookup:
    """Resolve one template string against the record.

    Strings without the ``attributes.`` prefix are configuration literals and are
    returned untouched. References that resolve to an absent or falsy value are
    reported as unresolved so the caller can keep the template string in place.
    """
    if not is_attribute_reference(value):
        return AttributeLookup(status=LookupStatus.NOT_A_REFERENCE, value=value)

    resolved = record.get(referenced_field(value))
    if not resolved:
        return AttributeLookup(status=LookupStatus.UNRESOLVED, value=value)
    return AttributeLookup(status=LookupStatus.RESOLVED, value=resolved)
