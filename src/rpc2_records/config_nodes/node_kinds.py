"""Node kinds shared by parameter templates and option trees."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

ATTRIBUTE_REFERENCE_PREFIX = "attributes."


class TemplateNodeKind(str, Enum):
    """Supported node kinds of a configuration or template tree."""

    LITERAL = "literal"
    REFERENCE = "reference"
    COMPUTED = "computed"
    INTERIOR = "interior"


@dataclass(frozen=True)
class TemplateNode:
    """Classified template value."""

    kind: TemplateNodeKind
    value: Any


ComputedValue = Callable[[Any], Any]


def classify_template_node(value: object) -> TemplateNode:
    """Classify a raw tree value into an explicit node kind."""
    if isinstance(value, str):
        if value.startswith(ATTRIBUTE_REFERENCE_PREFIX):
            return TemplateNode(kind=TemplateNodeKind.REFERENCE, value=value)
        return TemplateNode(kind=TemplateNodeKind.LITERAL, value=value)
    if is_interior_node(value):
        return TemplateNode(kind=TemplateNodeKind.INTERIOR, value=value)
    if callable(value):
        return TemplateNode(kind=TemplateNodeKind.COMPUTED, value=value)
    return TemplateNode(kind=TemplateNodeKind.LITERAL, value=value)


def is_interior_node(value: object) -> bool:
    """Return True for mappings and non-string sequences."""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Mapping, Sequence))
