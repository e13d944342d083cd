"""Configuration tree node exports."""

from .node_kinds import (
    ATTRIBUTE_REFERENCE_PREFIX,
    ComputedValue,
    TemplateNode,
    TemplateNodeKind,
    classify_template_node,
    is_interior_node,
)

__all__ = [
    "ATTRIBUTE_REFERENCE_PREFIX",
    "ComputedValue",
    "TemplateNode",
    "TemplateNodeKind",
    "classify_template_node",
    "is_interior_node",
]
