"""Parameter payload construction from declarative templates."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from rpc2_records.config_nodes import TemplateNodeKind, classify_template_node

from .attribute_references import AttributeSource, resolve_attribute_reference

logger = logging.getLogger(__name__)


def build_params(template: Any, record: AttributeSource) -> Any:
    """Build the concrete request payload for one record.

    A callable template is invoked with the record and its result is returned
    as-is. A missing template yields an empty positional parameter list. Any
    other template is walked recursively and a new tree of the same shape is
    returned; the template itself is never modified.
    """
    if template is None:
        return []
    root = classify_template_node(template)
    if root.kind is TemplateNodeKind.COMPUTED:
        return root.value(record)
    return _build_node(template, record)


def _build_node(value: Any, record: AttributeSource) -> Any:
    node = classify_template_node(value)
    if node.kind is TemplateNodeKind.INTERIOR:
        return _build_interior(node.value, record)
    if node.kind is TemplateNodeKind.REFERENCE:
        lookup = resolve_attribute_reference(record, node.value)
        if not lookup.resolved:
            logger.debug("Keeping unresolved attribute reference %r", node.value)
        return lookup.value
    if node.kind is TemplateNodeKind.COMPUTED:
        return node.value(record)
    return node.value


def _build_interior(value: Mapping[Any, Any] | Sequence[Any], record: AttributeSource) -> Any:
    if isinstance(value, Mapping):
        return {key: _build_node(child, record) for key, child in value.items()}
    return [_build_node(child, record) for child in value]
