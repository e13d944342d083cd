"""Option inheritance across record type levels."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

from rpc2_records.config_nodes import TemplateNodeKind, classify_template_node

from .option_paths import DEFAULT_ATOMIC_PATHS, ROOT_OPTION_SCOPE, AtomicOptionPaths

logger = logging.getLogger(__name__)


def merge_options(
    child: MutableMapping[str, Any],
    parent: Mapping[str, Any],
    current_scope: str = ROOT_OPTION_SCOPE,
    *,
    atomic_paths: AtomicOptionPaths = DEFAULT_ATOMIC_PATHS,
) -> MutableMapping[str, Any]:
    """Fill options missing from ``child`` with the values declared by ``parent``.

    ``child`` is mutated in place and returned. Keys already present in the child
    are never removed or reordered; a child mapping is merged key by key with the
    parent's mapping unless ``<current_scope>.<key>`` is an atomic path, in which
    case the child's subtree wins as a whole.

    Args:
      child: Options declared by the more specific record type.
      parent: Options declared by the next ancestor.
      current_scope: Key of the subtree being merged (``rpc_options`` at the root).
      atomic_paths: Paths inherited as a whole.

    Returns:
      The mutated ``child`` mapping.
    """
    for key, parent_value in parent.items():
        if key not in child:
            child[key] = parent_value
            continue
        if atomic_paths.contains(current_scope, key):
            continue
        child_value = child[key]
        if isinstance(child_value, MutableMapping) and _is_interior(parent_value):
            child[key] = merge_options(
                child_value, parent_value, str(key), atomic_paths=atomic_paths
            )
    return child


def resolve_option_chain(
    own_options: Mapping[str, Any],
    ancestor_options: Sequence[Mapping[str, Any]],
    *,
    atomic_paths: AtomicOptionPaths = DEFAULT_ATOMIC_PATHS,
) -> dict[str, Any]:
    """Merge a record type's own options with its ancestors, nearest ancestor first.

    The declared trees are deep-copied so that resolution never alters the
    declarations it reads from.
    """
    resolved: dict[str, Any] = copy.deepcopy(dict(own_options))
    for level, ancestor in enumerate(ancestor_options, start=1):
        logger.debug("Merging options with ancestor level %d", level)
        merge_options(
            resolved,
            copy.deepcopy(ancestor),
            ROOT_OPTION_SCOPE,
            atomic_paths=atomic_paths,
        )
    return resolved


def _is_interior(value: Any) -> bool:
    node = classify_template_node(value)
    return node.kind is TemplateNodeKind.INTERIOR and isinstance(value, Mapping)
