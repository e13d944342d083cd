"""Option inheritance tests."""

from __future__ import annotations

import copy
from typing import Any

from rpc2_records.option_inheritance.option_merger import merge_options, resolve_option_chain
from rpc2_records.option_inheritance.option_paths import AtomicOptionPaths


def _parent() -> dict[str, Any]:
    return {
        "headers": {"X-Api-Key": "parent-key", "X-Trace": "on"},
        "timeout": 30,
        "methods": {
            "create": {"method": "create", "params": {"name": "attributes.name"}},
            "read": {"method": "read", "params": {"id": "attributes.id"}},
        },
        "extras": {"retries": 0, "labels": {"team": "core"}},
    }


def test_fills_keys_missing_from_child() -> None:
    child: dict[str, Any] = {"timeout": 5}

    merged = merge_options(child, _parent())

    assert merged is child
    assert merged["timeout"] == 5
    assert merged["headers"] == {"X-Api-Key": "parent-key", "X-Trace": "on"}
    assert merged["methods"]["read"] == {"method": "read", "params": {"id": "attributes.id"}}


def test_merges_non_atomic_subtrees_key_by_key() -> None:
    child: dict[str, Any] = {"extras": {"labels": {"owner": "me"}}}

    merged = merge_options(child, _parent())

    assert merged["extras"] == {"labels": {"owner": "me", "team": "core"}, "retries": 0}


def test_atomic_subtrees_are_never_merged_partially() -> None:
    child: dict[str, Any] = {
        "headers": {"X-Api-Key": "child-key"},
        "methods": {"create": {"method": "contacts.create"}},
    }

    merged = merge_options(child, _parent())

    assert merged["headers"] == {"X-Api-Key": "child-key"}
    assert merged["methods"]["create"] == {"method": "contacts.create"}
    assert merged["methods"]["read"]["method"] == "read"


def test_child_scalars_win_over_parent_mappings() -> None:
    child: dict[str, Any] = {"extras": "disabled"}

    merged = merge_options(child, _parent())

    assert merged["extras"] == "disabled"


def test_child_key_order_is_kept_and_parent_keys_are_appended() -> None:
    child: dict[str, Any] = {"methods": {"read": {"method": "r"}}, "timeout": 1}

    merged = merge_options(child, _parent())

    assert list(merged) == ["methods", "timeout", "headers", "extras"]
    assert list(merged["methods"]) == ["read", "create"]


def test_sequences_are_leaves() -> None:
    child: dict[str, Any] = {"order": ["b"]}

    merged = merge_options(child, {"order": ["a", "b", "c"]})

    assert merged["order"] == ["b"]


def test_merge_is_idempotent() -> None:
    child: dict[str, Any] = {"headers": {"X": "1"}, "extras": {"labels": {}}}
    parent = _parent()

    once = merge_options(copy.deepcopy(child), parent)
    twice = merge_options(copy.deepcopy(once), parent)

    assert twice == once


def test_atomic_paths_are_scoped_by_enclosing_key() -> None:
    atomic = AtomicOptionPaths.from_dotted(["settings.limits"])
    parent = {"settings": {"limits": {"max": 10, "min": 1}}, "limits": {"max": 10, "min": 1}}
    child: dict[str, Any] = {"settings": {"limits": {"max": 5}}, "limits": {"max": 5}}

    merged = merge_options(child, parent, atomic_paths=atomic)

    assert merged["settings"]["limits"] == {"max": 5}
    assert merged["limits"] == {"max": 5, "min": 1}


def test_empty_atomic_set_merges_everything() -> None:
    child: dict[str, Any] = {"headers": {"X-Api-Key": "child-key"}}

    merged = merge_options(child, _parent(), atomic_paths=AtomicOptionPaths())

    assert merged["headers"] == {"X-Api-Key": "child-key", "X-Trace": "on"}


def test_resolve_option_chain_without_ancestors_uses_own_options() -> None:
    own = {"methods": {"read": {"method": "r"}}}

    resolved = resolve_option_chain(own, [])

    assert resolved == own
    assert resolved is not own


def test_resolve_option_chain_walks_three_levels() -> None:
    grandparent = {
        "methods": {
            "read": {"method": "read", "params": {"id": "attributes.id"}},
            "update": {"method": "update", "params": {"id": "attributes.id"}},
        }
    }
    parent = {"methods": {"update": {"method": "update", "params": {"extra": "x"}}}}
    child: dict[str, Any] = {}

    resolved = resolve_option_chain(child, [parent, grandparent])

    assert resolved["methods"]["read"]["method"] == "read"
    assert resolved["methods"]["update"]["params"]["extra"] == "x"
    assert "id" not in resolved["methods"]["update"]["params"]


def test_resolve_option_chain_does_not_touch_declarations() -> None:
    grandparent = {"methods": {"read": {"method": "read"}}, "headers": {"A": "1"}}
    parent: dict[str, Any] = {"methods": {"update": {"method": "update"}}}
    child: dict[str, Any] = {"headers": {"B": "2"}}
    snapshots = [copy.deepcopy(tree) for tree in (child, parent, grandparent)]

    resolve_option_chain(child, [parent, grandparent])

    assert [child, parent, grandparent] == snapshots
