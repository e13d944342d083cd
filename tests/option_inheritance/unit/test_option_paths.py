"""Option path parsing tests."""

from __future__ import annotations

import pytest
from rpc2_records.option_inheritance.option_paths import (
    DEFAULT_ATOMIC_PATHS,
    AtomicOptionPaths,
    OptionPath,
    OptionPathError,
)


def test_parse_splits_scope_and_key() -> None:
    assert OptionPath.parse("methods.create") == OptionPath(scope="methods", key="create")
    assert OptionPath.parse(" methods . read ").dotted() == "methods.read"


@pytest.mark.parametrize("value", ["methods", "a.b.c", ".create", "methods.", ""])
def test_parse_rejects_malformed_paths(value: str) -> None:
    with pytest.raises(OptionPathError):
        OptionPath.parse(value)


def test_default_atomic_paths() -> None:
    assert DEFAULT_ATOMIC_PATHS.dotted() == (
        "methods.create",
        "methods.delete",
        "methods.read",
        "methods.update",
        "rpc_options.headers",
    )
    assert DEFAULT_ATOMIC_PATHS.contains("rpc_options", "headers")
    assert not DEFAULT_ATOMIC_PATHS.contains("methods", "headers")


def test_paths_compare_structurally() -> None:
    first = AtomicOptionPaths.from_dotted(["methods.create"])
    second = AtomicOptionPaths(paths=frozenset({OptionPath("methods", "create")}))

    assert first == second
