"""Record type domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class RecordTypeError(Exception):
    """Raised when record type declarations cannot be registered or resolved."""


class CrudVerb(str, Enum):
    """Logical operations routed to RPC methods."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"

    @staticmethod
    def parse(value: object) -> CrudVerb | None:
        if isinstance(value, CrudVerb):
            return value
        try:
            return CrudVerb(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class MethodOptions:
    """RPC method name and parameter template for one verb."""

    method: str
    params: Any = None


@dataclass(frozen=True)
class RpcOptions:
    """Typed view of a resolved ``rpc_options`` tree."""

    headers: Mapping[str, Any]
    methods: Mapping[CrudVerb, MethodOptions]

    def method_for(self, verb: CrudVerb) -> MethodOptions | None:
        return self.methods.get(verb)


@dataclass(frozen=True)
class RecordSchema:
    """Record type declaration, possibly partial, as written by the user."""

    name: str
    extends: str | None = None
    url: str | None = None
    rpc_options: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ResolvedRecordType:
    """Record type after option inheritance; read-only and shared across dispatches."""

    name: str
    ancestors: tuple[str, ...]
    url: str
    rpc_options: RpcOptions
    options_tree: Mapping[str, Any]

    def options_as_dict(self) -> dict[str, Any]:
        """Return a plain, mutable copy of the resolved options tree."""
        return _thaw(self.options_tree)


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(child) for key, child in value.items()}
    if isinstance(value, tuple):
        return [_thaw(child) for child in value]
    return value
