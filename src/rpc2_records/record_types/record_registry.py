"""Record type registration and memoized option resolution."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from rpc2_records.option_inheritance import (
    DEFAULT_ATOMIC_PATHS,
    AtomicOptionPaths,
    resolve_option_chain,
)

from .default_options import BASE_RECORD_SCHEMA, DEFAULT_RPC_URL
from .record_models import (
    CrudVerb,
    MethodOptions,
    RecordSchema,
    RecordTypeError,
    ResolvedRecordType,
    RpcOptions,
)

logger = logging.getLogger(__name__)


class RecordTypeRegistry:
    """Holds record type declarations and resolves each one at most once.

    Resolution walks the declared ``extends`` chain from the nearest ancestor to
    the base record type and merges the option trees in that order. Results are
    immutable and cached, so concurrent dispatches share one resolved tree.
    """

    def __init__(
        self,
        *,
        atomic_paths: AtomicOptionPaths = DEFAULT_ATOMIC_PATHS,
        base_schema: RecordSchema | None = BASE_RECORD_SCHEMA,
    ) -> None:
        self._atomic_paths = atomic_paths
        self._base_schema = base_schema
        self._schemas: dict[str, RecordSchema] = {}
        self._resolved: dict[str, ResolvedRecordType] = {}
        self._lock = threading.Lock()

    @property
    def atomic_paths(self) -> AtomicOptionPaths:
        return self._atomic_paths

    def register(self, schema: RecordSchema) -> None:
        if not schema.name:
            raise RecordTypeError("Record type name cannot be empty.")
        with self._lock:
            if schema.name in self._schemas or self._is_base(schema.name):
                raise RecordTypeError(f"Record type already registered: {schema.name}")
            self._schemas[schema.name] = schema
        logger.debug("Registered record type %s (extends=%s)", schema.name, schema.extends)

    def names(self) -> tuple[str, ...]:
        return tuple(self._schemas)

    def schema(self, name: str) -> RecordSchema:
        if self._is_base(name) and self._base_schema is not None:
            return self._base_schema
        try:
            return self._schemas[name]
        except KeyError as exc:
            raise RecordTypeError(f"Unknown record type: {name}") from exc

    def ancestors_of(self, name: str) -> tuple[str, ...]:
        """Return ancestor names ordered from the nearest to the most general."""
        ancestors: list[str] = []
        seen = {name}
        current = self.schema(name)
        while True:
            parent_name = current.extends
            if parent_name is None:
                if self._base_schema is not None and not self._is_base(current.name):
                    ancestors.append(self._base_schema.name)
                break
            if parent_name in seen:
                chain = " -> ".join([name, *ancestors, parent_name])
                raise RecordTypeError(f"Record type inheritance cycle: {chain}")
            if not self._is_base(parent_name) and parent_name not in self._schemas:
                raise RecordTypeError(
                    f"Record type {current.name} extends unknown record type: {parent_name}"
                )
            seen.add(parent_name)
            ancestors.append(parent_name)
            current = self.schema(parent_name)
        return tuple(ancestors)

    def resolve(self, name: str) -> ResolvedRecordType:
        cached = self._resolved.get(name)
        if cached is not None:
            return cached
        with self._lock:
            cached = self._resolved.get(name)
            if cached is None:
                cached = self._resolve_uncached(name)
                self._resolved[name] = cached
        return cached

    def _resolve_uncached(self, name: str) -> ResolvedRecordType:
        schema = self.schema(name)
        ancestors = self.ancestors_of(name)
        ancestor_schemas = [self.schema(ancestor) for ancestor in ancestors]
        merged = resolve_option_chain(
            dict(schema.rpc_options),
            [dict(ancestor.rpc_options) for ancestor in ancestor_schemas],
            atomic_paths=self._atomic_paths,
        )
        url = _first_url([schema, *ancestor_schemas])
        logger.debug("Resolved record type %s through %s", name, ancestors or "no ancestors")
        return ResolvedRecordType(
            name=name,
            ancestors=ancestors,
            url=url,
            rpc_options=parse_rpc_options(merged, record_type=name),
            options_tree=freeze_options(merged),
        )

    def _is_base(self, name: str) -> bool:
        return self._base_schema is not None and name == self._base_schema.name


def parse_rpc_options(tree: Mapping[str, Any], *, record_type: str = "") -> RpcOptions:
    """Build the typed options view of a resolved ``rpc_options`` tree."""
    label = f"{record_type}: " if record_type else ""
    headers = tree.get("headers") or {}
    if not isinstance(headers, Mapping):
        raise RecordTypeError(f"{label}rpc_options.headers must be a mapping.")
    methods_tree = tree.get("methods") or {}
    if not isinstance(methods_tree, Mapping):
        raise RecordTypeError(f"{label}rpc_options.methods must be a mapping.")

    methods: dict[CrudVerb, MethodOptions] = {}
    for verb_name, entry in methods_tree.items():
        verb = CrudVerb.parse(verb_name)
        if verb is None:
            logger.debug("%sIgnoring options for unsupported verb %r", label, verb_name)
            continue
        if not isinstance(entry, Mapping):
            raise RecordTypeError(f"{label}methods.{verb_name} must be a mapping.")
        method_name = entry.get("method")
        if not isinstance(method_name, str) or not method_name.strip():
            raise RecordTypeError(
                f"{label}methods.{verb_name}.method must be a non-empty string."
            )
        methods[verb] = MethodOptions(
            method=method_name, params=freeze_options(entry.get("params"))
        )
    return RpcOptions(headers=freeze_options(headers), methods=MappingProxyType(methods))


def freeze_options(value: Any) -> Any:
    """Return a read-only deep view of an options tree."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_options(child) for key, child in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_options(child) for child in value)
    return value


def _first_url(schemas: Sequence[RecordSchema]) -> str:
    for schema in schemas:
        if schema.url:
            return schema.url
    return DEFAULT_RPC_URL
