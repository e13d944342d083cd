"""Structured option paths for atomically inherited subtrees."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


class OptionPathError(ValueError):
    """Raised when an option path cannot be parsed."""


@dataclass(frozen=True)
class OptionPath:
    """One key beneath its enclosing option scope, e.g. ``methods.create``."""

    scope: str
    key: str

    @staticmethod
    def parse(dotted: str) -> OptionPath:
        parts = dotted.split(".") if isinstance(dotted, str) else []
        if len(parts) != 2 or not all(part.strip() for part in parts):
            raise OptionPathError(
                f"Option path must have the form '<scope>.<key>', got: {dotted!r}"
            )
        return OptionPath(scope=parts[0].strip(), key=parts[1].strip())

    def dotted(self) -> str:
        return f"{self.scope}.{self.key}"


@dataclass(frozen=True)
class AtomicOptionPaths:
    """Set of option paths inherited as a whole instead of key by key."""

    paths: frozenset[OptionPath] = field(default_factory=frozenset)

    @staticmethod
    def from_dotted(values: Iterable[str]) -> AtomicOptionPaths:
        return AtomicOptionPaths(paths=frozenset(OptionPath.parse(value) for value in values))

    def contains(self, scope: str, key: str) -> bool:
        return OptionPath(scope=scope, key=str(key)) in self.paths

    def dotted(self) -> tuple[str, ...]:
        return tuple(sorted(path.dotted() for path in self.paths))


ROOT_OPTION_SCOPE = "rpc_options"

DEFAULT_ATOMIC_PATHS = AtomicOptionPaths.from_dotted(
    (
        "rpc_options.headers",
        "methods.create",
        "methods.read",
        "methods.update",
        "methods.delete",
    )
)
