"""Operation dispatch entities."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class UnknownVerbError(Exception):
    """Raised for verbs without a configured RPC method when dispatch is strict."""


class UnknownVerbPolicy(str, Enum):
    """How the dispatcher treats verbs it cannot route."""

    IGNORE = "ignore"
    RAISE = "raise"


@dataclass(frozen=True)
class DispatchCallbacks:
    """Completion callbacks receiving the transport outcome verbatim."""

    success: Callable[[Any], None]
    error: Callable[[BaseException], None]


@dataclass(frozen=True)
class PlannedCall:
    """RPC method name and built payload for one verb and record."""

    record_type: str
    verb: str
    method: str
    params: Any

    def as_dict(self) -> dict[str, Any]:
        return {"method": self.method, "params": self.params}
