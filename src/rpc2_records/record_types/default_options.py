"""Base record type every declared record type ultimately extends."""

from __future__ import annotations

from typing import Any

from .record_models import RecordSchema

BASE_RECORD_TYPE_NAME = "rpc2_record"
DEFAULT_RPC_URL = "path/to/my/rpc/handler"


def build_default_rpc_options() -> dict[str, Any]:
    """Return a fresh copy of the base ``rpc_options`` tree."""
    return {
        "headers": {},
        "methods": {
            "create": {
                "method": "create",
                "params": {"name": "attributes.name"},
            },
            "read": {
                "method": "read",
                "params": {"id": "attributes.id"},
            },
            "update": {
                "method": "update",
                "params": {"id": "attributes.id", "name": "attributes.name"},
            },
            "delete": {
                "method": "delete",
                "params": {"id": "attributes.id"},
            },
        },
    }


BASE_RECORD_SCHEMA = RecordSchema(
    name=BASE_RECORD_TYPE_NAME,
    url=DEFAULT_RPC_URL,
    rpc_options=build_default_rpc_options(),
)
