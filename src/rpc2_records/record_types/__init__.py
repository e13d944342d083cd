"""Record type domain exports."""

from .data_records import DataRecord, MappingRecord
from .default_options import (
    BASE_RECORD_SCHEMA,
    BASE_RECORD_TYPE_NAME,
    DEFAULT_RPC_URL,
    build_default_rpc_options,
)
from .record_models import (
    CrudVerb,
    MethodOptions,
    RecordSchema,
    RecordTypeError,
    ResolvedRecordType,
    RpcOptions,
)
from .record_registry import RecordTypeRegistry, freeze_options, parse_rpc_options

__all__ = [
    "BASE_RECORD_SCHEMA",
    "BASE_RECORD_TYPE_NAME",
    "DEFAULT_RPC_URL",
    "CrudVerb",
    "DataRecord",
    "MappingRecord",
    "MethodOptions",
    "RecordSchema",
    "RecordTypeError",
    "RecordTypeRegistry",
    "ResolvedRecordType",
    "RpcOptions",
    "build_default_rpc_options",
    "freeze_options",
    "parse_rpc_options",
]
