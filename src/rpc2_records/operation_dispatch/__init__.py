"""Operation dispatch exports."""

from .dispatch_outcomes import DispatchCallbacks, PlannedCall, UnknownVerbError, UnknownVerbPolicy
from .operation_dispatcher import OperationDispatcher, plan_operation
from .transport import (
    BlockingTransport,
    BlockingTransportFactory,
    RpcClient,
    Transport,
    TransportFactory,
    TransportSettings,
)

__all__ = [
    "BlockingTransport",
    "BlockingTransportFactory",
    "DispatchCallbacks",
    "OperationDispatcher",
    "PlannedCall",
    "RpcClient",
    "Transport",
    "TransportFactory",
    "TransportSettings",
    "UnknownVerbError",
    "UnknownVerbPolicy",
    "plan_operation",
]
