"""Transport collaborator contracts and the thread-pool adapter for blocking clients."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class TransportSettings:
    """Endpoint and headers declared by the record type, passed through unexamined."""

    url: str
    headers: Mapping[str, Any] = field(default_factory=dict)


class Transport(Protocol):  # pylint: disable=too-few-public-methods
    """Issues one RPC call and reports its outcome through a future."""

    def call(self, method_name: str, params: Any) -> Future[Any]: ...


TransportFactory = Callable[[TransportSettings], Transport]


class RpcClient(Protocol):  # pylint: disable=too-few-public-methods
    """Blocking RPC client; encoding and framing are entirely its concern."""

    def call(self, settings: TransportSettings, method_name: str, params: Any) -> Any: ...


class BlockingTransport:  # pylint: disable=too-few-public-methods
    """Transport running a blocking client call on a shared executor."""

    def __init__(
        self,
        client: RpcClient,
        settings: TransportSettings,
        executor: ThreadPoolExecutor,
    ) -> None:
        self._client = client
        self._settings = settings
        self._executor = executor

    @property
    def settings(self) -> TransportSettings:
        return self._settings

    def call(self, method_name: str, params: Any) -> Future[Any]:
        return self._executor.submit(self._client.call, self._settings, method_name, params)


class BlockingTransportFactory:
    """Transport factory sharing one thread pool across all record types."""

    def __init__(self, client: RpcClient, *, parallelism: int = 4) -> None:
        self._client = client
        self._executor = ThreadPoolExecutor(max_workers=max(1, parallelism))

    def __call__(self, settings: TransportSettings) -> BlockingTransport:
        return BlockingTransport(self._client, settings, self._executor)

    def shutdown(self, *, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> BlockingTransportFactory:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
