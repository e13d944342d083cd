"""Routing of CRUD verbs to RPC transport calls."""

from __future__ import annotations

import logging
from concurrent.futures import CancelledError, Future
from functools import partial
from typing import Any

from rpc2_records.param_templates import AttributeSource, build_params
from rpc2_records.record_types.record_models import CrudVerb, ResolvedRecordType

from .dispatch_outcomes import DispatchCallbacks, PlannedCall, UnknownVerbError, UnknownVerbPolicy
from .transport import TransportFactory, TransportSettings

logger = logging.getLogger(__name__)


def plan_operation(
    verb: CrudVerb | str,
    record_type: ResolvedRecordType,
    record: AttributeSource,
) -> PlannedCall:
    """Look up the verb's RPC method and build its payload from the record.

    Raises:
      UnknownVerbError: If the verb is not a CRUD verb or the record type has no
        method configured for it.
    """
    crud_verb = CrudVerb.parse(verb)
    if crud_verb is None:
        raise UnknownVerbError(f"Unsupported verb for {record_type.name}: {verb!r}")
    method_options = record_type.rpc_options.method_for(crud_verb)
    if method_options is None:
        raise UnknownVerbError(
            f"Record type {record_type.name} has no RPC method for verb: {crud_verb.value}"
        )
    return PlannedCall(
        record_type=record_type.name,
        verb=crud_verb.value,
        method=method_options.method,
        params=build_params(method_options.params, record),
    )


class OperationDispatcher:  # pylint: disable=too-few-public-methods
    """Routes a verb to one transport call and forwards its outcome unchanged."""

    def __init__(
        self,
        transport_factory: TransportFactory,
        *,
        unknown_verb_policy: UnknownVerbPolicy = UnknownVerbPolicy.IGNORE,
    ) -> None:
        self._transport_factory = transport_factory
        self._unknown_verb_policy = unknown_verb_policy

    def dispatch(
        self,
        verb: CrudVerb | str,
        record_type: ResolvedRecordType,
        record: AttributeSource,
        callbacks: DispatchCallbacks,
    ) -> Future[Any] | None:
        """Issue the RPC call for ``verb`` without blocking.

        Returns the transport future, or None when an unroutable verb is ignored. A
        transport that raises instead of returning a future yields an already failed
        future, so the error callback still receives the exception.
        """
        try:
            planned = plan_operation(verb, record_type, record)
        except UnknownVerbError:
            if self._unknown_verb_policy is UnknownVerbPolicy.RAISE:
                raise
            logger.warning("Ignoring unroutable verb %r for record type %s", verb, record_type.name)
            return None

        transport = self._transport_factory(
            TransportSettings(url=record_type.url, headers=record_type.rpc_options.headers)
        )
        logger.debug(
            "Dispatching %s on %s as RPC method %s",
            planned.verb,
            planned.record_type,
            planned.method,
        )
        try:
            future = transport.call(planned.method, planned.params)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.debug("Transport rejected RPC method %s: %s", planned.method, exc)
            future = Future()
            future.set_exception(exc)
        future.add_done_callback(partial(_forward_outcome, callbacks))
        return future


def _forward_outcome(callbacks: DispatchCallbacks, future: Future[Any]) -> None:
    if future.cancelled():
        callbacks.error(CancelledError())
        return
    error = future.exception()
    if error is not None:
        callbacks.error(error)
        return
    callbacks.success(future.result())
