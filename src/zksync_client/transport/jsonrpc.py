"""JSON-RPC 2.0 envelopes — request building, response and notification parsing."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from zksync_client.errors.transport_errors import JSONRPCError, TransportError

JSONRPC_VERSION = "2.0"


@dataclass(frozen=True)
class Notification:
    """A server push for an active subscription."""

    subscription: str
    result: Any


def build_request(request_id: int, method: str, params: Any) -> dict[str, Any]:
    """Build a JSON-RPC request object.

    A ``None`` params value is omitted from the envelope.
    """
    request: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "id": request_id, "method": method}
    if params is not None:
        request["params"] = params
    return request


def decode_message(raw: str | bytes) -> dict[str, Any]:
    """Parse one inbound frame into a JSON object.

    Raises:
        TransportError: If the frame is not a JSON object.
    """
    try:
        message = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise TransportError(f"Malformed JSON-RPC message: {exc}") from exc
    if not isinstance(message, dict):
        raise TransportError(f"Unexpected JSON-RPC message: {message!r}")
    return message


def unwrap_result(message: dict[str, Any]) -> Any:
    """Return the ``result`` of a response or raise its ``error``.

    Raises:
        JSONRPCError: If the response carries an error object.
        TransportError: If neither ``result`` nor ``error`` is present.
    """
    error = message.get("error")
    if error is not None:
        if isinstance(error, dict):
            raise JSONRPCError(
                str(error.get("message", "JSON-RPC error")),
                rpc_code=error.get("code", 0),
                data=error.get("data"),
            )
        raise JSONRPCError(str(error))
    if "result" not in message:
        raise TransportError(f"JSON-RPC response without result: {message!r}")
    return message["result"]


def parse_notification(message: dict[str, Any]) -> Notification | None:
    """Extract a subscription notification, or ``None`` if the message is not one."""
    params = message.get("params")
    if "id" in message and message["id"] is not None:
        return None
    if not isinstance(params, dict) or "subscription" not in params:
        return None
    return Notification(subscription=str(params["subscription"]), result=params.get("result"))
