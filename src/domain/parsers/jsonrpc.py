"""Parsing and structural validation of JSON-RPC envelopes."""

import json
from typing import Any

from domain.exceptions import JsonRpcError
from domain.models.rpc import (
    JSONRPC_VERSION,
    JsonRpcEnvelope,
    JsonRpcNotification,
    JsonRpcRequest,
)

JSON_MEDIA_TYPE = "application/json"


def is_json_content_type(content_type: str | None) -> bool:
    """True for ``application/json``, with or without parameters such as charset."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE


def _is_valid_id(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return value is None or isinstance(value, (str, int, float))


def parse_envelope(content_type: str | None, body: bytes | str) -> JsonRpcEnvelope:
    """
    Parse a raw HTTP body into a request or a notification.

    An envelope with an ``id`` key (even ``null``) is a request; one without it
    is a notification.

    Raises:
        JsonRpcError: PARSE_ERROR for a wrong content type or undecodable body,
            INVALID_REQUEST for a body that is not a well-formed envelope
    """
    if not is_json_content_type(content_type):
        raise JsonRpcError(
            JsonRpcError.PARSE_ERROR,
            f"Parse error: Content-Type must be {JSON_MEDIA_TYPE}, got {content_type!r}",
        )

    try:
        data = json.loads(body)
    except (TypeError, ValueError) as e:
        raise JsonRpcError(JsonRpcError.PARSE_ERROR, "Parse error: Invalid JSON") from e

    if isinstance(data, list):
        raise JsonRpcError(JsonRpcError.INVALID_REQUEST, "Invalid Request: batch requests are not supported")
    if not isinstance(data, dict):
        raise JsonRpcError(JsonRpcError.INVALID_REQUEST, "Invalid Request: envelope must be an object")
    if data.get("jsonrpc") != JSONRPC_VERSION:
        raise JsonRpcError(JsonRpcError.INVALID_REQUEST, 'Invalid Request: "jsonrpc" must be "2.0"')

    method = data.get("method")
    if not isinstance(method, str):
        raise JsonRpcError(JsonRpcError.INVALID_REQUEST, 'Invalid Request: "method" must be a string')

    params = data.get("params")
    if params is None:
        params = {}
    elif not isinstance(params, dict):
        raise JsonRpcError(JsonRpcError.INVALID_REQUEST, 'Invalid Request: "params" must be an object')

    if "id" not in data:
        return JsonRpcNotification(method=method, params=params)

    if not _is_valid_id(data["id"]):
        raise JsonRpcError(
            JsonRpcError.INVALID_REQUEST, 'Invalid Request: "id" must be a string, number or null'
        )

    return JsonRpcRequest(id=data["id"], method=method, params=params)
