"""JSON-RPC dispatcher for the tool-invocation protocol."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from loguru import logger

from domain.exceptions import JsonRpcError
from domain.models.rpc import (
    JsonRpcNotification,
    JsonRpcRequest,
    error_response,
    success_response,
)
from domain.parsers.jsonrpc import parse_envelope
from infrastructure.config import Settings, VersionPolicy
from services.tools import ToolRegistry

# Newest first.
SUPPORTED_PROTOCOL_VERSIONS = ("2025-11-25", "2025-06-18", "2025-03-26", "2024-11-05")
LATEST_PROTOCOL_VERSION = SUPPORTED_PROTOCOL_VERSIONS[0]

SERVER_INSTRUCTIONS = "Use get_problem with a Luogu problem ID (e.g. P1001) to read a problem statement."

HTTP_OK = 200
HTTP_ACCEPTED = 202

Handler = Callable[[dict[str, Any]], Awaitable[Any]]


@dataclass(frozen=True)
class DispatchResult:
    """HTTP status plus JSON body; ``body`` is None for an accepted notification."""

    status_code: int
    body: dict[str, Any] | None = None


class McpDispatcher:
    """
    Routes one JSON-RPC call to its handler.

    The dispatcher holds no per-session state: every method is callable
    without a prior ``initialize``, and two dispatches never share data.
    """

    def __init__(self, registry: ToolRegistry, settings: Settings | None = None):
        self.registry = registry
        self.settings = settings or Settings()
        self._handlers: dict[str, Handler] = {
            "initialize": self._handle_initialize,
            "ping": self._handle_ping,
            "tools/list": self._handle_tools_list,
            "tools/call": self._handle_tools_call,
        }

    @property
    def methods(self) -> tuple[str, ...]:
        """Supported method names."""
        return tuple(self._handlers)

    async def dispatch(self, content_type: str | None, body: bytes | str) -> DispatchResult:
        """Parse a raw HTTP body and produce the response to send back."""
        try:
            envelope = parse_envelope(content_type, body)
        except JsonRpcError as e:
            logger.debug(f"Rejected envelope: {e.message}")
            return DispatchResult(HTTP_OK, error_response(None, e.code, e.message))

        if isinstance(envelope, JsonRpcNotification):
            logger.debug(f"Accepted notification {envelope.method}")
            return DispatchResult(HTTP_ACCEPTED)

        return DispatchResult(HTTP_OK, await self.handle_request(envelope))

    async def handle_request(self, request: JsonRpcRequest) -> dict[str, Any]:
        """Run the handler for ``request`` and wrap its outcome in a response body."""
        handler = self._handlers.get(request.method)
        if handler is None:
            logger.debug(f"Unknown method {request.method!r}")
            return error_response(
                request.id, JsonRpcError.METHOD_NOT_FOUND, f"Method not found: {request.method}"
            )

        logger.debug(f"Dispatching {request.method} (id={request.id!r})")
        try:
            result = await handler(request.params)
        except JsonRpcError as e:
            return error_response(request.id, e.code, e.message)
        except Exception:
            logger.exception(f"Handler for {request.method} failed")
            return error_response(request.id, JsonRpcError.INTERNAL_ERROR, "Internal error")

        return success_response(request.id, result)

    def negotiate_version(self, requested: object) -> str:
        """Pick the protocol version to answer with under the configured policy."""
        negotiating = self.settings.version_policy is VersionPolicy.NEGOTIATE
        if negotiating and requested in SUPPORTED_PROTOCOL_VERSIONS:
            return requested
        return LATEST_PROTOCOL_VERSION

    async def _handle_initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        client = params.get("clientInfo")
        client_name = client.get("name") if isinstance(client, dict) else None
        requested = params.get("protocolVersion")
        version = self.negotiate_version(requested)
        logger.info(
            f"Initialize from {client_name or 'unknown client'}: "
            f"requested {requested!r}, answering {version}"
        )

        return {
            "protocolVersion": version,
            "capabilities": {"tools": {"listChanged": False}},
            "serverInfo": {
                "name": self.settings.server_name,
                "version": self.settings.server_version,
            },
            "instructions": SERVER_INSTRUCTIONS,
        }

    async def _handle_ping(self, params: dict[str, Any]) -> dict[str, Any]:
        return {}

    async def _handle_tools_list(self, params: dict[str, Any]) -> dict[str, Any]:
        return {"tools": [descriptor.to_dict() for descriptor in self.registry.list_tools()]}

    async def _handle_tools_call(self, params: dict[str, Any]) -> dict[str, Any]:
        name = params.get("name")
        if not isinstance(name, str) or not name:
            raise JsonRpcError(JsonRpcError.INVALID_PARAMS, "Invalid params: missing tool name")

        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        elif not isinstance(arguments, dict):
            raise JsonRpcError(JsonRpcError.INVALID_PARAMS, 'Invalid params: "arguments" must be an object')

        result = await self.registry.invoke(name, arguments)
        return result.to_dict()
