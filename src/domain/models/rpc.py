"""Value objects for the JSON-RPC tool-invocation protocol."""

from dataclasses import dataclass, field
from typing import Any

JSONRPC_VERSION = "2.0"

RequestId = str | int | float | None


@dataclass(frozen=True)
class JsonRpcRequest:
    """Envelope that expects a response (carries an ``id`` key, possibly null)."""

    id: RequestId
    method: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class JsonRpcNotification:
    """Fire-and-forget envelope (no ``id`` key at all)."""

    method: str
    params: dict[str, Any] = field(default_factory=dict)


JsonRpcEnvelope = JsonRpcRequest | JsonRpcNotification


@dataclass(frozen=True)
class ToolAnnotations:
    title: str
    read_only_hint: bool = True
    open_world_hint: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "readOnlyHint": self.read_only_hint,
            "openWorldHint": self.open_world_hint,
        }


@dataclass(frozen=True)
class ToolDescriptor:
    """Describes a named tool and the arguments it accepts."""

    name: str
    description: str
    input_schema: dict[str, Any]
    annotations: ToolAnnotations

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
            "annotations": self.annotations.to_dict(),
        }


@dataclass(frozen=True)
class TextContent:
    text: str
    type: str = "text"


@dataclass(frozen=True)
class ToolResult:
    """Uniform outcome of a tool invocation."""

    content: tuple[TextContent, ...]
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(content=(TextContent(text=text),), is_error=False)

    @classmethod
    def failure(cls, text: str) -> "ToolResult":
        return cls(content=(TextContent(text=text),), is_error=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "isError": self.is_error,
            "content": [{"type": c.type, "text": c.text} for c in self.content],
        }


def success_response(request_id: RequestId, result: Any) -> dict[str, Any]:
    """Build a JSON-RPC success response body."""
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def error_response(request_id: RequestId, code: int, message: str) -> dict[str, Any]:
    """Build a JSON-RPC error response body."""
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id,
        "error": {"code": code, "message": message},
    }
