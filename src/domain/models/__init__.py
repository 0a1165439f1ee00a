"""Domain models package."""

from .identifiers import ProblemIdentifier
from .problem import FetchedProblem, ProblemRecord, Sample
from .rpc import (
    JsonRpcEnvelope,
    JsonRpcNotification,
    JsonRpcRequest,
    TextContent,
    ToolAnnotations,
    ToolDescriptor,
    ToolResult,
)

__all__ = [
    "FetchedProblem",
    "JsonRpcEnvelope",
    "JsonRpcNotification",
    "JsonRpcRequest",
    "ProblemIdentifier",
    "ProblemRecord",
    "Sample",
    "TextContent",
    "ToolAnnotations",
    "ToolDescriptor",
    "ToolResult",
]
