"""Exceptions raised across the gateway layers."""


class LuoguGatewayError(Exception):
    """Base exception for the gateway."""

    pass


class URLParsingError(LuoguGatewayError, ValueError):
    """Invalid URL format or unable to parse URL."""

    pass


class ProblemIdFormatError(LuoguGatewayError, ValueError):
    """Problem identifier does not match the expected format."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Invalid format for problem_id: {value!r}. Expected a letter followed by "
            "letters, digits or underscores, e.g. P1001, B2002, CF1234A, AT_abc123_a."
        )


class FetchError(LuoguGatewayError):
    """Remote page could not be fetched."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class JsonRpcError(LuoguGatewayError):
    """Protocol-level failure reported through the JSON-RPC error object."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")


class ToolNotFoundError(JsonRpcError):
    """Requested tool is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(self.METHOD_NOT_FOUND, f"Tool not found: {name}")
