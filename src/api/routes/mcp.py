"""Endpoint for the JSON-RPC tool-invocation protocol."""

from litestar import Controller, MediaType, Request, Response, post, route
from litestar.di import Provide
from litestar.enums import HttpMethod
from litestar.status_codes import HTTP_200_OK, HTTP_405_METHOD_NOT_ALLOWED
from loguru import logger

from api.dependencies import provide_dispatcher
from services import McpDispatcher


class McpController(Controller):
    """Single POST endpoint speaking JSON-RPC 2.0."""

    path = "/mcp"
    dependencies = {"dispatcher": Provide(provide_dispatcher)}

    @post("/", status_code=HTTP_200_OK)
    async def handle(self, request: Request, dispatcher: McpDispatcher) -> Response:
        """Dispatch one envelope; notifications get an empty 202."""
        body = await request.body()
        result = await dispatcher.dispatch(request.headers.get("content-type"), body)

        if result.body is None:
            return Response(content=b"", status_code=result.status_code, media_type=MediaType.TEXT)

        logger.debug(f"MCP response status {result.status_code}")
        return Response(content=result.body, status_code=result.status_code, media_type=MediaType.JSON)

    @route(
        "/",
        http_method=[HttpMethod.GET, HttpMethod.PUT, HttpMethod.PATCH, HttpMethod.DELETE],
        status_code=HTTP_405_METHOD_NOT_ALLOWED,
    )
    async def reject(self) -> Response:
        """Only POST is accepted."""
        return Response(
            content={"error": "MCP endpoint only accepts POST"},
            status_code=HTTP_405_METHOD_NOT_ALLOWED,
            headers={"Allow": "POST"},
            media_type=MediaType.JSON,
        )
