"""Litestar application wiring."""

from collections.abc import Callable

from litestar import Litestar
from litestar.datastructures import State
from loguru import logger

from api.exception_handlers import exception_handlers
from api.routes import McpController, ProblemController, health
from infrastructure.config import Settings, get_settings
from infrastructure.http_client import AsyncHTTPClient
from infrastructure.interfaces import HTTPClientProtocol
from infrastructure.logging_setup import setup_logging


def create_app(
    settings: Settings | None = None,
    http_client_factory: Callable[[], HTTPClientProtocol] | None = None,
) -> Litestar:
    """
    Build the application.

    Args:
        settings: Settings to use instead of the environment
        http_client_factory: Builds the page-fetch client; one client per request
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    if http_client_factory is None:

        def http_client_factory() -> HTTPClientProtocol:
            return AsyncHTTPClient(timeout=settings.http_timeout)

    logger.info(f"Starting {settings.server_name} {settings.server_version}")

    return Litestar(
        route_handlers=[McpController, ProblemController, health],
        exception_handlers=exception_handlers,
        state=State({"settings": settings, "http_client_factory": http_client_factory}),
    )


def main() -> None:
    """Run the gateway under uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
