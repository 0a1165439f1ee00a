from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from loguru import logger

from infrastructure.interfaces import HTTPClientProtocol
from services import McpDispatcher, ProblemService, create_dispatcher, create_problem_service

if TYPE_CHECKING:
    from litestar.datastructures import State


@asynccontextmanager
async def _open_http_client(state: "State") -> AsyncIterator[HTTPClientProtocol]:
    client = state.http_client_factory()
    logger.debug("Opened HTTP client for request")

    try:
        yield client
    finally:
        close = getattr(client, "close", None)
        if close is not None:
            await close()
        logger.debug("HTTP client closed")


async def provide_problem_service(
    state: "State",
) -> AsyncGenerator[ProblemService, None]:
    async with _open_http_client(state) as client:
        yield create_problem_service(client, state.settings)


async def provide_dispatcher(
    state: "State",
) -> AsyncGenerator[McpDispatcher, None]:
    async with _open_http_client(state) as client:
        yield create_dispatcher(client, state.settings)
