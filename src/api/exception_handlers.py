"""Translate domain errors into flat ``{"error": ...}`` REST responses."""

from litestar import MediaType, Request, Response
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from loguru import logger

from api.schemas import ErrorResponse
from domain.exceptions import (
    FetchError,
    LuoguGatewayError,
    ProblemIdFormatError,
    URLParsingError,
)

CLIENT_ERRORS = (URLParsingError, ProblemIdFormatError)


def gateway_error_handler(request: Request, exc: LuoguGatewayError) -> Response:
    """Caller mistakes become 400, upstream faults become 500."""
    if isinstance(exc, CLIENT_ERRORS):
        status_code = HTTP_400_BAD_REQUEST
        logger.info(f"Rejected {request.url.path}: {exc}")
    else:
        status_code = HTTP_500_INTERNAL_SERVER_ERROR
        if isinstance(exc, FetchError):
            logger.warning(f"Upstream fetch failed for {request.url.path}: {exc}")
        else:
            logger.error(f"Request to {request.url.path} failed: {exc}")

    return Response(
        content=ErrorResponse(error=str(exc)).model_dump(),
        status_code=status_code,
        media_type=MediaType.JSON,
    )


def internal_error_handler(request: Request, exc: Exception) -> Response:
    """Any other unhandled failure."""
    logger.opt(exception=exc).error(f"Unhandled error for {request.url.path}")
    return Response(
        content=ErrorResponse(error=str(exc) or "Internal server error").model_dump(),
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        media_type=MediaType.JSON,
    )


exception_handlers = {
    LuoguGatewayError: gateway_error_handler,
    HTTP_500_INTERNAL_SERVER_ERROR: internal_error_handler,
}
