"""Protocol interfaces for infrastructure collaborators."""

from typing import Protocol


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_text(self, url: str) -> str:
        """Get text content from URL, raising FetchError on failure."""
        ...
