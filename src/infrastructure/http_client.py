"""Async HTTP client for fetching problem pages."""

from curl_cffi.requests import AsyncSession
from loguru import logger

from domain.exceptions import FetchError

DEFAULT_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
    "Cache-Control": "max-age=0",
    "Upgrade-Insecure-Requests": "1",
}


class AsyncHTTPClient:
    """Thin wrapper around curl_cffi's AsyncSession with browser impersonation."""

    def __init__(self, timeout: float = 15.0, impersonate: str = "chrome"):
        """
        Initialize client.

        Args:
            timeout: Request timeout in seconds
            impersonate: Browser fingerprint passed to curl_cffi
        """
        self.timeout = timeout
        self.impersonate = impersonate
        self._session: AsyncSession | None = None

    def _get_session(self) -> AsyncSession:
        if self._session is None:
            self._session = AsyncSession(impersonate=self.impersonate, timeout=self.timeout)
        return self._session

    async def get_text(self, url: str) -> str:
        """
        Fetch ``url`` and return the body text.

        Raises:
            FetchError: On network failure or a non-success status
        """
        logger.debug(f"Fetching {url}")

        try:
            response = await self._get_session().get(url, headers=DEFAULT_HEADERS)
        except Exception as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise FetchError(f"request failed: {e}", url) from e

        if not 200 <= response.status_code < 300:
            reason = getattr(response, "reason", "") or ""
            logger.warning(f"Request to {url} returned status {response.status_code}")
            raise FetchError(
                f"request failed: {response.status_code} {reason}".rstrip(),
                url,
                status_code=response.status_code,
            )

        logger.debug(f"Fetched {url} ({len(response.text)} chars)")
        return response.text

    async def close(self) -> None:
        """Release the underlying session."""
        if self._session is not None:
            await self._session.close()
            self._session = None
