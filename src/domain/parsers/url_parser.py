"""Parser for Luogu problem URLs."""

import re
from urllib.parse import urlparse

from loguru import logger

from domain.exceptions import URLParsingError
from domain.models import ProblemIdentifier


class URLParser:
    """Parser for Luogu problem URLs."""

    BASE_URL = "https://www.luogu.com.cn"
    # Matches: luogu.com.cn/problem/P1001
    PATTERN = r"^(?:www\.)?luogu\.com\.cn$"
    PATH_PATTERN = r"^/problem/([A-Za-z][A-Za-z0-9_]*)/?$"

    @classmethod
    def parse(cls, url: str) -> ProblemIdentifier:
        """
        Parse Luogu problem URL and extract problem identifier.
        """
        logger.debug(f"Parsing URL: {url}")

        try:
            parsed = urlparse(url)
        except Exception as e:
            raise URLParsingError(f"Failed to parse URL: {url}") from e

        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise URLParsingError(f"Invalid URL format: {url}")

        host = (parsed.hostname or "").lower()
        match = re.fullmatch(cls.PATH_PATTERN, parsed.path)
        if re.fullmatch(cls.PATTERN, host) and match:
            identifier = ProblemIdentifier(problem_id=match.group(1))
            logger.info(f"Parsed URL to problem: {identifier}")
            return identifier

        # No pattern matched
        raise URLParsingError(
            f"Unrecognized Luogu URL format: {url}. "
            "Expected format: https://www.luogu.com.cn/problem/<problem_id>"
        )

    @classmethod
    def build_problem_url(cls, identifier: ProblemIdentifier, base_url: str | None = None) -> str:
        """
        Build problem URL from identifier.
        """
        base = (base_url or cls.BASE_URL).rstrip("/")
        url = f"{base}/problem/{identifier.problem_id}"

        logger.debug(f"Built problem URL: {url}")
        return url


def parse_problem_url(url: str) -> ProblemIdentifier:
    """Convenience function to parse a problem URL."""
    return URLParser.parse(url)
