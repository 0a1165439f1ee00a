"""Service for handling problem-related operations."""

from loguru import logger

from domain.models import FetchedProblem, ProblemIdentifier
from domain.parsers.problem_page import ProblemPageParser
from domain.parsers.url_parser import URLParser
from infrastructure.interfaces import HTTPClientProtocol


class ProblemService:
    """Service for fetching and extracting Luogu problems."""

    def __init__(
        self,
        *,
        http_client: HTTPClientProtocol,
        page_parser: ProblemPageParser | None = None,
        url_parser: type[URLParser] = URLParser,
        base_url: str | None = None,
    ):
        """Initialize service with dependencies."""
        self.http_client = http_client
        self.page_parser = page_parser or ProblemPageParser()
        self.url_parser = url_parser
        self.base_url = base_url

    async def get_problem(self, problem_id: str) -> FetchedProblem:
        """
        Get problem details by identifier.

        Raises:
            ProblemIdFormatError: If ``problem_id`` is malformed
            FetchError: If the page could not be fetched
        """
        identifier = ProblemIdentifier.parse(problem_id)
        url = self.url_parser.build_problem_url(identifier, self.base_url)
        return await self._fetch(identifier, url)

    async def get_problem_by_url(self, url: str) -> FetchedProblem:
        """Get problem by Luogu problem URL."""
        logger.debug(f"Getting problem by URL: {url}")

        identifier = self.url_parser.parse(url)
        return await self._fetch(identifier, url)

    async def _fetch(self, identifier: ProblemIdentifier, url: str) -> FetchedProblem:
        html = await self.http_client.get_text(url)
        record = self.page_parser.parse(html)

        logger.info(f"Fetched problem {identifier}: {record.title}")
        return FetchedProblem(identifier=identifier, url=url, record=record)
