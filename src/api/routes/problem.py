"""REST routes for problem lookup."""

from litestar import Controller, Response, get
from litestar.di import Provide
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.dependencies import provide_problem_service
from api.schemas.problem import ProblemResponse
from domain.exceptions import URLParsingError
from domain.models import FetchedProblem
from services import ProblemService


class ProblemController(Controller):
    """Controller for problem-related endpoints."""

    path = "/api"
    dependencies = {"problem_service": Provide(provide_problem_service)}

    @get("/problem/{problem_id:str}", status_code=HTTP_200_OK)
    async def get_problem(self, problem_id: str, problem_service: ProblemService) -> Response:
        """
        Get problem information by Luogu problem ID (e.g. "P1001").
        """
        logger.debug(f"API request for problem: problem_id={problem_id}")

        fetched = await problem_service.get_problem(problem_id)
        return self._problem_response(fetched)

    @get("/fetch", status_code=HTTP_200_OK)
    async def fetch_problem(self, problem_service: ProblemService, url: str | None = None) -> Response:
        """
        Get problem information by full problem URL.

        Query parameters:
        - url: e.g. https://www.luogu.com.cn/problem/P1001
        """
        logger.debug(f"API request for problem by URL: url={url}")

        if not url:
            raise URLParsingError("Missing url query parameter")

        fetched = await problem_service.get_problem_by_url(url)
        return self._problem_response(fetched)

    @staticmethod
    def _problem_response(fetched: FetchedProblem) -> Response:
        body = ProblemResponse.from_fetched(fetched).model_dump(mode="json", by_alias=True)
        return Response(content=body, status_code=HTTP_200_OK)
