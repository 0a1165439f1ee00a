"""Tool registry and the tools exposed over the tool-invocation protocol."""

from collections.abc import Iterable
from typing import Any, Protocol

from loguru import logger

from domain.exceptions import FetchError, ProblemIdFormatError, ToolNotFoundError
from domain.formatters import format_problem
from domain.models import ProblemIdentifier, ToolAnnotations, ToolDescriptor, ToolResult
from services.problem import ProblemService


class Tool(Protocol):
    """A named capability that can be invoked with JSON arguments."""

    descriptor: ToolDescriptor

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        ...


class GetProblemTool:
    """Fetches one problem and renders it as Markdown."""

    descriptor = ToolDescriptor(
        name="get_problem",
        description=(
            "Get a Luogu problem: title, difficulty, tags, statement, "
            "input/output format, samples and constraints."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "problem_id": {
                    "type": "string",
                    "description": "Luogu problem ID, e.g. P1001, B2002, CF1234A, AT_abc123_a",
                },
            },
            "required": ["problem_id"],
        },
        annotations=ToolAnnotations(title="Get Luogu problem"),
    )

    def __init__(self, problem_service: ProblemService):
        self.problem_service = problem_service

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        raw_id = arguments.get("problem_id")
        if raw_id is None:
            return ToolResult.failure("Missing required parameter: problem_id")

        try:
            identifier = ProblemIdentifier.parse(raw_id)
        except ProblemIdFormatError as e:
            return ToolResult.failure(str(e))

        try:
            fetched = await self.problem_service.get_problem(identifier.problem_id)
        except FetchError as e:
            logger.warning(f"get_problem failed for {identifier}: {e}")
            return ToolResult.failure(f"Failed to fetch problem {identifier}: {e}")

        return ToolResult.success(format_problem(fetched.record, identifier.problem_id, fetched.url))


class ToolRegistry:
    """Owns the tool set; enumerable and invocable by name."""

    def __init__(self, tools: Iterable[Tool]):
        self._tools: dict[str, Tool] = {}
        for tool in tools:
            name = tool.descriptor.name
            if name in self._tools:
                raise ValueError(f"Duplicate tool name: {name}")
            self._tools[name] = tool

    def list_tools(self) -> list[ToolDescriptor]:
        """Descriptors in registration order."""
        return [tool.descriptor for tool in self._tools.values()]

    async def invoke(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """
        Run tool ``name``.

        Failures of a known tool come back as ``ToolResult(is_error=True)``.

        Raises:
            ToolNotFoundError: If no tool is registered under ``name``
        """
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)

        logger.debug(f"Invoking tool {name}")
        try:
            return await tool.run(arguments)
        except Exception as e:
            logger.exception(f"Tool {name} raised unexpectedly")
            return ToolResult.failure(f"Error executing tool {name}: {e}")
