from infrastructure.config import Settings, get_settings
from infrastructure.interfaces import HTTPClientProtocol
from services.mcp import DispatchResult, McpDispatcher
from services.problem import ProblemService
from services.tools import GetProblemTool, ToolRegistry


def create_problem_service(
    http_client: HTTPClientProtocol, settings: Settings | None = None
) -> ProblemService:
    """Factory function to create problem service with all dependencies."""
    settings = settings or get_settings()
    return ProblemService(http_client=http_client, base_url=settings.luogu_base_url)


def create_tool_registry(problem_service: ProblemService) -> ToolRegistry:
    """Factory function to create the registry of exposed tools."""
    return ToolRegistry([GetProblemTool(problem_service)])


def create_dispatcher(
    http_client: HTTPClientProtocol, settings: Settings | None = None
) -> McpDispatcher:
    """Factory function to create a dispatcher for a single call."""
    settings = settings or get_settings()
    problem_service = create_problem_service(http_client, settings)
    return McpDispatcher(create_tool_registry(problem_service), settings)


__all__ = [
    "DispatchResult",
    "GetProblemTool",
    "McpDispatcher",
    "ProblemService",
    "ToolRegistry",
    "create_dispatcher",
    "create_problem_service",
    "create_tool_registry",
]
