from api.routes.health import health
from api.routes.mcp import McpController
from api.routes.problem import ProblemController

__all__ = ["McpController", "ProblemController", "health"]
