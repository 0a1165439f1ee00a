"""Text renderers for domain records."""

from .problem_text import format_problem

__all__ = ["format_problem"]
