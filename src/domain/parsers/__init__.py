"""Pure parsers for problem pages, URLs, text fragments and JSON-RPC envelopes."""

from .jsonrpc import is_json_content_type, parse_envelope
from .problem_page import ProblemPageParser, extract
from .text import normalize
from .url_parser import URLParser, parse_problem_url

__all__ = [
    "ProblemPageParser",
    "URLParser",
    "extract",
    "is_json_content_type",
    "normalize",
    "parse_envelope",
    "parse_problem_url",
]
