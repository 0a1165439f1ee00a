from .config import Settings, VersionPolicy, get_settings, load_settings
from .http_client import AsyncHTTPClient
from .interfaces import HTTPClientProtocol
from .logging_setup import setup_logging

__all__ = [
    "AsyncHTTPClient",
    "HTTPClientProtocol",
    "Settings",
    "VersionPolicy",
    "get_settings",
    "load_settings",
    "setup_logging",
]
