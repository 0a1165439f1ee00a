"""Environment-driven settings."""

import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from dotenv import load_dotenv


class VersionPolicy(str, Enum):
    """How ``initialize`` answers the client's requested protocol version."""

    NEGOTIATE = "negotiate"  # echo a supported client version, else answer the latest
    FIXED = "fixed"  # always answer the latest


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    luogu_base_url: str = "https://www.luogu.com.cn"
    http_timeout: float = 15.0
    version_policy: VersionPolicy = VersionPolicy.NEGOTIATE
    server_name: str = "Luogu MCP Server"
    server_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8000


def load_settings() -> Settings:
    """Read settings from the environment (and ``.env`` if present)."""
    load_dotenv()

    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        luogu_base_url=os.getenv("LUOGU_BASE_URL", "https://www.luogu.com.cn"),
        http_timeout=float(os.getenv("HTTP_TIMEOUT", "15")),
        version_policy=VersionPolicy(os.getenv("MCP_VERSION_POLICY", "negotiate").lower()),
        server_name=os.getenv("SERVER_NAME", "Luogu MCP Server"),
        server_version=os.getenv("SERVER_VERSION", "1.0.0"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
