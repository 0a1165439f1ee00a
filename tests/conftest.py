"""Shared fixtures: fake transport and problem page builders."""

import asyncio
import json

import pytest

from domain.exceptions import FetchError

BASE_URL = "https://www.luogu.com.cn"


def problem_url(problem_id: str) -> str:
    return f"{BASE_URL}/problem/{problem_id}"


def payload_page(problem: dict) -> str:
    """A page carrying the embedded lentille-context payload."""
    payload = json.dumps({"data": {"problem": problem}}, ensure_ascii=False).replace("</", "<\\/")
    return (
        "<!DOCTYPE html><html><head>"
        f'<script id="lentille-context" type="application/json">{payload}</script>'
        "</head><body><div id=\"app\"></div></body></html>"
    )


A_PLUS_B = {
    "pid": "P1001",
    "title": "A+B Problem",
    "difficulty": 1,
    "tags": ["1", "2"],
    "content": {
        "description": "Given two integers $a$ and $b$, output $a+b$.",
        "formatI": "Two integers $a, b$ on one line.",
        "formatO": "One integer, $a+b$.",
        "hint": "$|a|, |b| \\le 10^9$",
    },
    "samples": [["1 2", "3"]],
}


class FakeHTTPClient:
    """In-memory stand-in for AsyncHTTPClient."""

    def __init__(self, pages: dict[str, str] | None = None, error: Exception | None = None):
        self.pages = pages or {}
        self.error = error
        self.requested: list[str] = []
        self.closed = False

    async def get_text(self, url: str) -> str:
        self.requested.append(url)
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        if url not in self.pages:
            raise FetchError("request failed: 404 Not Found", url, status_code=404)
        return self.pages[url]

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def a_plus_b_page() -> str:
    return payload_page(A_PLUS_B)


@pytest.fixture
def http_client(a_plus_b_page) -> FakeHTTPClient:
    return FakeHTTPClient(
        {
            problem_url("P1001"): a_plus_b_page,
            problem_url("P1002"): payload_page(
                {"title": "Crossing River", "difficulty": 3, "tags": [6], "samples": []}
            ),
        }
    )
