"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from twitch_helix.config import set_config

API_URL = "https://api.twitch.test/helix"
CLIENT_ID = "test-client-id"

# VCR configuration
CASSETTES_DIR = Path(__file__).parent / "cassettes"


def stream_data(index: int) -> dict[str, Any]:
    """Build a stream object shaped like the Helix /streams response."""
    return {
        "id": str(40000 + index),
        "user_id": str(1000 + index),
        "user_login": f"streamer{index}",
        "user_name": f"Streamer{index}",
        "game_id": "509658",
        "game_name": "Just Chatting",
        "type": "live",
        "title": f"Stream number {index}",
        "viewer_count": 10000 - index,
        "started_at": "2024-01-01T12:00:00Z",
        "language": "en",
        "thumbnail_url": f"https://static-cdn.jtvnw.net/previews-ttv/live_user_streamer{index}-{{width}}x{{height}}.jpg",
        "tag_ids": [],
        "tags": ["English"],
        "is_mature": False,
    }


def game_data(index: int) -> dict[str, Any]:
    """Build a game object shaped like the Helix /games/top response."""
    return {
        "id": str(500 + index),
        "name": f"Game {index}",
        "box_art_url": f"https://static-cdn.jtvnw.net/ttv-boxart/{500 + index}-{{width}}x{{height}}.jpg",
        "igdb_id": str(900 + index),
    }


def page(items: list[dict[str, Any]], cursor: str | None = None) -> dict[str, Any]:
    """Build a paginated envelope. ``cursor=None`` produces ``"pagination": {}``."""
    pagination = {} if cursor is None else {"cursor": cursor}
    return {"data": items, "pagination": pagination}


class PageServer:
    """Mock Helix server replaying a fixed sequence of responses.

    Each response is either a JSON-serializable body (sent with status 200),
    a ``(status, body)`` tuple, or an exception instance to raise.
    Requests beyond the scripted responses get a 500.
    """

    def __init__(self, responses: list[Any]):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = len(self.requests) - 1
        if index >= len(self.responses):
            return httpx.Response(500, json={"message": "unexpected request"})

        response = self.responses[index]
        if isinstance(response, Exception):
            raise response

        status = 200
        if isinstance(response, tuple):
            status, response = response
        if isinstance(response, (bytes, str)):
            return httpx.Response(status, content=response)
        return httpx.Response(status, json=response)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def queries(self) -> list[list[tuple[str, str]]]:
        """Query parameters of every received request, in order."""
        return [list(r.url.params.multi_items()) for r in self.requests]


class FullPageServer:
    """Mock Helix server that always returns exactly ``first`` items.

    Items are numbered consecutively across pages and each page carries a
    fresh cursor, so aggregated results can be checked for order and count.
    """

    def __init__(self, make_item: Callable[[int], dict[str, Any]] = stream_data):
        self.make_item = make_item
        self.requests: list[httpx.Request] = []
        self._next_index = 0

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        first = int(request.url.params["first"])
        items = [self.make_item(self._next_index + i) for i in range(first)]
        self._next_index += first
        return httpx.Response(200, json=page(items, cursor=f"cursor-{len(self.requests)}"))

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def page_sizes(self) -> list[int]:
        return [int(r.url.params["first"]) for r in self.requests]


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset global state before each test."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def page_server() -> Callable[..., PageServer]:
    """Factory for a PageServer replaying the given responses."""

    def _make(*responses: Any) -> PageServer:
        return PageServer(list(responses))

    return _make


@pytest.fixture
def full_page_server() -> FullPageServer:
    return FullPageServer()


def pytest_configure(config):
    """Ensure cassettes directory exists."""
    CASSETTES_DIR.mkdir(parents=True, exist_ok=True)
