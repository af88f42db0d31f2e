"""
simplehandlers - Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the test suite.
How:   Filters are exercised end-to-end through HTTPX's ASGITransport, with a
       recording ASGI app standing in for the wrapped handler.

Fixtures (function-scoped):
    ├── capture_app: Innermost handler that records the scope it received
    ├── sent_messages: List plus ``send`` callable recording ASGI messages
    ├── make_client: Factory for an HTTPX AsyncClient bound to an ASGI app
    ├── http_scope: Factory for minimal HTTP scopes (direct ASGI calls)
    └── receive: ASGI receive callable with an empty body
"""

import os
from typing import Any, Dict, List

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.responses import PlainTextResponse

# Settings are read at import time; keep the test run independent of the
# developer's environment.
os.environ["SIMPLEHANDLERS_LOG_LEVEL"] = "WARNING"
os.environ.pop("SIMPLEHANDLERS_EXTENSION_PARAM", None)
os.environ.pop("SIMPLEHANDLERS_EXTENSION_KEEP_SEPARATOR", None)


class CaptureApp:
    """ASGI app that records each scope it sees and answers 200 "ok"."""

    def __init__(self) -> None:
        self.scopes: List[Dict[str, Any]] = []

    async def __call__(self, scope, receive, send) -> None:
        self.scopes.append(dict(scope))
        await PlainTextResponse("ok")(scope, receive, send)

    async def record(self, scope, receive, send) -> None:
        """Record the scope without sending a response."""
        self.scopes.append(dict(scope))

    @property
    def last(self) -> Dict[str, Any]:
        return self.scopes[-1]


@pytest.fixture
def capture_app():
    """Provides a fresh recording handler for each test."""
    return CaptureApp()


@pytest.fixture
def sent_messages():
    """
    Provides ``(messages, send)`` for calling ASGI apps directly.

    Usage:
        messages, send = sent_messages
        await app(scope, receive, send)
        assert messages[0]["status"] == 500
    """
    messages: List[Dict[str, Any]] = []

    async def send(message):
        messages.append(message)

    return messages, send


@pytest.fixture
def make_client():
    """
    Provides a factory for HTTPX clients talking to an ASGI app.

    Usage:
        async with make_client(app) as client:
            response = await client.get("/report.csv")
    """

    def factory(app) -> AsyncClient:
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    return factory


@pytest.fixture
def http_scope():
    """Provides a factory for minimal HTTP scopes used in direct ASGI calls."""

    def factory(path: str = "/", method: str = "GET", query: bytes = b"") -> Dict[str, Any]:
        return {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method,
            "scheme": "http",
            "path": path,
            "raw_path": path.encode(),
            "query_string": query,
            "root_path": "",
            "headers": [],
            "server": ("test", 80),
        }

    return factory


@pytest.fixture
def receive():
    """Provides an ASGI ``receive`` returning an empty request body."""

    async def empty_receive():
        return {"type": "http.request", "body": b"", "more_body": False}

    return empty_receive
