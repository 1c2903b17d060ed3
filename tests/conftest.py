"""Pytest configuration - loads .env for integration tests and provides an in-process fake server."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest
from dotenv import load_dotenv

from testament_client import TestamentClient, create_client
from testament_client.config.settings import ClientSettings

# Load .env from project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

HOST = "http://localhost:8081"


class FakeServer:
    """Records every request and answers with a canned reply or error."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._reply: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(204)

    def reply(self, status: int, body: Any = None, headers: dict[str, str] | None = None) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if body is None:
                return httpx.Response(status, headers=headers)
            return httpx.Response(status, json=body, headers=headers)

        self._reply = respond

    def reply_with_error(self, message: str) -> None:
        def fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(message, request=request)

        self._reply = fail

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._reply(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def http(server: FakeServer) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(server.handle))


@pytest.fixture
def client(http: httpx.AsyncClient) -> TestamentClient:
    return create_client(HOST, http=http, settings=ClientSettings(_env_file=None))
