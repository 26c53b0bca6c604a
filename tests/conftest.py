"""Shared fixtures: a FreeTable client backed by httpx.MockTransport."""

import json
from typing import Optional

import httpx
import pytest

from core.freetable import FreeTableClient

API_BASE = "https://freetable.test"


class FakeBackend:
    """Records outbound requests and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = b"{}"
        self.error: Optional[Exception] = None

    def respond(self, status_code: int = 200, json_body=None, text: str = "", content: Optional[bytes] = None):
        self.status_code = status_code
        if content is not None:
            self.body = content
        elif json_body is not None:
            self.body = json.dumps(json_body).encode()
        else:
            self.body = text.encode()

    def fail(self, error: Exception):
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.body)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def api(backend):
    return FreeTableClient(base_url=API_BASE, transport=httpx.MockTransport(backend.handler))
