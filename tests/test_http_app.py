"""Tests for the HTTP path router."""

import httpx
import pytest
from starlette.responses import PlainTextResponse

from tools.http_app import create_app, route_requests
from tools.mcp_server import create_server


def stub(label: str):
    return PlainTextResponse(label)


@pytest.fixture
def client():
    app = route_requests(stub("sse"), stub("mcp"))
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path, expected",
    [
        ("/sse", "sse"),
        ("/sse/message", "sse"),
        ("/sse/message/", "sse"),
        ("/mcp", "mcp"),
    ],
)
async def test_routes_by_path(client, path, expected):
    async with client:
        response = await client.get(path)

    assert response.status_code == 200
    assert response.text == expected


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/", "/api/restaurants", "/mcp/extra", "/sse/other"])
async def test_unknown_path_is_not_found(client, path):
    async with client:
        response = await client.post(path)

    assert response.status_code == 404
    assert response.text == "Not found"


@pytest.mark.asyncio
async def test_real_app_returns_not_found(api):
    app = create_app(create_server(api))

    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/favicon.ico")

    assert response.status_code == 404
    assert response.text == "Not found"
