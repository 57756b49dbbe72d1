import pytest
import respx
from httpx import Response
from microcms_mcp.core.client import MicroCMSClient
from microcms_mcp.core.resources import RESOURCES, read_content, read_contents
from microcms_mcp.core.tools.contents import get_content

BASE = "https://mock.microcms.io"


@pytest.fixture
def client():
    return MicroCMSClient(base_url=BASE, api_key="mock-key")


def test_resource_templates():
    assert {r.name: r.uri_template for r in RESOURCES} == {
        "content": "microcms://{endpoint}/{contentId}",
        "contents": "microcms://{endpoint}",
    }


@pytest.mark.asyncio
@respx.mock
async def test_read_content_matches_get_content_tool(client):
    route = respx.get(f"{BASE}/api/v1/blog/abc123").mock(
        return_value=Response(200, json={"id": "abc123", "title": "ニュース"})
    )

    async with client:
        text = await read_content(client, "blog", "abc123")
        tool_result = await get_content(client, "blog", "abc123")

    assert route.call_count == 2
    resource_req, tool_req = (c.request for c in route.calls)
    assert resource_req.url == tool_req.url
    assert resource_req.headers["X-MICROCMS-API-KEY"] == "mock-key"
    assert text == tool_result.content[0].text


@pytest.mark.asyncio
@respx.mock
async def test_read_contents_sends_no_query(client):
    route = respx.get(f"{BASE}/api/v1/news").mock(
        return_value=Response(200, json={"contents": [], "totalCount": 0})
    )

    async with client:
        text = await read_contents(client, "news")

    assert route.calls[0].request.url.query == b""
    assert '"totalCount": 0' in text


@pytest.mark.asyncio
@respx.mock
async def test_read_content_failure_returns_error_text(client):
    respx.get(f"{BASE}/api/v1/blog/missing").mock(return_value=Response(404))

    async with client:
        text = await read_content(client, "blog", "missing")

    assert text == "Error: Failed to fetch content from microCMS: 404 Not Found"


@pytest.mark.asyncio
@respx.mock
async def test_read_contents_failure_returns_error_text(client):
    respx.get(f"{BASE}/api/v1/nope").mock(return_value=Response(400))

    async with client:
        text = await read_contents(client, "nope")

    assert text == "Error: Failed to fetch from microCMS: 400 Bad Request"


@pytest.mark.asyncio
@respx.mock
async def test_read_content_invalid_url_returns_error_text(client):
    async with client:
        text = await read_content(client, "bl\x00og", "abc123")

    assert text.startswith("Error: Invalid request URL for GET")


@pytest.mark.asyncio
@respx.mock
async def test_read_contents_invalid_url_returns_error_text(client):
    async with client:
        text = await read_contents(client, "bl\x00og")

    assert text.startswith("Error: Invalid request URL for GET")
