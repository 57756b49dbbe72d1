from __future__ import annotations

import logging
from typing import Annotated, Optional

from mcp.types import CallToolResult
from pydantic import Field

from microcms_mcp.core.client import MicroCMSClient, MicroCMSClientError
from microcms_mcp.core.models import ContentQuery
from microcms_mcp.core.results import tool_error, tool_success

log = logging.getLogger("microcms_mcp.core.tools.contents")

Endpoint = Annotated[
    str, Field(description="microCMS API endpoint to read from (e.g. 'blog').")
]
Limit = Annotated[
    Optional[int],
    Field(description="Number of contents to return (default 10, max 100)."),
]
Offset = Annotated[
    Optional[int], Field(description="Offset of the first content to return.")
]
Fields = Annotated[
    Optional[str],
    Field(
        description="Comma separated fields to return (e.g. 'id,title,publishedAt')."
    ),
]
Depth = Annotated[
    Optional[int],
    Field(description="Depth of referenced contents to expand (1-3)."),
]


async def _dispatch(
    client: MicroCMSClient,
    *,
    tool: str,
    endpoint: str,
    query: ContentQuery,
    content_id: Optional[str] = None,
) -> CallToolResult:
    """Run one list or single-item fetch and wrap the outcome as a tool result."""
    params = query.to_params()
    try:
        if content_id is None:
            data = await client.get_list(endpoint, params, tool=tool)
        else:
            data = await client.get_content(endpoint, content_id, params, tool=tool)
    except MicroCMSClientError as exc:
        log.warning("Tool %s failed: %s", tool, exc)
        return tool_error(exc)
    return tool_success(data)


async def get_contents(
    client: MicroCMSClient,
    endpoint: Endpoint,
    *,
    limit: Limit = None,
    offset: Offset = None,
    orders: Annotated[
        Optional[str],
        Field(description="Sort order (e.g. 'publishedAt' or '-publishedAt')."),
    ] = None,
    q: Annotated[Optional[str], Field(description="Full text search query.")] = None,
    filters: Annotated[
        Optional[str],
        Field(description="Filter conditions (e.g. 'title[contains]news')."),
    ] = None,
    fields: Fields = None,
    depth: Depth = None,
) -> CallToolResult:
    """Get a list of contents from a microCMS endpoint."""
    query = ContentQuery(
        limit=limit,
        offset=offset,
        orders=orders,
        q=q,
        filters=filters,
        fields=fields,
        depth=depth,
    )
    return await _dispatch(
        client, tool="get_contents", endpoint=endpoint, query=query
    )


async def get_content(
    client: MicroCMSClient,
    endpoint: Endpoint,
    contentId: Annotated[str, Field(description="ID of the content to fetch.")],
    *,
    fields: Fields = None,
    depth: Depth = None,
    draftKey: Annotated[
        Optional[str],
        Field(description="Draft key for fetching unpublished content."),
    ] = None,
) -> CallToolResult:
    """Get a single content item by its ID."""
    query = ContentQuery(fields=fields, depth=depth, draftKey=draftKey)
    return await _dispatch(
        client,
        tool="get_content",
        endpoint=endpoint,
        query=query,
        content_id=contentId,
    )


async def search_contents(
    client: MicroCMSClient,
    endpoint: Endpoint,
    q: Annotated[str, Field(description="Search keyword.")],
    *,
    limit: Limit = None,
    offset: Offset = None,
    fields: Fields = None,
    depth: Depth = None,
) -> CallToolResult:
    """Full text search over the contents of an endpoint."""
    query = ContentQuery(
        limit=limit, offset=offset, q=q, fields=fields, depth=depth
    )
    return await _dispatch(
        client, tool="search_contents", endpoint=endpoint, query=query
    )


async def filter_contents(
    client: MicroCMSClient,
    endpoint: Endpoint,
    filters: Annotated[
        str,
        Field(
            description=(
                "Filter conditions "
                "(e.g. 'category[equals]news[and]createdAt[greater_than]2023-01-01')."
            )
        ),
    ],
    *,
    limit: Limit = None,
    offset: Offset = None,
    fields: Fields = None,
    depth: Depth = None,
) -> CallToolResult:
    """List contents matching a microCMS filters expression."""
    query = ContentQuery(
        limit=limit, offset=offset, filters=filters, fields=fields, depth=depth
    )
    return await _dispatch(
        client, tool="filter_contents", endpoint=endpoint, query=query
    )
