"""
URI-addressed read-only resources.

``microcms://{endpoint}/{contentId}`` reads one content item and
``microcms://{endpoint}`` reads the first page of an endpoint. Neither takes
query parameters and neither is enumerable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Tuple

from .client import MicroCMSClient, MicroCMSClientError
from .results import resource_error_text, resource_text

log = logging.getLogger("microcms_mcp.core.resources")

URI_SCHEME = "microcms"


async def read_content(client: MicroCMSClient, endpoint: str, contentId: str) -> str:
    try:
        data = await client.get_content(endpoint, contentId, tool="resource:content")
    except MicroCMSClientError as exc:
        log.warning(
            "Resource %s://%s/%s failed: %s", URI_SCHEME, endpoint, contentId, exc
        )
        return resource_error_text(exc)
    return resource_text(data)


async def read_contents(client: MicroCMSClient, endpoint: str) -> str:
    try:
        data = await client.get_list(endpoint, tool="resource:contents")
    except MicroCMSClientError as exc:
        log.warning("Resource %s://%s failed: %s", URI_SCHEME, endpoint, exc)
        return resource_error_text(exc)
    return resource_text(data)


@dataclass(frozen=True)
class ResourceSpec:
    name: str
    uri_template: str
    description: str
    reader: Callable[..., Awaitable[str]]


RESOURCES: Tuple[ResourceSpec, ...] = (
    ResourceSpec(
        name="content",
        uri_template=f"{URI_SCHEME}://{{endpoint}}/{{contentId}}",
        description="A single microCMS content item as JSON.",
        reader=read_content,
    ),
    ResourceSpec(
        name="contents",
        uri_template=f"{URI_SCHEME}://{{endpoint}}",
        description="The first page of contents of a microCMS endpoint as JSON.",
        reader=read_contents,
    ),
)


__all__ = [
    "URI_SCHEME",
    "RESOURCES",
    "ResourceSpec",
    "read_content",
    "read_contents",
]
