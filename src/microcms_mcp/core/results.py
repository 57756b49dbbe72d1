"""
Result envelopes returned to the MCP layer.

Tool failures set ``isError`` on the CallToolResult. Resource reads have no
separate error channel, so a failed read returns the error text as the body.
"""

from __future__ import annotations

import json
from typing import Any

from mcp.types import CallToolResult, TextContent

ERROR_PREFIX = "Error: "


def format_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def error_message(exc: BaseException) -> str:
    return f"{ERROR_PREFIX}{exc}"


def tool_success(data: Any) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=format_json(data))])


def tool_error(exc: BaseException) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=error_message(exc))],
        isError=True,
    )


def resource_text(data: Any) -> str:
    return format_json(data)


def resource_error_text(exc: BaseException) -> str:
    return error_message(exc)


__all__ = [
    "ERROR_PREFIX",
    "format_json",
    "error_message",
    "tool_success",
    "tool_error",
    "resource_text",
    "resource_error_text",
]
