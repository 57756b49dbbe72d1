from __future__ import annotations

import asyncio
import logging

from mcp.server.fastmcp import FastMCP

from microcms_mcp.core.client import MicroCMSClient
from microcms_mcp.core.config import load_config, log_level_from_env
from microcms_mcp.core.errors import ConfigurationError
from microcms_mcp.core.logging import setup_logging
from microcms_mcp.core.registry import register_discovered_tools, register_resources

SERVER_NAME = "microCMS-MCP-Server"

log = logging.getLogger("microcms_mcp.transports.stdio")


def build_fastmcp(client: MicroCMSClient) -> FastMCP:
    app = FastMCP(SERVER_NAME)
    register_discovered_tools(app, client)
    register_resources(app, client)
    return app


async def main() -> None:
    setup_logging(log_level_from_env())
    try:
        config = load_config(use_dotenv=True)
    except ConfigurationError as exc:
        log.error("Cannot start server: %s", exc)
        raise SystemExit(1) from exc

    client = MicroCMSClient.from_config(config)
    async with client:
        app = build_fastmcp(client)
        log.info("Starting microCMS MCP Server...")
        await app.run_stdio_async()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
