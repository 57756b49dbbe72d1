"""Console entry point: runs the stdio MCP server."""

from microcms_mcp.transports.stdio.main import build_fastmcp, main, run

__all__ = ["build_fastmcp", "main", "run"]


if __name__ == "__main__":
    run()
