from microcms_mcp.server import run

run()
