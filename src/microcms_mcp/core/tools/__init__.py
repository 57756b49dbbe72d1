"""
Tool modules for microCMS MCP.

Every public coroutine in a module here whose first parameter is ``client``
is registered as an MCP tool by ``microcms_mcp.core.registry``.
"""
