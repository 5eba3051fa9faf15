"""MCP (Model Context Protocol) transport module.

This module contains components for the MCP JSON-RPC transport:
- JSON-RPC 2.0 helpers and error codes
- Dispatcher for initialize, tools/list and tools/call (import from .dispatcher)
- FastAPI router for POST /mcp (import from .transport)
"""

from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR,
    http_status_for,
    jsonrpc_error,
    jsonrpc_response,
)

# Note: the dispatcher and transport depend on the tool registry and config and
# are not imported at module level. Import them directly:
#   from outline_mcp.mcp.dispatcher import Dispatcher
#   from outline_mcp.mcp.transport import router

__all__ = [
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "http_status_for",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "SERVER_ERROR",
]
