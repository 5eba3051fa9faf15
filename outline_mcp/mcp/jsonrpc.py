"""JSON-RPC 2.0 envelopes for the /mcp endpoint.

Builders for result and error envelopes, the error codes the server emits,
and the HTTP status each envelope is sent with.

See: https://www.jsonrpc.org/specification
"""

from typing import Any

JSONRPC_VERSION = "2.0"

# Error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
SERVER_ERROR = -32000  # Credential missing


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Success envelope.

    Args:
        id: Correlation id copied from the request
        result: Method result

    Returns:
        Envelope dict ready for JSON encoding
    """
    return {"jsonrpc": JSONRPC_VERSION, "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str) -> dict:
    """Error envelope.

    Codes used by this server:
        -32700: body is not JSON (credential already resolved)
        -32600: envelope is malformed
        -32601: method is not initialize, tools/list or tools/call
        -32602: bad params, unknown tool or invalid tool arguments
        -32603: tool or Outline failure, or an unexpected error
        -32000: no credential; checked before the body is decoded

    Args:
        id: Correlation id, or None when the request id is unknown
        code: One of the codes above
        message: Text shown to the client

    Returns:
        Envelope dict ready for JSON encoding
    """
    return {"jsonrpc": JSONRPC_VERSION, "id": id, "error": {"code": code, "message": message}}


def http_status_for(response: dict) -> int:
    """HTTP status for an envelope: 200 on success, else by error code.

    -32603 maps to 500 and -32000 to 405; all other codes are client
    faults and map to 400.
    """
    error = response.get("error")
    if error is None:
        return 200
    code = error.get("code")
    if code == INTERNAL_ERROR:
        return 500
    if code == SERVER_ERROR:
        return 405
    return 400
