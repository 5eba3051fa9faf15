"""JSON-RPC dispatcher for the MCP endpoint.

Turns one decoded JSON-RPC request into exactly one JSON-RPC response:

- initialize: static server info and capabilities
- tools/list: registry metadata in registration order
- tools/call: validated invocation of a registered tool
- anything else: Method not found

Every failure is converted into an error envelope carrying the request id;
nothing raised below the dispatcher reaches the transport.
"""

import json
import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from .. import __version__
from ..context import RequestContext
from ..errors import (
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    OutlineMCPError,
    ParseError,
    ToolExecutionError,
)
from ..models.rpc import (
    REQUEST_TYPES,
    CallToolParams,
    InitializeRequest,
    JSONRPCRequest,
    ListToolsRequest,
    MCPRequest,
)
from ..tools.registry import ToolRegistry
from .jsonrpc import INTERNAL_ERROR, jsonrpc_error, jsonrpc_response

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "outline-mcp-server"


# ============ DECODING ============


def decode_body(raw: bytes | str) -> Any:
    """Decode a raw request body.

    Raises:
        ParseError: the body is not valid JSON
    """
    try:
        return json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise ParseError("Parse error") from e


def request_id_of(body: Any) -> str | int | float | None:
    """Correlation id of a decoded body, or None if it has no usable id."""
    if not isinstance(body, dict):
        return None
    request_id = body.get("id")
    if isinstance(request_id, bool) or not isinstance(request_id, (str, int, float)):
        return None
    return request_id


def parse_request(body: Any) -> MCPRequest:
    """Validate a decoded body and narrow it to a typed request.

    Raises:
        InvalidRequestError: not an object, or missing/invalid method, params or id
        MethodNotFoundError: method is not initialize, tools/list or tools/call
        InvalidParamsError: params do not match the method
    """
    if not isinstance(body, dict):
        raise InvalidRequestError("Invalid request: expected a JSON object")

    try:
        envelope = JSONRPCRequest.model_validate(body)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise InvalidRequestError(f"Invalid request: bad or missing {', '.join(fields)}") from e

    request_type = REQUEST_TYPES.get(envelope.method)
    if request_type is None:
        raise MethodNotFoundError(envelope.method)

    try:
        return request_type.model_validate(
            {"method": envelope.method, "id": envelope.id, "params": envelope.params or {}}
        )
    except ValidationError as e:
        if any(tuple(err["loc"][:2]) == ("params", "name") for err in e.errors()):
            raise InvalidParamsError("Tool name is required") from e
        raise InvalidParamsError(f"Invalid params for {envelope.method}") from e


# ============ RESULT FORMATTING ============


def format_tool_result(output: Any, structured: bool = False) -> dict:
    """Wrap a tool's output as an MCP tools/call result.

    The output is serialized into a single text content block. Tools that
    declare an output model also get ``structuredContent``.
    """
    data = output.model_dump(mode="json") if isinstance(output, BaseModel) else output
    text = data if isinstance(data, str) else json.dumps(data, indent=2, default=str)
    result: dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if structured:
        result["structuredContent"] = data
    return result


def sanitize_error_message(error: OutlineMCPError) -> str:
    """Message safe to return to the client.

    Tool failures caused by anything other than a known error type are
    reported generically; the full error is logged.
    """
    if isinstance(error, ToolExecutionError):
        cause = error.cause
        if isinstance(cause, (OutlineMCPError, ValidationError, ValueError)):
            return error.message
        return f"Tool {error.name} failed with an unexpected error. Please try again."
    return error.message


# ============ DISPATCHER ============


class Dispatcher:
    """Resolve JSON-RPC methods against the protocol methods and the tool registry."""

    def __init__(
        self,
        registry: ToolRegistry,
        server_name: str = SERVER_NAME,
        server_version: str = __version__,
    ):
        self.registry = registry
        self.server_name = server_name
        self.server_version = server_version

    def server_info(self) -> dict:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "serverInfo": {"name": self.server_name, "version": self.server_version},
            "capabilities": {"tools": {}},
        }

    async def dispatch(self, body: Any, context: RequestContext) -> dict:
        """Handle one decoded request body.

        Args:
            body: Decoded JSON body
            context: Credential context of the current request

        Returns:
            JSON-RPC response dict (always; never raises)
        """
        request_id = request_id_of(body)
        try:
            request = parse_request(body)
            result = await self._handle(request, context)
        except ToolExecutionError as e:
            logger.error(f"Tool execution failed: {e}", exc_info=e.cause)
            return jsonrpc_error(request_id, e.code, sanitize_error_message(e))
        except OutlineMCPError as e:
            logger.warning(f"Rejected JSON-RPC request (code {e.code}): {e.message}")
            return jsonrpc_error(request_id, e.code, sanitize_error_message(e))
        except Exception as e:
            logger.error(f"Unhandled error dispatching request: {e}", exc_info=True)
            return jsonrpc_error(request_id, INTERNAL_ERROR, "Internal server error")
        return jsonrpc_response(request_id, result)

    async def _handle(self, request: MCPRequest, context: RequestContext) -> Any:
        if isinstance(request, InitializeRequest):
            return self.server_info()
        elif isinstance(request, ListToolsRequest):
            return {"tools": self.registry.list()}
        else:
            return await self._call_tool(request.params, context)

    async def _call_tool(self, params: CallToolParams, context: RequestContext) -> dict:
        """Handle MCP tools/call request."""
        logger.info(f"tools/call {params.name}")
        output = await self.registry.invoke(params.name, params.arguments or {}, context)
        definition = self.registry.get(params.name)
        structured = definition is not None and definition.output_model is not None
        return format_tool_result(output, structured=structured)
