"""JSON-RPC envelope models for the MCP endpoint.

A raw body is first validated as a JSONRPCRequest, then narrowed by method
name into one of the typed requests below before dispatch.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

RequestId = StrictStr | StrictInt | StrictFloat | None


class JSONRPCRequest(BaseModel):
    """Decoded JSON-RPC 2.0 request envelope."""

    model_config = ConfigDict(extra="ignore")

    jsonrpc: str = Field(default="2.0", description="Protocol version tag")
    method: StrictStr = Field(..., description="Method name")
    params: dict[str, Any] | None = Field(default=None, description="Method parameters")
    id: RequestId = Field(default=None, description="Correlation ID, echoed back unchanged")


# ============ METHOD PARAMS ============


class InitializeParams(BaseModel):
    """Parameters for initialize. Client info is accepted but not used."""

    model_config = ConfigDict(extra="allow")

    protocolVersion: str | None = None
    clientInfo: dict[str, Any] | None = None
    capabilities: dict[str, Any] = Field(default_factory=dict)


class ListToolsParams(BaseModel):
    model_config = ConfigDict(extra="allow")

    cursor: str | None = None


class CallToolParams(BaseModel):
    """Parameters for tools/call."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(..., min_length=1, description="Registered tool name")
    arguments: dict[str, Any] | None = Field(default=None, description="Tool arguments")


# ============ TYPED REQUESTS ============


class InitializeRequest(BaseModel):
    method: Literal["initialize"] = "initialize"
    id: RequestId = None
    params: InitializeParams = Field(default_factory=InitializeParams)


class ListToolsRequest(BaseModel):
    method: Literal["tools/list"] = "tools/list"
    id: RequestId = None
    params: ListToolsParams = Field(default_factory=ListToolsParams)


class CallToolRequest(BaseModel):
    method: Literal["tools/call"] = "tools/call"
    id: RequestId = None
    params: CallToolParams


MCPRequest = InitializeRequest | ListToolsRequest | CallToolRequest

REQUEST_TYPES: dict[str, type[BaseModel]] = {
    "initialize": InitializeRequest,
    "tools/list": ListToolsRequest,
    "tools/call": CallToolRequest,
}
