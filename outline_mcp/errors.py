"""Exception types for the Outline MCP Server.

Protocol errors carry the JSON-RPC error code they are reported with, so the
dispatcher and transport can convert any of them into an error envelope
without a lookup table.
"""

from typing import Any

from .mcp.jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR,
)


class OutlineMCPError(Exception):
    """Base class for all errors raised by this package."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# ============ CONFIGURATION ERRORS ============


class DuplicateToolError(OutlineMCPError):
    """A tool with the same name is already registered."""

    def __init__(self, name: str):
        super().__init__(f"Tool already registered: {name}")
        self.name = name


# ============ REQUEST SHAPE ERRORS ============


class ParseError(OutlineMCPError):
    code = PARSE_ERROR


class InvalidRequestError(OutlineMCPError):
    code = INVALID_REQUEST


class MethodNotFoundError(OutlineMCPError):
    code = METHOD_NOT_FOUND

    def __init__(self, method: str):
        super().__init__(f"Method not found: {method}")
        self.method = method


class InvalidParamsError(OutlineMCPError):
    code = INVALID_PARAMS


# ============ TOOL ERRORS ============


class ToolNotFoundError(InvalidParamsError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArgumentsError(InvalidParamsError):
    """Arguments do not conform to the tool's input model.

    ``errors`` holds the pydantic error list so callers can report which
    fields failed.
    """

    def __init__(self, name: str, errors: list[dict[str, Any]]):
        self.name = name
        self.errors = errors
        super().__init__(f"Invalid arguments for tool {name}: {_describe_errors(errors)}")


class ToolExecutionError(OutlineMCPError):
    """The tool's handler failed. The original exception is ``__cause__``."""

    code = INTERNAL_ERROR

    def __init__(self, name: str, cause: BaseException):
        super().__init__(f"Tool {name} failed: {cause}")
        self.name = name
        self.cause = cause


# ============ AUTHENTICATION ERRORS ============


class CredentialMissingError(OutlineMCPError):
    code = SERVER_ERROR

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or (
                "credential required: set the OUTLINE_API_KEY environment variable "
                "or provide an x-outline-api-key header"
            )
        )


# ============ OUTLINE BACKEND ERRORS ============


class OutlineAPIError(OutlineMCPError):
    """The Outline API returned an error or could not be reached."""

    def __init__(self, endpoint: str, message: str, status_code: int | None = None):
        prefix = f"Outline API {endpoint}"
        if status_code is not None:
            prefix += f" returned {status_code}"
        super().__init__(f"{prefix}: {message}")
        self.endpoint = endpoint
        self.status_code = status_code


def _describe_errors(errors: list[dict[str, Any]]) -> str:
    parts = []
    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)
