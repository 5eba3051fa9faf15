"""MCP JSON-RPC transport over HTTP.

POST /mcp accepts one JSON-RPC request. The Outline API key is taken from,
in order: the x-outline-api-key header, the outline-api-key header, a
Bearer Authorization header, then the OUTLINE_API_KEY setting. Requests
without a credential are refused before the body is decoded.

MCP client config example:
```json
{"mcpServers": {"outline": {"type": "http", "url": "https://<host>/mcp", "headers": {"x-outline-api-key": "ol_api_..."}}}}
```
"""

import logging
import re
from collections.abc import Mapping

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..config import Settings
from ..context import request_scope
from ..errors import CredentialMissingError, ParseError
from .dispatcher import Dispatcher, decode_body, request_id_of
from .jsonrpc import http_status_for, jsonrpc_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["MCP Transport"])

API_KEY_HEADERS = ("x-outline-api-key", "outline-api-key")
_BEARER_PREFIX = re.compile(r"^Bearer\s+", re.IGNORECASE)


# ============ CREDENTIAL RESOLUTION ============


def extract_api_key(headers: Mapping[str, str]) -> str | None:
    """API key from request headers, or None if no header carries one."""
    for name in API_KEY_HEADERS:
        value = headers.get(name)
        if value:
            return value
    authorization = headers.get("authorization")
    if authorization:
        return _BEARER_PREFIX.sub("", authorization) or None
    return None


def resolve_credential(headers: Mapping[str, str], fallback: str | None = None) -> str:
    """Credential for this request: request headers first, then ``fallback``.

    Raises:
        CredentialMissingError: no header and no fallback
    """
    api_key = extract_api_key(headers)
    if api_key:
        logger.info("Using API key from request headers")
        return api_key
    if fallback:
        logger.info("Using API key from environment variable")
        return fallback
    logger.warning("No API key provided in headers and no default environment variable set")
    raise CredentialMissingError()


# ============ ENDPOINT ============


def get_dispatcher(request: Request) -> Dispatcher:
    """Dispatcher built at application startup."""
    return request.app.state.dispatcher


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _respond(payload: dict) -> JSONResponse:
    return JSONResponse(payload, status_code=http_status_for(payload))


@router.post("/mcp")
async def mcp_transport_endpoint(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    app_settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """MCP JSON-RPC endpoint (initialize, tools/list, tools/call).

    The credential is resolved before the body is decoded, so an
    unauthenticated caller gets -32000 whatever it sent.
    """
    raw = await request.body()

    with request_scope() as context:
        try:
            context.set_credential(resolve_credential(request.headers, app_settings.outline_api_key))
        except CredentialMissingError as e:
            return _respond(jsonrpc_error(_peek_request_id(raw), e.code, e.message))

        try:
            body = decode_body(raw)
        except ParseError as e:
            return _respond(jsonrpc_error(None, e.code, e.message))

        response = await dispatcher.dispatch(body, context)

    return _respond(response)


def _peek_request_id(raw: bytes) -> str | int | float | None:
    """Request id for a refusal, or None when the body does not parse."""
    try:
        return request_id_of(decode_body(raw))
    except ParseError:
        return None
