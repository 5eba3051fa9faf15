"""Outline API client.

Outline exposes an RPC-style API: every operation is a POST to
``<api_url>/<resource>.<action>`` with a JSON body, answered with
``{"data": ..., "pagination": ...}`` on success or
``{"ok": false, "error": ..., "message": ...}`` on failure.

Clients are created per call from the credential of the current request.
"""

import logging
from typing import Any

import httpx

from ..config import settings
from ..context import RequestContext
from ..errors import CredentialMissingError, OutlineAPIError

logger = logging.getLogger(__name__)


class OutlineClient:
    """Thin async wrapper around httpx for the Outline API."""

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.outline_api_url,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "OutlineClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def post(self, endpoint: str, payload: dict[str, Any] | None = None) -> dict[str, Any]:
        """POST to an Outline endpoint and return the decoded response body.

        Args:
            endpoint: Endpoint name, e.g. "documents.info"
            payload: JSON body

        Returns:
            The full response body (``data``, ``pagination``, ...)

        Raises:
            OutlineAPIError: on transport failure, non-2xx status or a non-JSON body
        """
        try:
            response = await self._client.post(endpoint, json=payload or {})
        except httpx.HTTPError as e:
            logger.warning(f"Outline request to {endpoint} failed: {e}")
            raise OutlineAPIError(endpoint, str(e) or type(e).__name__) from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(f"Outline {endpoint} returned {response.status_code}: {message}")
            raise OutlineAPIError(endpoint, message, status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise OutlineAPIError(endpoint, "response is not valid JSON", response.status_code) from e
        if not isinstance(body, dict):
            raise OutlineAPIError(endpoint, "unexpected response shape", response.status_code)
        return body


def _error_message(response: httpx.Response) -> str:
    """Best-effort error text from an Outline error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or response.reason_phrase)
    return response.reason_phrase


def resolve_api_key(context: RequestContext | None = None) -> str:
    """API key for outbound calls: the request's credential, then OUTLINE_API_KEY."""
    if context is None:
        context = RequestContext.get_instance()
    api_key = context.get_credential() or settings.outline_api_key
    if not api_key:
        raise CredentialMissingError()
    return api_key


def get_outline_client(context: RequestContext | None = None) -> OutlineClient:
    """Create an Outline client authenticated as the current request.

    Raises:
        CredentialMissingError: neither the context nor the settings hold a key
    """
    return OutlineClient(resolve_api_key(context))


async def call_outline(
    endpoint: str,
    payload: dict[str, Any] | None = None,
    context: RequestContext | None = None,
) -> dict[str, Any]:
    """One-shot POST using a client bound to ``context``."""
    async with get_outline_client(context) as client:
        return await client.post(endpoint, payload)
