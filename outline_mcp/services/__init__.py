"""Outbound service clients."""

from .outline_client import OutlineClient, call_outline, get_outline_client, resolve_api_key

__all__ = [
    "OutlineClient",
    "call_outline",
    "get_outline_client",
    "resolve_api_key",
]
