"""Shared helpers for tool handlers."""

from typing import Any

from pydantic import BaseModel


def payload_of(params: BaseModel) -> dict[str, Any]:
    """Request body for Outline: the validated params without unset optionals."""
    return params.model_dump(mode="json", exclude_none=True)


def data_of(body: dict[str, Any]) -> Any:
    """The ``data`` member of an Outline response, or the whole body if absent.

    Delete endpoints answer ``{"success": true}`` with no ``data``.
    """
    if "data" in body:
        return body["data"]
    return body
