"""Collection tools.

Handles:
- listCollections, getCollection
- createCollection, updateCollection
"""

from typing import Any

from ..context import RequestContext
from ..models import (
    CollectionListResult,
    CreateCollectionParams,
    GetCollectionParams,
    ListCollectionsParams,
    UpdateCollectionParams,
)
from ..services.outline_client import call_outline
from .base import data_of, payload_of
from .registry import ToolDefinition


async def handle_list_collections(params: ListCollectionsParams, ctx: RequestContext) -> dict:
    """List collections visible to the authenticated user.

    Returns:
        Dict with ``collections`` and ``pagination``
    """
    body = await call_outline("collections.list", payload_of(params), ctx)
    return {"collections": body.get("data") or [], "pagination": body.get("pagination")}


async def handle_get_collection(params: GetCollectionParams, ctx: RequestContext) -> Any:
    return data_of(await call_outline("collections.info", payload_of(params), ctx))


async def handle_create_collection(params: CreateCollectionParams, ctx: RequestContext) -> Any:
    return data_of(await call_outline("collections.create", payload_of(params), ctx))


async def handle_update_collection(params: UpdateCollectionParams, ctx: RequestContext) -> Any:
    return data_of(await call_outline("collections.update", payload_of(params), ctx))


TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="listCollections",
        description="List the collections in the workspace.",
        input_model=ListCollectionsParams,
        output_model=CollectionListResult,
        handler=handle_list_collections,
    ),
    ToolDefinition(
        name="getCollection",
        description="Retrieve a collection by ID.",
        input_model=GetCollectionParams,
        handler=handle_get_collection,
    ),
    ToolDefinition(
        name="createCollection",
        description="Create a collection. Permission controls default member access.",
        input_model=CreateCollectionParams,
        handler=handle_create_collection,
    ),
    ToolDefinition(
        name="updateCollection",
        description="Update a collection's name, description, permission or color.",
        input_model=UpdateCollectionParams,
        handler=handle_update_collection,
    ),
]
