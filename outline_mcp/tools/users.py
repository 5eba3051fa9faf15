"""User tools: listUsers."""

from ..context import RequestContext
from ..models import ListUsersParams, UserListResult
from ..services.outline_client import call_outline
from .base import payload_of
from .registry import ToolDefinition


async def handle_list_users(params: ListUsersParams, ctx: RequestContext) -> dict:
    """List workspace members, filtered by name/email, state or role."""
    body = await call_outline("users.list", payload_of(params), ctx)
    return {"users": body.get("data") or [], "pagination": body.get("pagination")}


TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="listUsers",
        description="List workspace members. Filter by name or email, account state, or role.",
        input_model=ListUsersParams,
        output_model=UserListResult,
        handler=handle_list_users,
    ),
]
