"""Comment tools: createComment, updateComment, deleteComment."""

from typing import Any

from ..context import RequestContext
from ..models import CreateCommentParams, DeleteCommentParams, UpdateCommentParams
from ..services.outline_client import call_outline
from .base import data_of, payload_of
from .registry import ToolDefinition


async def handle_create_comment(params: CreateCommentParams, ctx: RequestContext) -> Any:
    return data_of(await call_outline("comments.create", payload_of(params), ctx))


async def handle_update_comment(params: UpdateCommentParams, ctx: RequestContext) -> Any:
    return data_of(await call_outline("comments.update", payload_of(params), ctx))


async def handle_delete_comment(params: DeleteCommentParams, ctx: RequestContext) -> Any:
    return data_of(await call_outline("comments.delete", payload_of(params), ctx))


TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="createComment",
        description="Add a comment to a document, or reply to an existing comment.",
        input_model=CreateCommentParams,
        handler=handle_create_comment,
    ),
    ToolDefinition(
        name="updateComment",
        description="Replace the text of a comment.",
        input_model=UpdateCommentParams,
        handler=handle_update_comment,
    ),
    ToolDefinition(
        name="deleteComment",
        description="Delete a comment and its replies.",
        input_model=DeleteCommentParams,
        handler=handle_delete_comment,
    ),
]
