"""Document tools.

Handles:
- getDocument, listDocuments, searchDocuments, askDocuments
- createDocument, updateDocument, moveDocument
- archiveDocument, deleteDocument, createTemplateFromDocument
"""

from typing import Any

from ..context import RequestContext
from ..models import (
    ArchiveDocumentParams,
    AskDocumentsParams,
    CreateDocumentParams,
    CreateTemplateFromDocumentParams,
    DeleteDocumentParams,
    DocumentListResult,
    GetDocumentParams,
    ListDocumentsParams,
    MoveDocumentParams,
    SearchDocumentsParams,
    UpdateDocumentParams,
)
from ..services.outline_client import call_outline
from .base import data_of, payload_of
from .registry import ToolDefinition


async def handle_get_document(params: GetDocumentParams, ctx: RequestContext) -> Any:
    return data_of(await call_outline("documents.info", payload_of(params), ctx))


async def handle_list_documents(params: ListDocumentsParams, ctx: RequestContext) -> dict:
    """List documents, optionally filtered by collection, author or parent.

    Returns:
        Dict with ``documents`` and ``pagination``
    """
    body = await call_outline("documents.list", payload_of(params), ctx)
    return {"documents": body.get("data") or [], "pagination": body.get("pagination")}


async def handle_search_documents(params: SearchDocumentsParams, ctx: RequestContext) -> Any:
    """Full-text search.

    Each hit carries ``context`` (highlighted snippet), ``ranking`` and the
    matching ``document``.
    """
    return data_of(await call_outline("documents.search", payload_of(params), ctx))


async def handle_ask_documents(params: AskDocumentsParams, ctx: RequestContext) -> dict:
    """Ask a natural-language question answered from workspace documents.

    Requires Outline's AI answers feature to be enabled for the workspace.
    """
    body = await call_outline("documents.answerQuestion", payload_of(params), ctx)
    search = body.get("search") or {}
    return {
        "answer": search.get("answer"),
        "documents": body.get("documents") or [],
    }


async def handle_create_document(params: CreateDocumentParams, ctx: RequestContext) -> Any:
    return data_of(await call_outline("documents.create", payload_of(params), ctx))


async def handle_update_document(params: UpdateDocumentParams, ctx: RequestContext) -> Any:
    return data_of(await call_outline("documents.update", payload_of(params), ctx))


async def handle_move_document(params: MoveDocumentParams, ctx: RequestContext) -> Any:
    return data_of(await call_outline("documents.move", payload_of(params), ctx))


async def handle_archive_document(params: ArchiveDocumentParams, ctx: RequestContext) -> Any:
    return data_of(await call_outline("documents.archive", payload_of(params), ctx))


async def handle_delete_document(params: DeleteDocumentParams, ctx: RequestContext) -> Any:
    return data_of(await call_outline("documents.delete", payload_of(params), ctx))


async def handle_create_template_from_document(
    params: CreateTemplateFromDocumentParams, ctx: RequestContext
) -> Any:
    return data_of(await call_outline("documents.templatize", payload_of(params), ctx))


TOOLS: list[ToolDefinition] = [
    ToolDefinition(
        name="getDocument",
        description="Retrieve a document by ID or URL slug, including its Markdown text.",
        input_model=GetDocumentParams,
        handler=handle_get_document,
    ),
    ToolDefinition(
        name="listDocuments",
        description="List documents, optionally filtered by collection, author or parent document.",
        input_model=ListDocumentsParams,
        output_model=DocumentListResult,
        handler=handle_list_documents,
    ),
    ToolDefinition(
        name="searchDocuments",
        description="Full-text search across documents. Returns ranked hits with context snippets.",
        input_model=SearchDocumentsParams,
        handler=handle_search_documents,
    ),
    ToolDefinition(
        name="askDocuments",
        description="Ask a natural-language question and get an answer drawn from workspace documents.",
        input_model=AskDocumentsParams,
        handler=handle_ask_documents,
    ),
    ToolDefinition(
        name="createDocument",
        description="Create a document in a collection, optionally nested under a parent document.",
        input_model=CreateDocumentParams,
        handler=handle_create_document,
    ),
    ToolDefinition(
        name="updateDocument",
        description="Update a document's title or text. Set append=true to add to the existing body.",
        input_model=UpdateDocumentParams,
        handler=handle_update_document,
    ),
    ToolDefinition(
        name="moveDocument",
        description="Move a document to another collection or under another parent document.",
        input_model=MoveDocumentParams,
        handler=handle_move_document,
    ),
    ToolDefinition(
        name="archiveDocument",
        description="Archive a document. Archived documents are hidden but can be restored.",
        input_model=ArchiveDocumentParams,
        handler=handle_archive_document,
    ),
    ToolDefinition(
        name="deleteDocument",
        description="Move a document to the trash, or delete it permanently with permanent=true.",
        input_model=DeleteDocumentParams,
        handler=handle_delete_document,
    ),
    ToolDefinition(
        name="createTemplateFromDocument",
        description="Create a reusable template from an existing document.",
        input_model=CreateTemplateFromDocumentParams,
        handler=handle_create_template_from_document,
    ),
]
