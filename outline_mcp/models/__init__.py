"""Pydantic models for the Outline MCP Server.

- rpc: JSON-RPC envelope and the typed initialize / tools/list / tools/call requests
- requests: tool input models
- results: tool output models
- enums: shared enumerations
"""

from .enums import (
    CollectionPermission,
    DateFilter,
    SortDirection,
    StatusFilter,
    UserFilter,
    UserRole,
)
from .requests import (
    ArchiveDocumentParams,
    AskDocumentsParams,
    CreateCollectionParams,
    CreateCommentParams,
    CreateDocumentParams,
    CreateTemplateFromDocumentParams,
    DeleteCommentParams,
    DeleteDocumentParams,
    GetCollectionParams,
    GetDocumentParams,
    ListCollectionsParams,
    ListDocumentsParams,
    ListUsersParams,
    MoveDocumentParams,
    SearchDocumentsParams,
    ToolParams,
    UpdateCollectionParams,
    UpdateCommentParams,
    UpdateDocumentParams,
)
from .results import CollectionListResult, DocumentListResult, Pagination, UserListResult
from .rpc import (
    REQUEST_TYPES,
    CallToolParams,
    CallToolRequest,
    InitializeRequest,
    JSONRPCRequest,
    ListToolsRequest,
    MCPRequest,
)

__all__ = [
    # Enums
    "CollectionPermission",
    "DateFilter",
    "SortDirection",
    "StatusFilter",
    "UserFilter",
    "UserRole",
    # JSON-RPC
    "JSONRPCRequest",
    "InitializeRequest",
    "ListToolsRequest",
    "CallToolRequest",
    "CallToolParams",
    "MCPRequest",
    "REQUEST_TYPES",
    # Tool params
    "ToolParams",
    "GetDocumentParams",
    "ListDocumentsParams",
    "SearchDocumentsParams",
    "AskDocumentsParams",
    "CreateDocumentParams",
    "UpdateDocumentParams",
    "MoveDocumentParams",
    "ArchiveDocumentParams",
    "DeleteDocumentParams",
    "CreateTemplateFromDocumentParams",
    "ListCollectionsParams",
    "GetCollectionParams",
    "CreateCollectionParams",
    "UpdateCollectionParams",
    "CreateCommentParams",
    "UpdateCommentParams",
    "DeleteCommentParams",
    "ListUsersParams",
    # Results
    "Pagination",
    "DocumentListResult",
    "CollectionListResult",
    "UserListResult",
]
