"""Request models (Pydantic *Params classes) for the Outline tools.

Field names follow the Outline API so validated params can be sent as-is with
``model_dump(exclude_none=True)``.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import (
    CollectionPermission,
    DateFilter,
    SortDirection,
    StatusFilter,
    UserFilter,
    UserRole,
)


class ToolParams(BaseModel):
    """Base for tool inputs. Unknown arguments are rejected."""

    model_config = ConfigDict(extra="forbid", use_enum_values=True)


class PaginationParams(ToolParams):
    offset: int = Field(default=0, ge=0, description="Number of records to skip")
    limit: int = Field(default=25, ge=1, le=100, description="Maximum records to return")


# ============ DOCUMENT PARAMS ============


class GetDocumentParams(ToolParams):
    """Parameters for getDocument tool."""

    id: str = Field(..., min_length=1, description="Document ID or URL slug")


class ListDocumentsParams(PaginationParams):
    """Parameters for listDocuments tool."""

    collectionId: str | None = Field(default=None, description="Only documents in this collection")
    userId: str | None = Field(default=None, description="Only documents created by this user")
    parentDocumentId: str | None = Field(default=None, description="Only children of this document")
    backlinkDocumentId: str | None = Field(
        default=None, description="Only documents linking to this document"
    )
    template: bool | None = Field(default=None, description="Only templates (true) or non-templates")
    sort: str = Field(default="updatedAt", description="Field to sort by")
    direction: SortDirection = Field(default=SortDirection.DESC)


class SearchDocumentsParams(PaginationParams):
    """Parameters for searchDocuments tool."""

    query: str = Field(..., min_length=1, description="Search terms")
    collectionId: str | None = Field(default=None, description="Restrict to a collection")
    userId: str | None = Field(default=None, description="Restrict to documents by a user")
    dateFilter: DateFilter | None = Field(default=None, description="Only recently updated documents")
    statusFilter: list[StatusFilter] | None = Field(default=None, description="Document states to include")


class AskDocumentsParams(ToolParams):
    """Parameters for askDocuments tool (natural-language question answering)."""

    query: str = Field(..., min_length=1, description="Question to answer from the knowledge base")
    collectionId: str | None = Field(default=None, description="Restrict to a collection")
    documentId: str | None = Field(default=None, description="Restrict to a document")
    userId: str | None = Field(default=None, description="Restrict to documents by a user")
    dateFilter: DateFilter | None = Field(default=None)
    statusFilter: list[StatusFilter] | None = Field(default=None)


class CreateDocumentParams(ToolParams):
    """Parameters for createDocument tool."""

    title: str = Field(..., min_length=1, description="Document title")
    collectionId: str = Field(..., min_length=1, description="Collection to create the document in")
    text: str = Field(default="", description="Document body in Markdown")
    parentDocumentId: str | None = Field(default=None, description="Nest under this document")
    templateId: str | None = Field(default=None, description="Create from this template")
    template: bool = Field(default=False, description="Create the document as a template")
    publish: bool = Field(default=True, description="Publish immediately instead of saving a draft")


class UpdateDocumentParams(ToolParams):
    """Parameters for updateDocument tool."""

    id: str = Field(..., min_length=1, description="Document ID")
    title: str | None = Field(default=None, description="New title")
    text: str | None = Field(default=None, description="New body in Markdown")
    append: bool = Field(default=False, description="Append text instead of replacing the body")
    publish: bool | None = Field(default=None, description="Publish a draft")
    done: bool | None = Field(default=None, description="Mark the edit session as finished")


class MoveDocumentParams(ToolParams):
    """Parameters for moveDocument tool."""

    id: str = Field(..., min_length=1, description="Document ID")
    collectionId: str | None = Field(default=None, description="Target collection")
    parentDocumentId: str | None = Field(default=None, description="Target parent document")

    @model_validator(mode="after")
    def require_target(self) -> "MoveDocumentParams":
        if self.collectionId is None and self.parentDocumentId is None:
            raise ValueError("provide collectionId or parentDocumentId")
        return self


class ArchiveDocumentParams(ToolParams):
    id: str = Field(..., min_length=1, description="Document ID")


class DeleteDocumentParams(ToolParams):
    id: str = Field(..., min_length=1, description="Document ID")
    permanent: bool = Field(default=False, description="Delete permanently instead of moving to trash")


class CreateTemplateFromDocumentParams(ToolParams):
    id: str = Field(..., min_length=1, description="Document ID to turn into a template")


# ============ COLLECTION PARAMS ============


class ListCollectionsParams(PaginationParams):
    """Parameters for listCollections tool."""


class GetCollectionParams(ToolParams):
    id: str = Field(..., min_length=1, description="Collection ID")


class CreateCollectionParams(ToolParams):
    """Parameters for createCollection tool."""

    name: str = Field(..., min_length=1, description="Collection name")
    description: str | None = Field(default=None, description="Collection description in Markdown")
    permission: CollectionPermission | None = Field(
        default=None, description="Default access for workspace members"
    )
    color: str | None = Field(default=None, pattern=r"^#[0-9a-fA-F]{6}$", description="Hex color")
    private: bool | None = Field(default=None, description="Hide the collection from non-members")


class UpdateCollectionParams(ToolParams):
    """Parameters for updateCollection tool."""

    id: str = Field(..., min_length=1, description="Collection ID")
    name: str | None = Field(default=None, description="New name")
    description: str | None = Field(default=None, description="New description in Markdown")
    permission: CollectionPermission | None = Field(default=None)
    color: str | None = Field(default=None, pattern=r"^#[0-9a-fA-F]{6}$")


# ============ COMMENT PARAMS ============


class CreateCommentParams(ToolParams):
    """Parameters for createComment tool."""

    documentId: str = Field(..., min_length=1, description="Document to comment on")
    text: str = Field(..., min_length=1, description="Comment body in Markdown")
    parentCommentId: str | None = Field(default=None, description="Reply to this comment")


class UpdateCommentParams(ToolParams):
    id: str = Field(..., min_length=1, description="Comment ID")
    text: str = Field(..., min_length=1, description="New comment body in Markdown")


class DeleteCommentParams(ToolParams):
    id: str = Field(..., min_length=1, description="Comment ID")


# ============ USER PARAMS ============


class ListUsersParams(PaginationParams):
    """Parameters for listUsers tool."""

    query: str | None = Field(default=None, description="Filter by name or email")
    filter: UserFilter | None = Field(default=None, description="Filter by account state")
    role: UserRole | None = Field(default=None, description="Filter by role")
    sort: str = Field(default="createdAt", description="Field to sort by")
    direction: SortDirection = Field(default=SortDirection.DESC)
