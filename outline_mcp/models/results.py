"""Result models for Outline list tools (published as outputSchema)."""

from typing import Any

from pydantic import BaseModel, Field


class Pagination(BaseModel):
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=25, ge=0)
    nextPath: str | None = Field(default=None, description="Path of the next page, if any")


class DocumentListResult(BaseModel):
    """Result of listDocuments tool."""

    documents: list[dict[str, Any]] = Field(default_factory=list)
    pagination: Pagination | None = None


class CollectionListResult(BaseModel):
    """Result of listCollections tool."""

    collections: list[dict[str, Any]] = Field(default_factory=list)
    pagination: Pagination | None = None


class UserListResult(BaseModel):
    """Result of listUsers tool."""

    users: list[dict[str, Any]] = Field(default_factory=list)
    pagination: Pagination | None = None
