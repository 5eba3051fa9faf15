"""Enumeration types for Outline tool parameters."""

from enum import StrEnum


class SortDirection(StrEnum):
    ASC = "ASC"
    DESC = "DESC"


class DateFilter(StrEnum):
    """Recency window for search."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class StatusFilter(StrEnum):
    """Document states a search may include."""

    DRAFT = "draft"
    ARCHIVED = "archived"
    PUBLISHED = "published"


class CollectionPermission(StrEnum):
    READ = "read"
    READ_WRITE = "read_write"


class UserFilter(StrEnum):
    ALL = "all"
    INVITED = "invited"
    ACTIVE = "active"
    SUSPENDED = "suspended"


class UserRole(StrEnum):
    ADMIN = "admin"
    MEMBER = "member"
    VIEWER = "viewer"
    GUEST = "guest"
