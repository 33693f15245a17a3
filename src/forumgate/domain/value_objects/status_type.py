"""Lifecycle status shared by forums, posts and members."""

from enum import StrEnum


class StatusType(StrEnum):
    """Status of a forum entity."""

    PUBLISHED = "published"
    DRAFT = "draft"
    DELETED = "deleted"
    PENDING = "pending"
    SUSPENDED = "suspended"
    ACTIVE = "active"
