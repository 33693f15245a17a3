"""Permission types granted per role within a permission set."""

from enum import StrEnum


class PermissionType(StrEnum):
    """Actions a permission row can grant on a forum."""

    READ = "read"
    START = "start"
    REPLY = "reply"
    EDIT = "edit"
    DELETE = "delete"
    MODERATE = "moderate"
