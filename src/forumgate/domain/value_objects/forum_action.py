"""Actions a caller can request on a forum."""

from enum import StrEnum


class ForumAction(StrEnum):
    """Controller-level actions checked by the access policy."""

    READ = "read"
    START = "start"
    REPLY = "reply"
    EDIT = "edit"
    DELETE = "delete"
    PIN = "pin"
    LOCK = "lock"
