"""Kinds of recorded administrative changes."""

from enum import StrEnum


class EventType(StrEnum):
    """What happened to the event target."""

    CREATED = "Created"
    UPDATED = "Updated"
    DELETED = "Deleted"
