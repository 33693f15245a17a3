"""Domain exceptions."""


class ForumGateError(Exception):
    """Base exception for forumgate."""

    pass


class PermissionDenied(ForumGateError):
    """Member does not have permission for the requested action."""

    pass


class NotFound(ForumGateError):
    """Requested resource was not found."""

    def __init__(self, resource: str, identifier: object | None = None) -> None:
        self.resource = resource
        self.identifier = identifier
        if identifier is None:
            super().__init__(f"{resource} not found")
        else:
            super().__init__(f"{resource} {identifier} not found")


class ValidationError(ForumGateError):
    """Validation failed for input data."""

    pass
