"""Domain exceptions."""


class EoriAuthzError(Exception):
    """Base exception for the authorization service."""

    pass


class PermissionDenied(EoriAuthzError):
    """Actor is not allowed to perform the requested action."""

    def __init__(self, message: str, reason: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason


class NotFound(EoriAuthzError):
    """Requested entity was not found."""

    def __init__(self, entity: str, key: str) -> None:
        super().__init__(f"{entity} not found: {key}")
        self.entity = entity
        self.key = key


class ValidationError(EoriAuthzError):
    """Validation failed for input data."""

    pass


class UnknownPermission(EoriAuthzError):
    """Action or resource type is not in the permission catalog."""

    pass


class CallerError(EoriAuthzError):
    """Caller asked for a decision without a validated principal."""

    pass


class StoreUnavailable(EoriAuthzError):
    """Registry lookup failed; the decision could not be determined."""

    pass
