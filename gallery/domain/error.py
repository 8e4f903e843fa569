"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when an operation requires a signed-in principal."""

    def __init__(self, action: str = "perform this action"):
        super().__init__(f"Authentication required to {action}")


class ForbiddenError(DomainError):
    """Raised when a non-administrator attempts an administrator-only action."""

    def __init__(self, action: str, user_id: str):
        self.action = action
        self.user_id = user_id
        super().__init__(f"User {user_id} is not allowed to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UploadFailedError(DomainError):
    """Raised when the image host rejects an upload or times out."""

    pass


class StoreUnavailableError(DomainError):
    """Raised when the backing store fails on a read or write."""

    pass
