class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when there is no authenticated tenant for the request."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a tenant-scoped record does not exist."""


class RetrievalError(DomainError):
    """Raised when the store is unreachable, rejects a query or returns malformed data.

    Callers must surface it; it never means "zero records".
    """


class MalformedRecordError(DomainError):
    """Raised when a record lacks a field required for a time-windowed count."""


class RegistrationError(DomainError):
    """Raised when the sign-up webhook rejects or cannot receive a submission."""
