class DomainError(Exception):
    """Base for errors raised by the workboard services."""


class ValidationError(DomainError):
    """Bad input, or an action the submission rules do not allow."""


class AuthorizationError(DomainError):
    """The caller's role may not perform the action."""


class NotFoundError(DomainError):
    """Raised when a referenced assignment or submission does not exist."""
