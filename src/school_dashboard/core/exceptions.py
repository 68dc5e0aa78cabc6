class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a person or calendar event does not exist in the roster."""


class WizardTransitionError(DomainError):
    """Raised when the enrollment wizard is asked to skip or leave a terminal step."""


class FetchCancelledError(DomainError):
    """Raised by an attendance fetch that was superseded by a newer one."""
