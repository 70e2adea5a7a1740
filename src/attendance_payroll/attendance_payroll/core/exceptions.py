class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class PayrollAlreadyRunError(DomainError):
    """Raised when payroll for a month exists and the caller did not force a re-run."""
