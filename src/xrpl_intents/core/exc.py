"""
Core exception types for xrpl_intents.

These are dependency-free and may be imported by all modules.
"""

__all__ = [
    "LedgerIntentError",
    "ValidationError",
    "AmountDomainError",
    "NotFoundError",
]


class LedgerIntentError(Exception):
    """Base class for errors raised while compiling intents or processing routes."""
    pass


class ValidationError(LedgerIntentError):
    """Raised when caller input is rejected before any network access.

    Never retryable without changing the input.
    """
    pass


class AmountDomainError(ValidationError):
    """Raised when an amount value cannot be expressed on the wire."""
    pass


class NotFoundError(LedgerIntentError):
    """Raised when a completed route-discovery round trip yields no usable route.

    Attributes
    ----------
    accepted_currencies : list[str] | None
        Currencies the destination account accepts, when the failure is that
        the requested currency is not among them.
    """

    def __init__(self, message, *, accepted_currencies=None):
        super().__init__(message)
        self.accepted_currencies = accepted_currencies
