"""
Domain errors.

Business rejections (ValidationError, NotFoundError, RateUnavailableError)
are caused by the client. Infrastructure faults (StorageError, UpstreamError,
RateFormatError) are server-side.
"""


class TransactionError(Exception):
    """Base exception for the transactions bounded context."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TransactionError):
    """Raised when a request or identifier breaks a domain rule."""
    pass


class NotFoundError(TransactionError):
    """Raised when no transaction matches the identifier."""
    pass


class RateUnavailableError(TransactionError):
    """Raised when no quotation exists inside the lookback window."""
    pass


class RateFormatError(TransactionError):
    """Raised when the provider returns a rate that is not a number."""
    pass


class StorageError(TransactionError):
    """Raised when the ledger fails to read or write."""
    pass


class UpstreamError(TransactionError):
    """Raised when the exchange-rate provider cannot be reached or answers non-2xx."""
    pass
