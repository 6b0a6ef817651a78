"""
Custom exceptions for the Invoice Intake API.
Provides specific error types for different failure scenarios.
"""


class InvoiceIntakeException(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(InvoiceIntakeException):
    """Raised when an upload or query parameter fails validation."""
    pass


class InvoiceNotFoundException(InvoiceIntakeException):
    """Raised when an invoice id is not in the store."""
    pass


class StorageException(InvoiceIntakeException):
    """Raised when the file storage backend fails."""
    pass


class InvalidStatusTransitionException(InvoiceIntakeException):
    """Raised when an invoice is asked to move backwards or skip a status."""
    pass
