"""
Domain model for Invoice entity.
Storage-agnostic representation of an uploaded invoice and its processing state.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from src.core.exceptions import InvalidStatusTransitionException


class InvoiceStatus(str, Enum):
    """Processing status of an invoice."""
    PENDING = "Pending"
    PROCESSING = "Processing"
    PROCESSED = "Processed"
    FAILED = "Failed"
    
    @property
    def is_terminal(self) -> bool:
        return self in (InvoiceStatus.PROCESSED, InvoiceStatus.FAILED)


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Invoice:
    """Domain model representing an uploaded invoice file."""
    
    def __init__(
        self,
        id: str,
        file_name: str,
        file_size: int,
        client_name: str,
        amount: int,
        file_path: str,
        upload_date: Optional[datetime] = None,
        status: InvoiceStatus = InvoiceStatus.PENDING,
        processing_start_time: Optional[datetime] = None,
        processing_end_time: Optional[datetime] = None
    ):
        self.id = id
        self.file_name = file_name
        self.file_size = file_size
        self.client_name = client_name
        self.amount = amount
        self.file_path = file_path
        self.upload_date = upload_date or utcnow()
        self.status = InvoiceStatus(status)
        self.processing_start_time = processing_start_time
        self.processing_end_time = processing_end_time
    
    def start_processing(self, now: datetime) -> None:
        """
        Move a Pending invoice to Processing.
        
        Raises:
            InvalidStatusTransitionException: If the invoice is not Pending
        """
        if self.status is not InvoiceStatus.PENDING:
            raise InvalidStatusTransitionException(
                f"Invoice {self.id} cannot start processing from status {self.status.value}"
            )
        self.processing_start_time = now
        self.status = InvoiceStatus.PROCESSING
    
    def finish_processing(self, succeeded: bool, now: datetime) -> None:
        """
        Move a Processing invoice to Processed or Failed.
        
        Raises:
            InvalidStatusTransitionException: If the invoice is not Processing
        """
        if self.status is not InvoiceStatus.PROCESSING:
            raise InvalidStatusTransitionException(
                f"Invoice {self.id} cannot finish processing from status {self.status.value}"
            )
        self.processing_end_time = now
        self.status = InvoiceStatus.PROCESSED if succeeded else InvoiceStatus.FAILED
    
    def __repr__(self):
        return f"Invoice(id={self.id}, file_name={self.file_name}, status={self.status.value})"
