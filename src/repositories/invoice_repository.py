"""
Abstract base class for invoice repositories.
Defines the contract for invoice record storage operations.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from src.models.invoice_model import Invoice


class InvoiceRepository(ABC):
    """Abstract repository interface for invoice records."""
    
    @abstractmethod
    def put(self, invoice: Invoice) -> None:
        """Insert or replace an invoice by id."""
        pass
    
    @abstractmethod
    def get(self, invoice_id: str) -> Optional[Invoice]:
        """Return the invoice with this id, or None if unknown."""
        pass
    
    @abstractmethod
    def list(self) -> List[Invoice]:
        """Return a snapshot of all invoices, in insertion order."""
        pass
    
    def count(self) -> int:
        """Number of stored invoices."""
        return len(self.list())
