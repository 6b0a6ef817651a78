"""
In-memory invoice repository.
Records live for the lifetime of the process only.
"""
import threading
from typing import Dict, List, Optional
from src.models.invoice_model import Invoice
from src.repositories.invoice_repository import InvoiceRepository


class InMemoryInvoiceRepository(InvoiceRepository):
    """Dictionary-backed repository keyed by invoice id."""
    
    def __init__(self):
        self._invoices: Dict[str, Invoice] = {}
        self._lock = threading.Lock()
    
    def put(self, invoice: Invoice) -> None:
        with self._lock:
            self._invoices[invoice.id] = invoice
    
    def get(self, invoice_id: str) -> Optional[Invoice]:
        with self._lock:
            return self._invoices.get(invoice_id)
    
    def list(self) -> List[Invoice]:
        with self._lock:
            return list(self._invoices.values())
    
    def count(self) -> int:
        with self._lock:
            return len(self._invoices)
