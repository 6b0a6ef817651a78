"""
Query Service.
Applies status filter, text search, sort and pagination to invoice collections.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional
from src.core import config
from src.models.invoice_model import Invoice

STATUS_ALL = "all"
SORT_ASC = "asc"
SORT_DESC = "desc"
DEFAULT_SORT_FIELD = "uploadDate"

SORT_KEYS: Dict[str, Callable[[Invoice], Any]] = {
    "uploadDate": lambda invoice: invoice.upload_date,
    "amount": lambda invoice: invoice.amount,
    "clientName": lambda invoice: invoice.client_name,
}


def _positive_int(value: Optional[str], default: int) -> int:
    """Parse a query parameter, falling back to default when missing, non-numeric or < 1."""
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= 1 else default


@dataclass
class InvoiceQuery:
    """Parameters of one list request."""
    page: int = 1
    limit: int = 10
    sort_by: str = DEFAULT_SORT_FIELD
    sort_order: str = SORT_DESC
    status: Optional[str] = None
    search: Optional[str] = None
    
    @classmethod
    def from_params(
        cls,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None
    ) -> "InvoiceQuery":
        """Build a query from raw string parameters as received over HTTP."""
        settings = config.settings
        return cls(
            page=_positive_int(page, 1),
            limit=min(_positive_int(limit, settings.pagination_default_limit), settings.pagination_max_limit),
            sort_by=sort_by or DEFAULT_SORT_FIELD,
            sort_order=sort_order or SORT_DESC,
            status=status,
            search=search
        )


@dataclass
class InvoicePage:
    """One page of query results."""
    data: List[Invoice]
    total: int
    page: int
    limit: int


class QueryService:
    """Filter -> search -> sort -> paginate, always in that order."""
    
    def query(self, invoices: Iterable[Invoice], query: InvoiceQuery) -> InvoicePage:
        results = self.filter_by_status(invoices, query.status)
        results = self.filter_by_search(results, query.search)
        results = self.sort(results, query.sort_by, query.sort_order)
        
        return InvoicePage(
            data=self.paginate(results, query.page, query.limit),
            total=len(results),
            page=query.page,
            limit=query.limit
        )
    
    @staticmethod
    def filter_by_status(invoices: Iterable[Invoice], status: Optional[str]) -> List[Invoice]:
        if not status or status == STATUS_ALL:
            return list(invoices)
        return [invoice for invoice in invoices if invoice.status.value == status]
    
    @staticmethod
    def filter_by_search(invoices: Iterable[Invoice], search: Optional[str]) -> List[Invoice]:
        if not search:
            return list(invoices)
        needle = search.lower()
        return [
            invoice for invoice in invoices
            if needle in invoice.file_name.lower() or needle in invoice.client_name.lower()
        ]
    
    @staticmethod
    def sort(invoices: Iterable[Invoice], sort_by: str, sort_order: str) -> List[Invoice]:
        """
        Stable sort on a known field.
        
        Equal keys keep their input order in both directions. An unknown
        field leaves the input order untouched; any order other than
        "asc" sorts descending.
        """
        key = SORT_KEYS.get(sort_by)
        if key is None:
            return list(invoices)
        return sorted(invoices, key=key, reverse=sort_order != SORT_ASC)
    
    @staticmethod
    def paginate(invoices: List[Invoice], page: int, limit: int) -> List[Invoice]:
        start = (page - 1) * limit
        return invoices[start:start + limit]
