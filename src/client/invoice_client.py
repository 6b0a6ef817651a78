"""
HTTP client for the Invoice Intake API.
Wraps the list, lookup and upload endpoints and polls invoices until processing settles.
"""
import logging
import time
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence
import requests

logger = logging.getLogger(__name__)

TERMINAL_STATUSES = {"Processed", "Failed"}
ITEM_POLL_INTERVAL = 2.0
ITEM_POLL_MAX_ATTEMPTS = 60
ITEM_POLL_INITIAL_DELAY = 1.0
LIST_POLL_INTERVAL = 3.0


class InvoiceClientError(Exception):
    """Raised when the API cannot be reached or answers with an error."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


def is_terminal(invoice: dict) -> bool:
    return invoice.get("status") in TERMINAL_STATUSES


class InvoiceClient:
    """Client for the /api/invoices endpoints."""
    
    def __init__(
        self,
        base_url: str,
        session: requests.Session = None,
        timeout: float = 10.0,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.sleep = sleep
    
    def list_invoices(self, **params) -> dict:
        """
        Fetch one page of invoices.
        
        Keyword arguments map to query parameters (page, limit, sortBy,
        sortOrder, status, search); None and empty values are not sent.
        """
        query = {key: str(value) for key, value in params.items() if value not in (None, "")}
        return self._request("GET", "/invoices", "Failed to fetch invoices", params=query)
    
    def get_invoice(self, invoice_id: str) -> dict:
        return self._request("GET", f"/invoices/{invoice_id}", "Failed to fetch invoice")
    
    def upload_invoices(self, paths: Sequence[str]) -> dict:
        """Upload PDF files from disk under the 'invoices' form field."""
        handles = [open(path, "rb") for path in paths]
        try:
            files = [
                ("invoices", (Path(path).name, handle, "application/pdf"))
                for path, handle in zip(paths, handles)
            ]
            return self._request("POST", "/invoices/upload", "Failed to upload invoices", files=files)
        finally:
            for handle in handles:
                handle.close()
    
    def wait_for_invoice(
        self,
        invoice_id: str,
        interval: float = ITEM_POLL_INTERVAL,
        max_attempts: int = ITEM_POLL_MAX_ATTEMPTS,
        initial_delay: float = ITEM_POLL_INITIAL_DELAY
    ) -> dict:
        """
        Poll one invoice until it reaches a terminal status.
        
        Waits initial_delay before the first poll. Gives up after
        max_attempts polls and returns the last state seen.
        """
        if initial_delay > 0:
            self.sleep(initial_delay)
        invoice = self.get_invoice(invoice_id)
        attempts = 1
        while not is_terminal(invoice) and attempts < max_attempts:
            self.sleep(interval)
            invoice = self.get_invoice(invoice_id)
            attempts += 1
        
        if not is_terminal(invoice):
            logger.warning("Invoice %s still %s after %d attempts", invoice_id, invoice.get("status"), attempts)
        return invoice
    
    def watch_list(self, interval: float = LIST_POLL_INTERVAL, **params) -> Iterator[dict]:
        """
        Yield list pages, re-fetching while any visible invoice is still in flight.
        
        The final page yielded has only terminal invoices.
        """
        while True:
            page = self.list_invoices(**params)
            yield page
            if all(is_terminal(invoice) for invoice in page.get("data", [])):
                return
            self.sleep(interval)
    
    def _request(self, method: str, path: str, failure_message: str, **kwargs) -> dict:
        try:
            response = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise InvoiceClientError(f"{failure_message}: {str(e)}") from e
        
        if not response.ok:
            raise InvoiceClientError(self._error_message(response, failure_message), response.status_code)
        return response.json()
    
    @staticmethod
    def _error_message(response: requests.Response, default: str) -> str:
        try:
            return response.json().get("error") or default
        except ValueError:
            return default


def wait_for_uploads(client: InvoiceClient, upload_response: dict, **kwargs) -> List[dict]:
    """Poll every invoice from an upload response until each settles."""
    return [client.wait_for_invoice(invoice["id"], **kwargs) for invoice in upload_response.get("invoices", [])]
