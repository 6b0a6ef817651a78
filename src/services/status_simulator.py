"""
Status Simulator.
Advances invoices Pending -> Processing -> Processed/Failed after randomized delays.
"""
import logging
from datetime import datetime
from typing import Callable, Dict
from src.core.config import Settings
from src.core import config
from src.models.invoice_model import utcnow
from src.repositories.invoice_repository import InvoiceRepository
from src.services.random_source import RandomSource
from src.services.scheduler import Scheduler, ScheduledTask

logger = logging.getLogger(__name__)


class StatusSimulator:
    """Schedules the two one-shot transitions for each uploaded invoice."""
    
    def __init__(
        self,
        repository: InvoiceRepository,
        scheduler: Scheduler,
        random_source: RandomSource = None,
        clock: Callable[[], datetime] = utcnow,
        settings: Settings = None
    ):
        self.repository = repository
        self.scheduler = scheduler
        self.random_source = random_source or RandomSource()
        self.clock = clock
        self.settings = settings or config.settings
        self._tasks: Dict[str, ScheduledTask] = {}
    
    def schedule(self, invoice_id: str) -> ScheduledTask:
        """Schedule the Start transition for a newly created invoice."""
        delay = self.settings.processing_start_delay_ms / 1000
        return self._track(invoice_id, self.scheduler.call_later(delay, lambda: self.start(invoice_id)))
    
    def start(self, invoice_id: str) -> None:
        """
        Move the invoice to Processing and schedule Finish.
        
        An invoice that is no longer in the store is ignored.
        """
        invoice = self.repository.get(invoice_id)
        if invoice is None:
            self._tasks.pop(invoice_id, None)
            return
        
        invoice.start_processing(self.clock())
        self.repository.put(invoice)
        
        delay_ms = self.random_source.processing_delay_ms(
            self.settings.processing_min_ms,
            self.settings.processing_max_ms
        )
        logger.info("Invoice %s processing started, finishing in %dms", invoice_id, delay_ms)
        self._track(invoice_id, self.scheduler.call_later(delay_ms / 1000, lambda: self.finish(invoice_id)))
    
    def finish(self, invoice_id: str) -> None:
        """
        Move the invoice to Processed or Failed.
        
        An invoice that is no longer in the store is ignored.
        """
        self._tasks.pop(invoice_id, None)
        invoice = self.repository.get(invoice_id)
        if invoice is None:
            return
        
        succeeded = self.random_source.processing_succeeded(self.settings.processing_success_rate)
        invoice.finish_processing(succeeded, self.clock())
        self.repository.put(invoice)
        logger.info("Invoice %s processing completed: %s", invoice_id, invoice.status.value)
    
    def pending_tasks(self) -> Dict[str, ScheduledTask]:
        """Outstanding transition handles keyed by invoice id."""
        return dict(self._tasks)
    
    def cancel(self, invoice_id: str) -> bool:
        """Cancel the outstanding transition for one invoice, if any."""
        task = self._tasks.pop(invoice_id, None)
        if task is None:
            return False
        task.cancel()
        return True
    
    def shutdown(self) -> None:
        """Cancel every outstanding transition."""
        for invoice_id in list(self._tasks):
            self.cancel(invoice_id)
    
    def _track(self, invoice_id: str, task: ScheduledTask) -> ScheduledTask:
        self._tasks[invoice_id] = task
        return task
