"""
Dependency injection container for FastAPI.
Provides singleton-like behavior for services and repositories.
"""
from functools import lru_cache
from src.core import config
from src.repositories.file_storage import FileStorage
from src.repositories.invoice_repository import InvoiceRepository
from src.repositories.local_file_repository import LocalFileRepository
from src.repositories.memory_invoice_repository import InMemoryInvoiceRepository
from src.repositories.s3_repository import S3Repository
from src.services.file_service import FileService
from src.services.invoice_service import InvoiceService
from src.services.query_service import QueryService
from src.services.random_source import RandomSource
from src.services.scheduler import AsyncioScheduler, Scheduler
from src.services.status_simulator import StatusSimulator


@lru_cache()
def get_invoice_repository() -> InvoiceRepository:
    """Get InvoiceRepository singleton instance."""
    return InMemoryInvoiceRepository()


@lru_cache()
def get_file_storage() -> FileStorage:
    """Get FileStorage singleton for the configured backend."""
    if config.settings.storage_backend == "s3":
        return S3Repository()
    return LocalFileRepository()


@lru_cache()
def get_scheduler() -> Scheduler:
    """Get Scheduler singleton instance."""
    return AsyncioScheduler()


@lru_cache()
def get_random_source() -> RandomSource:
    """Get RandomSource singleton, seeded from settings when configured."""
    return RandomSource(seed=config.settings.random_seed)


@lru_cache()
def get_status_simulator() -> StatusSimulator:
    """Get StatusSimulator singleton instance with injected dependencies."""
    return StatusSimulator(
        repository=get_invoice_repository(),
        scheduler=get_scheduler(),
        random_source=get_random_source()
    )


@lru_cache()
def get_file_service() -> FileService:
    """Get FileService singleton instance."""
    return FileService()


@lru_cache()
def get_query_service() -> QueryService:
    """Get QueryService singleton instance."""
    return QueryService()


@lru_cache()
def get_invoice_service() -> InvoiceService:
    """Get InvoiceService singleton instance with injected dependencies."""
    return InvoiceService(
        invoice_repository=get_invoice_repository(),
        file_storage=get_file_storage(),
        status_simulator=get_status_simulator(),
        random_source=get_random_source(),
        file_service=get_file_service(),
        query_service=get_query_service()
    )


def clear_caches() -> None:
    """Drop all cached singletons so the next request rebuilds them."""
    for factory in (
        get_invoice_repository,
        get_file_storage,
        get_scheduler,
        get_random_source,
        get_status_simulator,
        get_file_service,
        get_query_service,
        get_invoice_service,
    ):
        factory.cache_clear()
