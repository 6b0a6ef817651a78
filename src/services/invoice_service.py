"""
Invoice Service for business logic.
Orchestrates invoice uploads, lookups and list queries between API and repositories.
"""
import logging
import uuid
from datetime import datetime
from typing import Callable, List
from src.core.exceptions import InvoiceNotFoundException
from src.models.invoice_model import Invoice, InvoiceStatus, utcnow
from src.models.dto.invoice_dto import InvoiceResponse, InvoiceListResponse, UploadResponse
from src.repositories.file_storage import FileStorage
from src.repositories.invoice_repository import InvoiceRepository
from src.services.file_service import FileService, UploadedFile
from src.services.query_service import InvoiceQuery, QueryService
from src.services.random_source import RandomSource
from src.services.status_simulator import StatusSimulator

logger = logging.getLogger(__name__)


class InvoiceService:
    """Service for invoice-related business operations."""
    
    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        file_storage: FileStorage,
        status_simulator: StatusSimulator,
        random_source: RandomSource = None,
        file_service: FileService = None,
        query_service: QueryService = None,
        clock: Callable[[], datetime] = utcnow
    ):
        self.invoice_repository = invoice_repository
        self.file_storage = file_storage
        self.status_simulator = status_simulator
        self.random_source = random_source or RandomSource()
        self.file_service = file_service or FileService()
        self.query_service = query_service or QueryService()
        self.clock = clock
    
    def upload_invoices(self, files: List[UploadedFile]) -> UploadResponse:
        """
        Handle invoice upload workflow.
        
        Every file is validated before any is stored, so a rejected batch
        leaves no records behind.
        
        Args:
            files: Uploaded PDF files
            
        Returns:
            UploadResponse with the created invoices
            
        Raises:
            ValidationException: If no files were sent or any file is invalid
            StorageException: If storing a file fails
        """
        self.file_service.validate_uploads(files)
        
        # All files are stored before any record is created
        file_paths = [self.file_storage.save(file.content, file.filename) for file in files]
        created = [self._create_invoice(file, file_path) for file, file_path in zip(files, file_paths)]
        
        logger.info("Uploaded %d invoice(s)", len(created))
        return UploadResponse(
            success=True,
            invoices=[InvoiceResponse.model_validate(invoice) for invoice in created],
            message=f"Successfully uploaded {len(created)} invoice(s)"
        )
    
    def get_invoice(self, invoice_id: str) -> InvoiceResponse:
        """
        Retrieve a single invoice.
        
        Raises:
            InvoiceNotFoundException: If invoice_id is unknown
        """
        invoice = self.invoice_repository.get(invoice_id)
        
        if invoice is None:
            raise InvoiceNotFoundException("Invoice not found")
        
        return InvoiceResponse.model_validate(invoice)
    
    def list_invoices(self, query: InvoiceQuery) -> InvoiceListResponse:
        """Return one filtered, sorted page of invoices."""
        page = self.query_service.query(self.invoice_repository.list(), query)
        
        return InvoiceListResponse(
            data=[InvoiceResponse.model_validate(invoice) for invoice in page.data],
            total=page.total,
            page=page.page,
            limit=page.limit
        )
    
    def _create_invoice(self, file: UploadedFile, file_path: str) -> Invoice:
        invoice = Invoice(
            id=str(uuid.uuid4()),
            file_name=file.filename,
            file_size=file.size,
            client_name=self.random_source.client_name(),
            amount=self.random_source.amount_cents(),
            file_path=file_path,
            upload_date=self.clock(),
            status=InvoiceStatus.PENDING
        )
        self.invoice_repository.put(invoice)
        self.status_simulator.schedule(invoice.id)
        return invoice
