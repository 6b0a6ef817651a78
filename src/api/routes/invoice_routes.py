"""
Invoice API routes.
Handles HTTP endpoints for invoice uploads, lookups and listing.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from starlette.datastructures import UploadFile
from src.services.file_service import UploadedFile
from src.services.invoice_service import InvoiceService
from src.services.query_service import InvoiceQuery
from src.core.dependencies import get_invoice_service
from src.models.dto.invoice_dto import InvoiceListResponse, InvoiceResponse, UploadResponse

router = APIRouter(prefix="/api")


@router.get("/invoices", tags=["Invoices"], response_model=InvoiceListResponse)
async def list_invoices(
    page: Optional[str] = Query(default=None, description="Page number, starting at 1"),
    limit: Optional[str] = Query(default=None, description="Items per page"),
    sort_by: Optional[str] = Query(default=None, alias="sortBy", description="uploadDate, amount or clientName"),
    sort_order: Optional[str] = Query(default=None, alias="sortOrder", description="asc or desc"),
    status: Optional[str] = Query(default=None, description="Invoice status, or 'all'"),
    search: Optional[str] = Query(default=None, description="Matches file name or client name"),
    invoice_service: InvoiceService = Depends(get_invoice_service)
):
    """
    List invoices with filtering, sorting and pagination.
    
    Parameters are taken as strings; a missing or non-numeric page or
    limit falls back to its default.
    """
    query = InvoiceQuery.from_params(
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
        status=status,
        search=search
    )
    return invoice_service.list_invoices(query)


@router.get("/invoices/{invoice_id}", tags=["Invoices"], response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: str,
    invoice_service: InvoiceService = Depends(get_invoice_service)
):
    """Get a single invoice by id."""
    return invoice_service.get_invoice(invoice_id)


@router.post("/invoices/upload", tags=["Invoices"], response_model=UploadResponse)
async def upload_invoices(
    request: Request,
    invoice_service: InvoiceService = Depends(get_invoice_service)
):
    """
    Upload one or more invoice PDFs.
    
    Files are sent as multipart parts named "invoices". Each file is
    stored and queued for simulated processing; non-file values under
    that name are ignored.
    """
    form = await request.form()
    uploads = [value for value in form.getlist("invoices") if isinstance(value, UploadFile)]
    files = [
        UploadedFile(
            filename=upload.filename,
            content_type=upload.content_type,
            content=await upload.read()
        )
        for upload in uploads
    ]
    return invoice_service.upload_invoices(files)
