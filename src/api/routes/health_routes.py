"""
Health check routes for monitoring.
"""
from fastapi import APIRouter, Depends
from src.core import config
from src.core.dependencies import get_invoice_repository
from src.repositories.invoice_repository import InvoiceRepository

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health")
async def health_check(invoice_repository: InvoiceRepository = Depends(get_invoice_repository)):
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": config.settings.api_title,
        "version": config.settings.api_version,
        "invoices": invoice_repository.count()
    }
