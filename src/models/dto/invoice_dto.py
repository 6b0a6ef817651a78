"""
Data Transfer Objects for Invoice API.
Defines request and response schemas for API endpoints.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from src.models.invoice_model import InvoiceStatus


class CamelModel(BaseModel):
    """Base schema that serializes field names in camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class InvoiceResponse(CamelModel):
    """Response schema for a single invoice."""
    id: str
    file_name: str
    file_size: int
    client_name: str
    amount: int = Field(..., description="Amount in cents")
    upload_date: datetime
    status: InvoiceStatus
    file_path: str
    processing_start_time: Optional[datetime] = None
    processing_end_time: Optional[datetime] = None


class InvoiceListResponse(CamelModel):
    """Response schema for a page of invoices."""
    data: list[InvoiceResponse]
    total: int = Field(..., description="Number of invoices matching the filters")
    page: int
    limit: int


class UploadResponse(CamelModel):
    """Response schema for a successful invoice upload."""
    success: bool
    invoices: list[InvoiceResponse]
    message: str
