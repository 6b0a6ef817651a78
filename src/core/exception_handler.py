"""
Global exception handler for the Invoice Intake API.
Provides centralized error handling for all API exceptions.
"""
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from .exceptions import (
    InvoiceNotFoundException,
    ValidationException,
    StorageException,
    InvalidStatusTransitionException
)

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    
    @app.exception_handler(InvoiceNotFoundException)
    async def handle_not_found(request: Request, exc: InvoiceNotFoundException):
        return JSONResponse(
            status_code=404,
            content={"error": exc.message}
        )
    
    @app.exception_handler(ValidationException)
    async def handle_validation_error(request: Request, exc: ValidationException):
        logger.info("Rejected request to %s: %s", request.url.path, exc.message)
        return JSONResponse(
            status_code=400,
            content={"error": exc.message}
        )
    
    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        logger.info("Rejected request to %s: %s", request.url.path, message)
        return JSONResponse(
            status_code=400,
            content={"error": message}
        )
    
    @app.exception_handler(InvalidStatusTransitionException)
    async def handle_transition_error(request: Request, exc: InvalidStatusTransitionException):
        logger.warning("Invalid status transition: %s", exc.message)
        return JSONResponse(
            status_code=409,
            content={"error": exc.message}
        )
    
    @app.exception_handler(StorageException)
    async def handle_storage_error(request: Request, exc: StorageException):
        logger.error("Storage failure: %s", exc.message)
        return JSONResponse(
            status_code=500,
            content={"error": "File storage failed"}
        )
    
    @app.exception_handler(Exception)
    async def handle_generic_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"}
        )
