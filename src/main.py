"""
Main FastAPI application entry point.
Configures and initializes the Invoice Intake API.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum
from src.core.config import settings
from src.core.dependencies import get_status_simulator
from src.core.exception_handler import register_exception_handlers
from src.core.logging_config import configure_logging
from src.api.routes import health_routes, invoice_routes

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s %s (%s)", settings.api_title, settings.api_version, settings.environment)
    yield
    # Pending transitions cannot outlive the event loop they were scheduled on
    get_status_simulator().shutdown()


# Create FastAPI application
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="Upload invoice PDFs and track their simulated processing status",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"]
)

# Register exception handlers
register_exception_handlers(app)

# Register routes
app.include_router(health_routes.router)
app.include_router(invoice_routes.router)

# Middleware to log requests
@app.middleware("http")
async def log_request(request: Request, call_next):
    response = await call_next(request)
    logger.info("%s %s -> %d", request.method, request.url.path, response.status_code)
    return response

# Lambda handler for AWS
handler = Mangum(app, lifespan="off")


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=3001)
