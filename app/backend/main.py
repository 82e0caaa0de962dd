"""
FastAPI application for the PDF text extraction service.

Provides endpoints for:
- Extracting the text of a remotely hosted PDF
- Health checks
"""

import logging

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import get_settings
from .errors import ExtractionServiceError
from .models import ErrorResponse, HealthResponse
from .routers import extract
from .services.fetch_service import get_fetch_service
from .services.pdf_service import get_pdf_service

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info("Starting PDF Text Extraction Service...")
    # Initialize services on startup
    get_fetch_service()
    get_pdf_service()
    logger.info("Services initialized successfully")
    yield
    logger.info("Shutting down PDF Text Extraction Service...")


# Create FastAPI application
app = FastAPI(
    title="PDF Text Extraction API",
    description="Fetches a remote PDF and returns its embedded text as JSON",
    version=__version__,
    lifespan=lifespan,
)

if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )


# =============================================================================
# Health Endpoints
# =============================================================================


@app.get("/", response_model=HealthResponse)
async def root() -> HealthResponse:
    """Root endpoint - health check."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(extract.router)


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(ExtractionServiceError)
async def extraction_error_handler(request: Request, exc: ExtractionServiceError):
    """Render extraction errors as the error envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
    )
