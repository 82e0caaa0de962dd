"""
Router for the text extraction endpoint.

Handles:
- Fetching a remote PDF by URL and returning its text
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from fastapi.concurrency import run_in_threadpool

from ..errors import ExtractionServiceError, MissingParameterError, describe_error
from ..models import ErrorResponse, ExtractTextRequest, ExtractTextResponse
from ..services.fetch_service import FileFetchService, get_fetch_service
from ..services.pdf_service import PDFService, get_pdf_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["extract"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _read_body(request: Request) -> Any:
    """
    Parse the request body according to its content type.

    Returns None for empty bodies and unsupported content types. A JSON
    body that fails to parse raises.
    """
    if not await request.body():
        return None

    content_type = request.headers.get("content-type", "").lower()
    if "json" in content_type:
        return await request.json()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    return None


async def get_file_url(request: Request, query_value: str | None) -> str | None:
    """Read fileURL from the query string, falling back to the request body."""
    if query_value:
        return query_value

    body = await _read_body(request)
    if not isinstance(body, dict):
        return None
    return ExtractTextRequest.model_validate(body).fileURL


@router.api_route(
    "/ocr-summarize",
    methods=["GET", "POST"],
    response_model=ExtractTextResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or unfetchable fileURL"},
        500: {"model": ErrorResponse, "description": "Unexpected failure"},
    },
    openapi_extra={
        "requestBody": {
            "required": False,
            "content": {
                "application/json": {"schema": ExtractTextRequest.model_json_schema()},
            },
        },
    },
)
async def extract_text(
    request: Request,
    file_url: str | None = Query(
        default=None,
        alias="fileURL",
        description="URL of the PDF (alternatively sent as fileURL in the body)",
    ),
    fetch_service: FileFetchService = Depends(get_fetch_service),
    pdf_service: PDFService = Depends(get_pdf_service),
) -> ExtractTextResponse:
    """
    Download a PDF and return its embedded text.

    The URL is read from the ``fileURL`` query parameter, or from the
    ``fileURL`` field of a JSON or form body. Scanned PDFs without a text
    layer yield an empty string.
    """
    try:
        url = await get_file_url(request, file_url)
        if not url:
            raise MissingParameterError()

        content = await fetch_service.fetch(url)
        # pypdf parsing is CPU-bound; keep it off the event loop
        result = await run_in_threadpool(pdf_service.extract_text, content)

        return ExtractTextResponse(text=result.text)

    except ExtractionServiceError:
        raise
    except Exception as e:
        logger.exception("Unexpected error extracting text")
        raise ExtractionServiceError(describe_error(e)) from e
