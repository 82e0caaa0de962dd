"""
Pydantic models for the PDF text extraction endpoint.

Defines the request body and the two JSON envelopes returned to callers:
the success envelope ``{"ok": true, "text": ...}`` and the error envelope
``{"ok": false, "error": ...}``.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class ExtractTextRequest(BaseModel):
    """
    Request body accepted by POST.

    Only ``fileURL`` is read; any other fields are ignored.
    """

    fileURL: str | None = Field(
        default=None,
        description="URL of the remotely hosted PDF to extract text from",
        examples=["https://example.com/report.pdf"],
    )

    @field_validator("fileURL", mode="before")
    @classmethod
    def coerce_file_url(cls, v: Any) -> str | None:
        """Treat falsy values as missing and stringify anything else."""
        if not v:
            return None
        return v if isinstance(v, str) else str(v)


class ExtractTextResponse(BaseModel):
    """Success envelope."""

    ok: Literal[True] = True
    text: str = Field(
        default="",
        description="Extracted text with leading/trailing whitespace removed",
    )


class ErrorResponse(BaseModel):
    """Error envelope for client and server errors."""

    ok: Literal[False] = False
    error: str = Field(..., description="Human-readable error message")


class PDFTextResult(BaseModel):
    """Text extracted from a single PDF document."""

    text: str = Field(default="", description="Trimmed text of all pages")
    page_count: int = Field(default=0, ge=0, description="Number of pages read")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy")
    version: str = Field(..., description="Service version")
