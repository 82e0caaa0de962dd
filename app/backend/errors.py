"""
Exceptions raised while serving an extraction request.

Each carries the HTTP status and the message rendered into the
error envelope ``{"ok": false, "error": message}``.
"""

from fastapi import status

MISSING_PARAMETER_MESSAGE = "Missing fileURL parameter"
UPSTREAM_FETCH_MESSAGE = "Unable to fetch file from provided URL"


class ExtractionServiceError(Exception):
    """Base error for the extraction service."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MissingParameterError(ExtractionServiceError):
    """Raised when the request carries no fileURL."""

    def __init__(self):
        super().__init__(MISSING_PARAMETER_MESSAGE, status.HTTP_400_BAD_REQUEST)


class UpstreamFetchError(ExtractionServiceError):
    """
    Raised when the remote server answers with a non-success status.

    Every upstream failure collapses into the same client-facing message;
    the URL and status are kept for logging only.
    """

    def __init__(self, url: str, upstream_status: int):
        super().__init__(UPSTREAM_FETCH_MESSAGE, status.HTTP_400_BAD_REQUEST)
        self.url = url
        self.upstream_status = upstream_status


class PDFExtractionError(ExtractionServiceError):
    """Raised when the fetched bytes cannot be parsed as a PDF."""

    pass


def describe_error(exc: BaseException) -> str:
    """Message for an unexpected failure: str(exc), or repr(exc) when empty."""
    return str(exc) or repr(exc)
