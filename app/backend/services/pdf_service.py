"""
PDF text extraction service using pypdf.

Turns the raw bytes of a machine-readable PDF into plain text.
"""

import io
import logging
from typing import BinaryIO

from pypdf import PdfReader
from pypdf.errors import FileNotDecryptedError, PdfReadError

from ..errors import PDFExtractionError
from ..models import PDFTextResult

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class PDFService:
    """
    Service for PDF text extraction.

    Uses pypdf to read the embedded text layer of each page. Scanned
    documents without a text layer produce an empty string.
    """

    def __init__(self, page_separator: str = PAGE_SEPARATOR):
        """
        Initialize the PDF service.

        Args:
            page_separator: String placed between the text of consecutive pages.
        """
        self.page_separator = page_separator

    def extract_text(self, file_bytes: bytes | BinaryIO) -> PDFTextResult:
        """
        Extract the text of every page of a PDF.

        Args:
            file_bytes: PDF file as bytes or file-like object.

        Returns:
            PDFTextResult with the trimmed text and the page count.

        Raises:
            PDFExtractionError: If the content cannot be parsed as a PDF.
        """
        # Ensure we have bytes
        if hasattr(file_bytes, "read"):
            pdf_bytes = file_bytes.read()
        else:
            pdf_bytes = file_bytes

        try:
            reader = PdfReader(io.BytesIO(pdf_bytes))
            if reader.is_encrypted:
                # Many PDFs are encrypted with an empty user password
                reader.decrypt("")

            page_texts = []
            for page in reader.pages:
                page_text = page.extract_text() or ""
                if page_text.strip():
                    page_texts.append(page_text)

        except FileNotDecryptedError as e:
            logger.error("PDF is encrypted: %s", e)
            raise PDFExtractionError(f"Encrypted PDF file: {e}") from e

        except PdfReadError as e:
            logger.error("PDF read error: %s", e)
            raise PDFExtractionError(f"Invalid or corrupted PDF file: {e}") from e

        except Exception as e:
            logger.exception("Unexpected error during PDF text extraction")
            raise PDFExtractionError(f"PDF text extraction failed: {e}") from e

        text = self.page_separator.join(page_texts).strip()
        logger.info(
            "Extracted %d character(s) from %d page(s)",
            len(text),
            len(reader.pages),
        )
        return PDFTextResult(text=text, page_count=len(reader.pages))


# Singleton instance for convenience
_pdf_service: PDFService | None = None


def get_pdf_service() -> PDFService:
    """Get or create the PDF service singleton."""
    global _pdf_service
    if _pdf_service is None:
        _pdf_service = PDFService()
    return _pdf_service
