"""
Services package for the PDF text extraction application.

Contains:
- fetch_service: Download of the remote file with httpx
- pdf_service: Text extraction from PDF bytes with pypdf
"""

from .fetch_service import FileFetchService
from .pdf_service import PDFService

__all__ = ["FileFetchService", "PDFService"]
