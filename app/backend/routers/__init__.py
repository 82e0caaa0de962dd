"""
Routers package for FastAPI endpoints.

Organized by domain:
- extract: Remote PDF text extraction
"""

from . import extract

__all__ = ["extract"]
