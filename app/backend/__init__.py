"""
PDF Text Extraction Backend Application.

A small FastAPI service that downloads a machine-readable PDF from a URL
and returns its embedded text as JSON.
"""

__version__ = "1.0.0"
