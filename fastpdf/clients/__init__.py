"""HTTP clients for the FastPDF service."""

from .base import BaseHttpClient
from .pdf import PDFClient

__all__ = ["BaseHttpClient", "PDFClient"]
