"""Python client for the FastPDF document processing service."""

from .clients import PDFClient
from .config import FastPDFConfig
from .exceptions import (
    ConfigError,
    ExtractionError,
    FastPDFError,
    ServiceError,
    UnsupportedInputError,
)
from .files import read_file
from .models import ClientConfig, FileInput, Upload
from .storage import extract_zip, save

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "ConfigError",
    "ExtractionError",
    "FastPDFConfig",
    "FastPDFError",
    "FileInput",
    "PDFClient",
    "ServiceError",
    "UnsupportedInputError",
    "Upload",
    "extract_zip",
    "read_file",
    "save",
]
