"""Local persistence of service responses."""

from .archive import extract_zip
from .files import save

__all__ = ["extract_zip", "save"]
