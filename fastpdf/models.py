"""Data containers shared by the FastPDF client layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple, Union

DEFAULT_BASE_URL = "https://data.fastpdfservice.com"
DEFAULT_API_VERSION = "v1"
AUTH_HEADER = "Authorization"

SUPPORTED_IMAGE_FORMATS: FrozenSet[str] = frozenset(
    {
        "jpeg",
        "png",
        "gif",
        "bmp",
        "tiff",
        "webp",
        "svg",
        "ico",
        "pdf",
        "psd",
        "ai",
        "eps",
        "cr2",
        "nef",
        "sr2",
        "orf",
        "rw2",
        "dng",
        "arw",
        "heic",
    }
)

HeaderValues = Union[str, Iterable[str]]


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable connection settings owned by a single :class:`PDFClient`.

    ``base_url`` already carries the API version segment; use :meth:`build`
    rather than the constructor so the segment is appended exactly once.
    """

    api_key: str
    base_url: str
    api_version: str
    headers: Mapping[str, Tuple[str, ...]]
    supported_image_formats: FrozenSet[str] = SUPPORTED_IMAGE_FORMATS

    @classmethod
    def build(
        cls,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        headers: Optional[Mapping[str, HeaderValues]] = None,
    ) -> "ClientConfig":
        merged: Dict[str, Tuple[str, ...]] = {}
        for name, values in (headers or {}).items():
            if name.lower() == AUTH_HEADER.lower():
                continue
            merged[name] = (values,) if isinstance(values, str) else tuple(values)
        merged[AUTH_HEADER] = (api_key,)

        return cls(
            api_key=api_key,
            base_url=f"{base_url.rstrip('/')}/{api_version}",
            api_version=api_version,
            headers=MappingProxyType(merged),
        )


@dataclass(frozen=True, slots=True)
class FileInput:
    """A file argument normalized to a name, its bytes and a media type."""

    filename: str
    content: bytes
    content_type: str


@dataclass(slots=True)
class Upload:
    """A single file part plus the plain form fields sent alongside it."""

    field_name: str
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"
    fields: Dict[str, str] = field(default_factory=dict)
