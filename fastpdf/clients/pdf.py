"""Client for the FastPDF document processing service."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, FrozenSet, List, Mapping, Optional, Sequence, Tuple, Union

import requests

from fastpdf.exceptions import ConfigError
from fastpdf.files import FileArg, read_file
from fastpdf.models import DEFAULT_API_VERSION, DEFAULT_BASE_URL, ClientConfig, HeaderValues, Upload
from fastpdf.storage.archive import extract_zip
from fastpdf.storage.files import save

from .base import BaseHttpClient

if TYPE_CHECKING:
    from fastpdf.config import FastPDFConfig

FILE_FIELD = "file"


class PDFClient(BaseHttpClient):
    """Client exposing one method per FastPDF endpoint.

    Every file-bearing call accepts either a filesystem path or the raw bytes
    of the document. Page numbers and ranges are forwarded untouched; the
    service alone decides whether they are valid.

    Example:
        >>> client = PDFClient("your-api-key")
        >>> client.validate_token()
        True
        >>> client.save(client.split("report.pdf", [3, 6]), "report-split.pdf")
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        headers: Optional[Mapping[str, HeaderValues]] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = ClientConfig.build(
            api_key, base_url=base_url, api_version=api_version, headers=headers
        )
        super().__init__(base_url=self.config.base_url, headers=self.config.headers, session=session)

    @classmethod
    def from_config(
        cls, config: "FastPDFConfig", *, session: Optional[requests.Session] = None
    ) -> "PDFClient":
        """Build a client from environment-backed settings."""

        if not config.api_key:
            raise ConfigError("FastPDF API key is not configured. Set FASTPDF_API_KEY.")
        return cls(
            config.api_key,
            base_url=config.base_url,
            api_version=config.api_version,
            session=session,
        )

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def api_version(self) -> str:
        return self.config.api_version

    @property
    def headers(self) -> Mapping[str, Tuple[str, ...]]:
        return self.config.headers

    @property
    def supported_image_formats(self) -> FrozenSet[str]:
        return self.config.supported_image_formats

    def validate_token(self) -> bool:
        """Check the API key against the service.

        Returns:
            ``True`` when the service accepts the key.

        Raises:
            ServiceError: the service rejected the key or failed.
        """

        self._get("/token")
        return True

    def split(self, file: FileArg, splits: Sequence[int]) -> bytes:
        """Split a PDF at the given page numbers and return the resulting PDF."""

        return self._upload("/pdf/split", file, splits=json.dumps(list(splits)))

    def split_zip(self, file: FileArg, splits: Sequence[Sequence[int]]) -> bytes:
        """Split a PDF into ``[start, end]`` page ranges, returned as a zip archive."""

        ranges = [list(page_range) for page_range in splits]
        return self._upload("/pdf/split-zip", file, splits=json.dumps(ranges))

    def edit_metadata(self, file: FileArg, metadata: Mapping[str, str]) -> bytes:
        """Replace document metadata entries (title, author, ...) and return the PDF."""

        return self._upload("/pdf/metadata", file, metadata=json.dumps(dict(metadata)))

    def save(self, content: bytes, file_path: Union[str, Path] = "") -> Optional[bytes]:
        """Write ``content`` to ``file_path``, or hand it back when no path is given."""

        return save(content, file_path)

    def extract(self, content: bytes, destination: Union[str, Path]) -> List[Path]:
        """Unpack a zip archive returned by :meth:`split_zip` into ``destination``."""

        return extract_zip(content, destination)

    def _upload(self, path: str, file: FileArg, **fields: str) -> bytes:
        document = read_file(file)
        upload = Upload(
            field_name=FILE_FIELD,
            filename=document.filename,
            content=document.content,
            content_type=document.content_type,
            fields=fields,
        )
        return self._post_multipart(path, upload)
