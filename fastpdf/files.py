"""Normalization of file arguments into name, bytes and media type."""

from __future__ import annotations

import mimetypes
import os
from pathlib import Path
from typing import Union

from fastpdf.exceptions import UnsupportedInputError
from fastpdf.models import FileInput

FileArg = Union[str, os.PathLike, bytes, bytearray, memoryview]

DEFAULT_CONTENT_TYPE = "application/octet-stream"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

_SNIFF_LENGTH = 512

# Checked in order; the first matching prefix wins.
_SIGNATURES = (
    (b"%PDF-", "application/pdf"),
    (b"%!PS-Adobe-", "application/postscript"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
    (b"II*\x00", "image/tiff"),
    (b"MM\x00*", "image/tiff"),
    (b"\x00\x00\x01\x00", "image/x-icon"),
    (b"PK\x03\x04", "application/zip"),
    (b"PK\x05\x06", "application/zip"),
    (b"\x1f\x8b\x08", "application/x-gzip"),
)

# Control bytes that never appear in text; tab, LF, FF, CR and ESC are allowed.
_BINARY_BYTES = frozenset(
    [*range(0x00, 0x09), 0x0B, *range(0x0E, 0x1B), *range(0x1C, 0x20)]
)

_MARKUP_PREFIXES = (
    (b"<!doctype html", "text/html; charset=utf-8"),
    (b"<html", "text/html; charset=utf-8"),
    (b"<?xml", "text/xml; charset=utf-8"),
)


def detect_content_type(content: bytes) -> str:
    """Sniff a media type from the leading bytes of ``content``."""

    head = bytes(content[:_SNIFF_LENGTH])
    if not head:
        return TEXT_CONTENT_TYPE

    for signature, content_type in _SIGNATURES:
        if head.startswith(signature):
            return content_type
    if head.startswith(b"RIFF") and head[8:12] == b"WEBP":
        return "image/webp"

    stripped = head.lstrip(b" \t\r\n").lower()
    for prefix, content_type in _MARKUP_PREFIXES:
        if stripped.startswith(prefix):
            return content_type

    if any(byte in _BINARY_BYTES for byte in head):
        return DEFAULT_CONTENT_TYPE
    try:
        head.decode("utf-8")
    except UnicodeDecodeError as exc:
        # A multi-byte character cut at the sniff boundary is still text.
        if exc.start < len(head) - 3:
            return DEFAULT_CONTENT_TYPE
    return TEXT_CONTENT_TYPE


def guess_content_type(path: Path) -> str:
    """Guess a media type from the extension of ``path``."""

    content_type, _ = mimetypes.guess_type(path.name)
    return content_type or DEFAULT_CONTENT_TYPE


def read_file(file: FileArg) -> FileInput:
    """Return the name, bytes and media type of a path or in-memory buffer.

    Raises:
        UnsupportedInputError: ``file`` is neither a path nor bytes.
        OSError: the path could not be read.
    """

    if isinstance(file, (str, os.PathLike)):
        path = Path(file)
        content = path.read_bytes()
        return FileInput(path.name, content, guess_content_type(path))

    if isinstance(file, (bytes, bytearray, memoryview)):
        content = bytes(file)
        return FileInput("", content, detect_content_type(content))

    raise UnsupportedInputError(type(file).__name__)
