from pathlib import Path

import pytest

from fastpdf.exceptions import UnsupportedInputError
from fastpdf.files import (
    DEFAULT_CONTENT_TYPE,
    TEXT_CONTENT_TYPE,
    detect_content_type,
    read_file,
)


def test_read_file_from_path_uses_name_and_extension(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "report.pdf"
    path.parent.mkdir()
    path.write_bytes(b"%PDF-1.7 content")

    result = read_file(path)

    assert result.filename == "report.pdf"
    assert result.content == b"%PDF-1.7 content"
    assert result.content_type == "application/pdf"


def test_read_file_accepts_string_paths(tmp_path: Path) -> None:
    path = tmp_path / "scan.png"
    path.write_bytes(b"not really a png")

    result = read_file(str(path))

    assert result.filename == "scan.png"
    assert result.content_type == "image/png"


def test_read_file_unknown_extension_defaults_to_octet_stream(tmp_path: Path) -> None:
    path = tmp_path / "blob.unknownext"
    path.write_bytes(b"\x00\x01")

    assert read_file(path).content_type == DEFAULT_CONTENT_TYPE


def test_read_file_from_bytes_sniffs_content() -> None:
    result = read_file(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3")

    assert result.filename == ""
    assert result.content_type == "application/pdf"


def test_read_file_accepts_bytearray() -> None:
    result = read_file(bytearray(b"\x89PNG\r\n\x1a\n\x00\x00"))

    assert isinstance(result.content, bytes)
    assert result.content_type == "image/png"


def test_read_file_missing_path_propagates_os_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.pdf")


@pytest.mark.parametrize("value", [42, None, ["a.pdf"], {"file": b""}])
def test_read_file_rejects_unsupported_types(value) -> None:
    with pytest.raises(UnsupportedInputError) as excinfo:
        read_file(value)

    assert type(value).__name__ in str(excinfo.value)
    assert excinfo.value.input_type == type(value).__name__


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        (b"%PDF-1.5", "application/pdf"),
        (b"\xff\xd8\xff\xe0JFIF", "image/jpeg"),
        (b"GIF89a....", "image/gif"),
        (b"RIFF\x00\x00\x00\x00WEBPVP8 ", "image/webp"),
        (b"PK\x03\x04\x14\x00", "application/zip"),
        (b"  <!DOCTYPE html><html>", "text/html; charset=utf-8"),
        (b"<?xml version='1.0'?>", "text/xml; charset=utf-8"),
        (b"plain words", TEXT_CONTENT_TYPE),
        (b"", TEXT_CONTENT_TYPE),
        (b"\x00\x10\xfe\xfa binary", DEFAULT_CONTENT_TYPE),
        (b"\xfe\xfa\xfb\xfc\xfd" * 10, DEFAULT_CONTENT_TYPE),
        (b"\x01\x02\x03\x04", DEFAULT_CONTENT_TYPE),
        (b"header\x0bvalue", DEFAULT_CONTENT_TYPE),
        (b"record\x1esep", DEFAULT_CONTENT_TYPE),
        (b"\x1a end of file", DEFAULT_CONTENT_TYPE),
        (b"tab\tline\nfeed\x0cpage\r\n", TEXT_CONTENT_TYPE),
        (b"\x1b[31mred\x1b[0m", TEXT_CONTENT_TYPE),
    ],
)
def test_detect_content_type(content: bytes, expected: str) -> None:
    assert detect_content_type(content) == expected
