import sys
from email.parser import BytesParser
from email.policy import default
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

import pytest
import responses

# Ensure repository root is on the import path for local package imports during tests.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

FormParts = Dict[str, Tuple[Optional[str], bytes]]


@pytest.fixture()
def base_url() -> str:
    return "http://fastpdf.test"


@pytest.fixture()
def sample_pdf() -> bytes:
    return b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n%%EOF\n"


@pytest.fixture()
def pdf_path(tmp_path: Path, sample_pdf: bytes) -> Path:
    path = tmp_path / "sample-multipage.pdf"
    path.write_bytes(sample_pdf)
    return path


@pytest.fixture()
def sent_form() -> Callable[..., FormParts]:
    """Decode the multipart body of a recorded request into ``name -> (filename, payload)``."""

    def _decode(index: int = 0) -> FormParts:
        request = responses.calls[index].request
        header = f"Content-Type: {request.headers['Content-Type']}\r\n\r\n".encode()
        message = BytesParser(policy=default).parsebytes(header + request.body)
        parts = {}
        for part in message.iter_parts():
            name = part.get_param("name", header="content-disposition")
            parts[name] = (part.get_filename(), part.get_payload(decode=True))
        return parts

    return _decode


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("FASTPDF_API_KEY", "FASTPDF_BASE_URL", "FASTPDF_API_VERSION"):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of FastPDFConfig.
    monkeypatch.chdir(tmp_path)
