"""Shared HTTP behavior for FastPDF clients."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

import requests

from fastpdf.exceptions import ServiceError
from fastpdf.models import Upload

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": "fastpdf-python",
}

SUCCESS_STATUS = 200


def _flatten_headers(
    headers: Mapping[str, Tuple[str, ...]], *, skip: Tuple[str, ...] = ()
) -> Dict[str, str]:
    """Collapse a header multimap into the single-value form ``requests`` sends.

    Repeated values are joined with ``", "``, which HTTP treats as equivalent
    to repeating the header line.
    """

    skipped = {name.lower() for name in skip}
    return {
        name: ", ".join(values)
        for name, values in headers.items()
        if name.lower() not in skipped and values
    }


class BaseHttpClient:
    """Base class issuing authenticated requests against a versioned service root."""

    def __init__(
        self,
        *,
        base_url: str,
        headers: Mapping[str, Tuple[str, ...]],
        session: Optional[requests.Session] = None,
    ) -> None:
        if session is None:
            session = requests.Session()
            session.headers.update(DEFAULT_HEADERS)
        else:
            for key, value in DEFAULT_HEADERS.items():
                session.headers.setdefault(key, value)
        self.session = session
        self.base_url = base_url
        self._headers = headers

    def _send(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self.base_url}{path}"
        # Streamed so the body is read by _handle_response, not inside requests.
        response = self.session.request(method, url, stream=True, **kwargs)
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    def _handle_response(self, response: requests.Response) -> bytes:
        """Return the body of a 200 response; raise :class:`ServiceError` otherwise.

        The response is closed on every path.
        """

        with response:
            if response.status_code != SUCCESS_STATUS:
                error = ServiceError.from_response(response)
                logger.warning(
                    "FastPDF request to %s failed with status %s", response.url, error.status_code
                )
                raise error
            return response.content

    def _get(self, path: str) -> bytes:
        response = self._send("GET", path, headers=_flatten_headers(self._headers))
        return self._handle_response(response)

    def _post_multipart(self, path: str, upload: Upload) -> bytes:
        """Send ``upload`` as ``multipart/form-data`` and return the raw response body.

        The configured ``Content-Type`` header, if any, is dropped so the
        boundary-bearing value produced by the encoder is the one sent.
        """

        headers: Dict[str, Optional[str]] = dict(
            _flatten_headers(self._headers, skip=("Content-Type",))
        )
        # None also drops a session-level value, leaving the encoder's header.
        headers["Content-Type"] = None
        files = {upload.field_name: (upload.filename, upload.content, upload.content_type)}
        response = self._send(
            "POST",
            path,
            data=dict(upload.fields),
            files=files,
            headers=headers,
        )
        return self._handle_response(response)
