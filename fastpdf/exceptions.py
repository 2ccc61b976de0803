"""Custom exception hierarchy for the FastPDF client."""

from __future__ import annotations

from typing import Any, Tuple

import requests

READ_FAILURE_BODY = "failed to read response body"
SERVICE_ERROR_MESSAGE = "Server returned an HTTP error"


class FastPDFError(Exception):
    """Base exception for FastPDF client errors."""


class ConfigError(FastPDFError):
    """Raised when configuration is invalid or incomplete."""


class UnsupportedInputError(FastPDFError):
    """Raised when a file argument is neither a path nor raw bytes."""

    def __init__(self, input_type: str) -> None:
        self.input_type = input_type
        super().__init__(f"unsupported file type: {input_type}")

    def __reduce__(self) -> Tuple[Any, ...]:
        return (type(self), (self.input_type,))


class ExtractionError(FastPDFError):
    """Raised when an archive entry cannot be extracted safely."""


class ServiceError(FastPDFError):
    """Raised when the FastPDF service answers with anything other than HTTP 200.

    The raw response body is kept even when it is not a structured payload so
    that failed calls can be diagnosed without re-issuing them.
    """

    def __init__(
        self,
        status_code: int,
        response: str,
        *,
        status: str = "",
        message: str = SERVICE_ERROR_MESSAGE,
    ) -> None:
        self.status_code = status_code
        self.status = status
        self.response = response
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.message}. Status Code: {self.status_code}, Response: {self.response}"

    def __reduce__(self) -> Tuple[Any, ...]:
        return (type(self), (self.status_code, self.response), self.__dict__.copy())

    @classmethod
    def from_response(cls, response: requests.Response) -> "ServiceError":
        """Decode a failed response; never raises."""

        try:
            body = response.text
        except (requests.RequestException, OSError):
            body = READ_FAILURE_BODY
        return cls(response.status_code, body, status=response.reason or "")
