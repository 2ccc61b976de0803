"""Environment-backed settings for the FastPDF client."""

from typing import Optional

from pydantic import AnyHttpUrl, Field, TypeAdapter, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fastpdf.models import DEFAULT_API_VERSION, DEFAULT_BASE_URL

_URL_ADAPTER = TypeAdapter(AnyHttpUrl)


class FastPDFConfig(BaseSettings):  # type: ignore[misc]
    """Settings used to build a :class:`~fastpdf.clients.PDFClient`."""

    api_key: Optional[str] = Field(None, description="API key sent in the Authorization header")
    base_url: str = Field(DEFAULT_BASE_URL, description="Service root, without the version segment")
    api_version: str = Field(DEFAULT_API_VERSION, description="API version appended to the root")

    model_config = SettingsConfigDict(env_prefix="FASTPDF_", env_file=".env", extra="ignore")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        _URL_ADAPTER.validate_python(value)
        return value.rstrip("/")

    @field_validator("api_version")
    @classmethod
    def validate_api_version(cls, value: str) -> str:
        value = value.strip()
        if not value or "/" in value:
            raise ValueError("api_version must be a single non-empty path segment")
        return value
