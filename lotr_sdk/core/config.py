"""
core/config.py
----------------

SDK configuration.

:class:`Settings` loads defaults from the environment using
``pydantic-settings``; variables are prefixed with ``LOTR_`` (for
example ``LOTR_API_KEY`` or ``LOTR_HTTP_MAX_RETRIES=5``).
:class:`OneApiConfig` is the immutable value the client is built
from.  It can be created directly or from :class:`Settings`.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lotr_sdk.clients.http_client import exponential_backoff

DEFAULT_BASE_URL = "https://the-one-api.dev/v2"


class Settings(BaseSettings):
    """SDK settings loaded from environment variables.

    See :class:`pydantic_settings.BaseSettings` for details on how
    environment variables are mapped onto fields.
    """

    api_key: Optional[str] = Field(None, description="One API access key.")
    base_url: str = Field(DEFAULT_BASE_URL, description="API root, including the version path.")

    # HTTP client settings
    http_timeout: float = Field(10.0, gt=0, description="Timeout for each HTTP request in seconds.")
    http_max_retries: int = Field(3, ge=0, description="Retries for rate-limited (429) requests.")
    http_backoff_base: float = Field(1.0, ge=0, description="Base delay for exponential retry backoff.")

    model_config = SettingsConfigDict(env_prefix="LOTR_", env_file=None, case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the settings.

    The returned object is immutable and safe to share across threads.
    """
    return Settings()


class OneApiConfig(BaseModel):
    """Immutable configuration for :class:`lotr_sdk.client.OneApiClient`."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(10.0, gt=0)
    max_retries: int = Field(3, ge=0)
    backoff: Callable[[int], float] = Field(default_factory=exponential_backoff)

    @field_validator("api_key")
    @classmethod
    def _api_key_required(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("API key is required")
        return v

    @field_validator("base_url")
    @classmethod
    def _base_url_absolute(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be an absolute http(s) URL")
        return v

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "OneApiConfig":
        """Build a config from environment-backed settings.

        :raises pydantic.ValidationError: if ``LOTR_API_KEY`` is missing
        """
        settings = settings or get_settings()
        return cls(
            api_key=settings.api_key or "",
            base_url=settings.base_url,
            timeout=settings.http_timeout,
            max_retries=settings.http_max_retries,
            backoff=exponential_backoff(settings.http_backoff_base),
        )

    def __repr__(self) -> str:
        return (
            f"OneApiConfig(base_url={self.base_url!r}, timeout={self.timeout}, "
            f"max_retries={self.max_retries})"
        )
