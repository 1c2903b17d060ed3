"""Client settings, read from ``TESTAMENT_*`` environment variables or a ``.env`` file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from testament_client import __version__

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = f"testament-client/{__version__}"


class ClientSettings(BaseSettings):
    """Connection settings for the client.

    Explicit arguments to ``create_client`` win over these values.
    """

    model_config = SettingsConfigDict(
        env_prefix="TESTAMENT_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str | None = Field(
        default=None,
        description="Absolute base URL of the service, e.g. http://localhost:8081.",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent sent on every request.",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Per-request timeout (seconds).",
    )
