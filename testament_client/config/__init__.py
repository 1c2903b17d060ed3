"""Settings and logging setup."""

from testament_client.config.logging import configure_logging
from testament_client.config.settings import ClientSettings

__all__ = ["ClientSettings", "configure_logging"]
