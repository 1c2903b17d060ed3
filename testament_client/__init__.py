"""
Testament client - Async client for the Testament resource API.

Layers:
- core: Request building, response normalization, date revival, HTTP client
- sdk: TestamentClient with one sub-client per resource family
- config: Settings and logging setup
"""

__version__ = "0.1.0"

from testament_client.core.http import (  # noqa: E402
    ClientError,
    HttpResponse,
    HttpStatus,
    MissingPathParameter,
    StatusError,
    TransportError,
    ValidationError,
)
from testament_client.sdk import TestamentClient, create_client  # noqa: E402

__all__ = [
    "ClientError",
    "HttpResponse",
    "HttpStatus",
    "MissingPathParameter",
    "StatusError",
    "TestamentClient",
    "TransportError",
    "ValidationError",
    "create_client",
]
