"""
Core layer - Request building, response normalization, and the HTTP client.

This layer provides:
- Operation descriptors and the request builder
- The response envelope, error taxonomy and normalizer
- Date revival for JSON bodies
- Payload shapes for the service's resources
"""

from testament_client.core.client import APIClient, build_async_client
from testament_client.core.dates import is_valid_date, parse_date, revive_dates
from testament_client.core.http import (
    ClientError,
    HttpResponse,
    HttpStatus,
    MissingPathParameter,
    StatusError,
    TransportError,
    ValidationError,
    get_http_response,
    normalize,
    normalize_outcome,
)
from testament_client.core.request import Operation, RequestOptions, ResolvedRequest, build_request
from testament_client.core.types import (
    Application,
    AssertionRule,
    Blueprint,
    CorrelationRule,
    Environment,
    FileRule,
    Namespace,
    Page,
    ParameterRule,
    Permissions,
    RunConfiguration,
    UserPermissions,
)

__all__ = [
    "APIClient",
    "Application",
    "AssertionRule",
    "Blueprint",
    "ClientError",
    "CorrelationRule",
    "Environment",
    "FileRule",
    "HttpResponse",
    "HttpStatus",
    "MissingPathParameter",
    "Namespace",
    "Operation",
    "Page",
    "ParameterRule",
    "Permissions",
    "RequestOptions",
    "ResolvedRequest",
    "RunConfiguration",
    "StatusError",
    "TransportError",
    "UserPermissions",
    "ValidationError",
    "build_async_client",
    "build_request",
    "get_http_response",
    "is_valid_date",
    "normalize",
    "normalize_outcome",
    "parse_date",
    "revive_dates",
]
