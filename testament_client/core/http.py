"""
Response envelope, error taxonomy, and response normalization.

Every transport outcome ends up here: a received response becomes an
``HttpResponse`` envelope (or a ``StatusError`` wrapping one when the status is
not 2xx), and a failure with no response becomes a ``TransportError``.
"""

import json
from dataclasses import asdict, dataclass, field
from enum import IntEnum
from typing import Any, Generic, TypeVar

import httpx

from testament_client.core.dates import revive_dates

T = TypeVar("T")


class HttpStatus(IntEnum):
    """Status codes the service commonly answers with."""

    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    INTERNAL_SERVER_ERROR = 500


@dataclass(frozen=True)
class HttpResponse(Generic[T]):
    """Uniform envelope returned for every call."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: T | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        return asdict(self)


# =============================================================================
# Errors
# =============================================================================


class ClientError(Exception):
    """Base error class for client errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ValidationError(ClientError):
    """Validation error for local input/configuration issues (never sent over the wire)."""


class MissingPathParameter(ValidationError):
    """A path template placeholder had no matching path parameter."""

    def __init__(self, parameter: str, template: str):
        super().__init__(
            f"Missing path parameter '{parameter}' for {template}",
            details={"parameter": parameter, "template": template},
        )
        self.parameter = parameter
        self.template = template


class StatusError(ClientError):
    """The service answered with a non-2xx status."""

    def __init__(self, response: HttpResponse[Any]):
        super().__init__(f"Request failed with status code {response.status}")
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result = super().to_dict()
        result["status"] = self.response.status
        # Revived dates are not JSON serializable
        result["response"] = json.loads(json.dumps(self.response.to_dict(), default=str))
        return result


class TransportError(ClientError):
    """No response was received (connection, DNS or timeout failure)."""


# =============================================================================
# Normalization
# =============================================================================

Outcome = httpx.Response | httpx.HTTPError


def _read_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            # Proxies answer with HTML error pages under a JSON content type
            return response.text
    return response.text


def get_http_response(response: httpx.Response, revive: bool = False) -> HttpResponse[Any]:
    """
    Build the envelope for a received response, whatever its status.

    Args:
        response: Response as returned by the transport
        revive: Convert ISO-8601 strings in the body into date values

    Returns:
        HttpResponse with the raw status, headers and (optionally revived) body

    """
    body = _read_body(response)
    if revive:
        body = revive_dates(body)
    return HttpResponse(
        status=response.status_code,
        headers=dict(response.headers),
        body=body,
    )


def normalize_outcome(outcome: Outcome, revive: bool = False) -> HttpResponse[Any] | StatusError | TransportError:
    """
    Map a transport outcome onto the envelope or a tagged error value.

    Nothing is raised; callers can match on the returned type.
    """
    if isinstance(outcome, httpx.Response):
        envelope = get_http_response(outcome, revive)
        if outcome.is_success:
            return envelope
        return StatusError(envelope)

    if isinstance(outcome, httpx.HTTPStatusError):
        return StatusError(get_http_response(outcome.response, revive))

    error = TransportError(str(outcome) or type(outcome).__name__)
    error.__cause__ = outcome
    return error


def normalize(outcome: Outcome, revive: bool = False) -> HttpResponse[Any]:
    """
    Return the envelope for a successful outcome.

    Raises:
        StatusError: The response status was not 2xx
        TransportError: No response was received

    """
    result = normalize_outcome(outcome, revive)
    if isinstance(result, ClientError):
        raise result
    return result
