"""
Core HTTP client for the Testament API.

Builds requests from operation descriptors, sends them through an httpx
transport, and normalizes the outcome into an envelope or a structured error.
"""

import logging
import urllib.parse
from collections.abc import Mapping
from typing import Any

import httpx

from testament_client.config.settings import ClientSettings
from testament_client.core.http import HttpResponse, Outcome, ValidationError, normalize
from testament_client.core.request import Operation, RequestOptions, build_request

logger = logging.getLogger(__name__)

Options = RequestOptions | Mapping[str, Any] | None


def build_async_client(
    settings: ClientSettings | None = None,
    *,
    user_agent: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create the default ``httpx.AsyncClient`` with the configured timeout and User-Agent.

    Redirects are followed, so only the final response reaches normalization.
    """
    settings = settings or ClientSettings()
    return httpx.AsyncClient(
        transport=transport,
        timeout=httpx.Timeout(timeout or settings.timeout_seconds),
        follow_redirects=True,
        headers={"User-Agent": user_agent or settings.user_agent},
    )


def _ensure_base_url(base_url: str | None) -> str:
    """Ensure the base URL is present and absolute."""
    if not base_url:
        raise ValidationError("Base URL required. Pass base_url or set TESTAMENT_BASE_URL")
    parsed = urllib.parse.urlparse(base_url)
    if not parsed.scheme or not parsed.netloc:
        raise ValidationError(f"Base URL must be absolute: {base_url}", details={"base_url": base_url})
    return base_url


class APIClient:
    """
    Low-level HTTP client for the Testament API.

    Handles:
    - Request building from operation descriptors
    - Issuing requests through an injected (or owned) httpx.AsyncClient
    - Response normalization and date revival
    """

    def __init__(
        self,
        base_url: str | None,
        http: httpx.AsyncClient | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Absolute base URL of the service
            http: Pre-configured transport; when omitted, one is created and owned
            user_agent: User-Agent applied to the transport's default headers
            timeout: Request timeout in seconds for a created transport

        """
        self.base_url = _ensure_base_url(base_url)
        self._owns_http = http is None
        if http is None:
            http = build_async_client(user_agent=user_agent, timeout=timeout)
        elif user_agent:
            http.headers["User-Agent"] = user_agent
        self._http = http

    @property
    def http(self) -> httpx.AsyncClient:
        return self._http

    async def request(
        self,
        operation: Operation,
        path_params: Mapping[str, Any] | None = None,
        body: Any = None,
        options: Options = None,
    ) -> HttpResponse[Any]:
        """
        Issue one request and return its envelope.

        Args:
            operation: Endpoint descriptor
            path_params: Values for the path template placeholders
            body: Request payload for operations that take one
            options: ``RequestOptions`` or a ``{"headers": ..., "query": ...}`` dict

        Returns:
            HttpResponse with ISO-8601 body strings revived into dates

        Raises:
            MissingPathParameter: A placeholder had no value (nothing is sent)
            StatusError: The service answered with a non-2xx status
            TransportError: No response was received

        """
        resolved = build_request(self.base_url, operation, path_params, RequestOptions.coerce(options), body)
        kwargs: dict[str, Any] = {"headers": resolved.headers}
        if operation.has_body:
            kwargs["json"] = resolved.body

        logger.debug("request %s %s", resolved.method, resolved.url)
        outcome: Outcome
        try:
            outcome = await self._http.request(resolved.method, resolved.url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("request %s %s failed: %s", resolved.method, resolved.url, e)
            outcome = e
        else:
            logger.debug("response %s %s -> %s", resolved.method, resolved.url, outcome.status_code)

        return normalize(outcome, revive=True)

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
