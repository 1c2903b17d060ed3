"""
Request building.

Turns an operation descriptor, path parameters and caller options into a fully
resolved request. Pure functions only; nothing here touches the network.
"""

import re
import urllib.parse
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from testament_client.core.http import MissingPathParameter

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True)
class Operation:
    """Static method + path template pairing for one remote endpoint."""

    method: str
    path: str
    has_body: bool = False

    @property
    def placeholders(self) -> list[str]:
        """Names of the ``{name}`` placeholders in the path template."""
        return _PLACEHOLDER.findall(self.path)


@dataclass(frozen=True)
class RequestOptions:
    """Per-call headers and query parameters."""

    headers: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def coerce(cls, options: "RequestOptions | Mapping[str, Any] | None") -> "RequestOptions":
        """Accept an options object, a ``{"headers": ..., "query": ...}`` dict, or None."""
        if options is None:
            return cls()
        if isinstance(options, RequestOptions):
            return options
        return cls(
            headers=dict(options.get("headers") or {}),
            query=dict(options.get("query") or {}),
        )


@dataclass(frozen=True)
class ResolvedRequest:
    """A request ready to hand to the transport."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None


def expand_path(template: str, path_params: Mapping[str, Any]) -> str:
    """
    Substitute every ``{name}`` placeholder with the URL-encoded parameter value.

    Raises:
        MissingPathParameter: A placeholder has no entry in path_params

    """

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        if name not in path_params or path_params[name] is None:
            raise MissingPathParameter(name, template)
        return urllib.parse.quote(str(path_params[name]), safe="")

    return _PLACEHOLDER.sub(substitute, template)


def build_url(base_url: str, path: str, query: Mapping[str, str] | None = None) -> str:
    """Resolve a path against the base URL and append the query string, if any."""
    url = urllib.parse.urljoin(base_url, path)
    if query:
        url = f"{url}?{urllib.parse.urlencode(query)}"
    return url


def build_request(
    base_url: str,
    operation: Operation,
    path_params: Mapping[str, Any] | None = None,
    options: RequestOptions | None = None,
    body: Any = None,
) -> ResolvedRequest:
    """
    Build a resolved request.

    Args:
        base_url: Absolute base URL of the service
        operation: Endpoint descriptor
        path_params: Values for the template placeholders
        options: Caller headers and query parameters
        body: Request payload, passed through unserialized

    Returns:
        ResolvedRequest with absolute URL, method, headers and body

    Raises:
        MissingPathParameter: A placeholder has no matching path parameter

    """
    options = options or RequestOptions()
    path = expand_path(operation.path, path_params or {})
    return ResolvedRequest(
        method=operation.method,
        url=build_url(base_url, path, options.query),
        headers=dict(options.headers),
        body=body if operation.has_body else None,
    )
