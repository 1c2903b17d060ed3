"""
Payload shapes for the service's resources.

Bodies are passed through as decoded JSON, so these are TypedDicts describing
the dicts callers get back rather than classes the client constructs. Fields
holding timestamps are typed as ``datetime`` because every facade call revives
ISO-8601 strings.
"""

from datetime import datetime
from typing import Any, Generic, Literal, NotRequired, TypedDict, TypeVar

T = TypeVar("T")

# =============================================================================
# Pagination
# =============================================================================


class Page(TypedDict, Generic[T]):
    """One page of a listing endpoint."""

    content: list[T]
    elements: int
    page: int
    limit: int
    totalPages: int
    totalElements: int
    firstPage: bool
    lastPage: bool
    sort: NotRequired[dict[str, Literal[1, -1]] | None]


# =============================================================================
# Metadata
# =============================================================================


class Creator(TypedDict):
    userId: str
    timeCreated: datetime


class LastModified(TypedDict):
    type: str
    userId: str
    timeModified: datetime


class Metadata(TypedDict, total=False):
    creator: Creator
    lastModified: LastModified


# =============================================================================
# Namespaces, applications, environments
# =============================================================================


class Member(TypedDict):
    userId: str


class Namespace(TypedDict, total=False):
    id: str
    name: str
    members: list[Member]
    metadata: Metadata


class Application(TypedDict, total=False):
    id: str
    name: str
    metadata: Metadata


class Environment(TypedDict, total=False):
    id: str
    name: str
    metadata: Metadata


# =============================================================================
# Blueprints
# =============================================================================


class AccessRule(TypedDict):
    access: str


class UserPermissions(TypedDict, total=False):
    id: str
    access: str


class Permissions(TypedDict, total=False):
    all: AccessRule
    namespace: AccessRule
    users: list[UserPermissions]


class Blueprint(TypedDict, total=False):
    id: str
    name: str
    description: str
    namespaceId: str
    simulation: dict[str, Any]
    apps: list[str]
    permissions: Permissions
    metadata: Metadata


class AssertionRule(TypedDict, total=False):
    id: str
    name: str
    type: str


class ParameterRule(TypedDict, total=False):
    id: str
    name: str
    displayName: str
    type: str
    file: dict[str, Any]


class CorrelationRule(TypedDict, total=False):
    id: str
    name: str
    type: str
    boundary: dict[str, str]
    scope: str


class FileRule(TypedDict, total=False):
    id: str
    name: str
    type: str


class RunConfiguration(TypedDict, total=False):
    id: str
    name: str
    simulationOptions: dict[str, Any]
