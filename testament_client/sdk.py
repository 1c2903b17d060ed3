"""
Testament SDK - High-level async client.

One sub-client per resource family, each method a fixed
build -> send -> normalize pipeline over the core APIClient.
"""

import builtins
from typing import Any, Generic, TypeVar

import httpx

from testament_client.config.settings import ClientSettings
from testament_client.core import operations as ops
from testament_client.core.client import APIClient, Options
from testament_client.core.http import HttpResponse
from testament_client.core.request import Operation
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

T = TypeVar("T")


class TestamentClient:
    """
    High-level Testament API client.

    Example:
        async with create_client("http://localhost:8081") as client:
            response = await client.namespaces.create({"name": "Namespace 1"})
            namespace = response.body

            await client.blueprints.parameters.update(
                blueprint_id, parameter_id, {"displayName": "Username"}
            )

    """

    __test__ = False

    def __init__(self, client: APIClient):
        self._client = client

        # Sub-clients for different resource families
        self.namespaces = NamespaceOperations(self._client)
        self.apps = AppOperations(self._client)
        self.environments = EnvironmentOperations(self._client)
        self.blueprints = BlueprintOperations(self._client)

    @property
    def base_url(self) -> str:
        return self._client.base_url

    @property
    def api(self) -> APIClient:
        """The low-level client, for endpoints without a dedicated method."""
        return self._client

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "TestamentClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def create_client(
    base_url: str | None = None,
    *,
    http: httpx.AsyncClient | None = None,
    user_agent: str | None = None,
    settings: ClientSettings | None = None,
) -> TestamentClient:
    """
    Create a client.

    Args:
        base_url: Absolute base URL (or TESTAMENT_BASE_URL env var)
        http: Pre-configured httpx.AsyncClient; a new one is created if omitted
        user_agent: User-Agent string (or TESTAMENT_USER_AGENT env var for a created transport)
        settings: Settings to fall back on; read from the environment if omitted

    """
    settings = settings or ClientSettings()
    # An injected transport keeps its own User-Agent unless one is passed explicitly
    if http is None:
        user_agent = user_agent or settings.user_agent
    return TestamentClient(
        APIClient(
            base_url or settings.base_url,
            http=http,
            user_agent=user_agent,
            timeout=settings.timeout_seconds,
        )
    )


# =============================================================================
# Namespaces
# =============================================================================


class NamespaceOperations:
    """Operations on namespaces."""

    def __init__(self, client: APIClient):
        self._client = client

    async def create(self, dto: dict[str, Any], options: Options = None) -> HttpResponse[Namespace]:
        return await self._client.request(ops.CREATE_NAMESPACE, body=dto, options=options)

    async def list(self, options: Options = None) -> HttpResponse[Page[Namespace]]:
        """List namespaces; query options are passed through as filters."""
        return await self._client.request(ops.LIST_NAMESPACES, options=options)

    async def get(self, namespace_id: str, options: Options = None) -> HttpResponse[Namespace]:
        return await self._client.request(ops.GET_NAMESPACE, {"namespaceId": namespace_id}, options=options)

    async def for_member(self, member_id: str, options: Options = None) -> HttpResponse[builtins.list[str]]:
        """Get the IDs of the namespaces a user belongs to."""
        return await self._client.request(ops.LIST_MEMBER_NAMESPACES, {"memberId": member_id}, options=options)

    async def update(self, namespace_id: str, dto: dict[str, Any], options: Options = None) -> HttpResponse[Namespace]:
        """Replace a namespace."""
        return await self._client.request(
            ops.UPDATE_NAMESPACE, {"namespaceId": namespace_id}, body=dto, options=options
        )

    async def delete(self, namespace_id: str, options: Options = None) -> HttpResponse[Namespace]:
        return await self._client.request(ops.DELETE_NAMESPACE, {"namespaceId": namespace_id}, options=options)


# =============================================================================
# Applications
# =============================================================================


class AppOperations:
    """Operations on applications."""

    def __init__(self, client: APIClient):
        self._client = client

    async def create(self, dto: dict[str, Any], options: Options = None) -> HttpResponse[Application]:
        return await self._client.request(ops.CREATE_APP, body=dto, options=options)

    async def list(self, options: Options = None) -> HttpResponse[Page[Application]]:
        return await self._client.request(ops.LIST_APPS, options=options)

    async def get(self, app_id: str, options: Options = None) -> HttpResponse[Application]:
        return await self._client.request(ops.GET_APP, {"appId": app_id}, options=options)

    async def update(self, app_id: str, dto: dict[str, Any], options: Options = None) -> HttpResponse[Application]:
        """Replace an application."""
        return await self._client.request(ops.UPDATE_APP, {"appId": app_id}, body=dto, options=options)

    async def delete(self, app_id: str, options: Options = None) -> HttpResponse[Application]:
        return await self._client.request(ops.DELETE_APP, {"appId": app_id}, options=options)


# =============================================================================
# Environments
# =============================================================================


class EnvironmentOperations:
    """Operations on environments."""

    def __init__(self, client: APIClient):
        self._client = client

    async def create(self, dto: dict[str, Any], options: Options = None) -> HttpResponse[Environment]:
        return await self._client.request(ops.CREATE_ENVIRONMENT, body=dto, options=options)

    async def list(self, options: Options = None) -> HttpResponse[Page[Environment]]:
        return await self._client.request(ops.LIST_ENVIRONMENTS, options=options)

    async def get(self, environment_id: str, options: Options = None) -> HttpResponse[Environment]:
        return await self._client.request(ops.GET_ENVIRONMENT, {"environmentId": environment_id}, options=options)

    async def update(
        self, environment_id: str, dto: dict[str, Any], options: Options = None
    ) -> HttpResponse[Environment]:
        """Replace an environment."""
        return await self._client.request(
            ops.UPDATE_ENVIRONMENT, {"environmentId": environment_id}, body=dto, options=options
        )

    async def delete(self, environment_id: str, options: Options = None) -> HttpResponse[Environment]:
        return await self._client.request(
            ops.DELETE_ENVIRONMENT, {"environmentId": environment_id}, options=options
        )


# =============================================================================
# Blueprints
# =============================================================================


class BlueprintRuleOperations(Generic[T]):
    """
    Add/list/get/update/remove for one family of blueprint rules.

    Assertions, parameters, correlations, files and run configurations share
    this shape and differ only in their endpoints and item ID placeholder.
    """

    def __init__(
        self,
        client: APIClient,
        id_param: str,
        list_op: Operation,
        get_op: Operation,
        add_op: Operation,
        update_op: Operation,
        remove_op: Operation,
    ):
        self._client = client
        self._id_param = id_param
        self._list_op = list_op
        self._get_op = get_op
        self._add_op = add_op
        self._update_op = update_op
        self._remove_op = remove_op

    def _params(self, blueprint_id: str, item_id: str) -> dict[str, str]:
        return {"blueprintId": blueprint_id, self._id_param: item_id}

    async def list(self, blueprint_id: str, options: Options = None) -> HttpResponse[builtins.list[T]]:
        return await self._client.request(self._list_op, {"blueprintId": blueprint_id}, options=options)

    async def get(self, blueprint_id: str, item_id: str, options: Options = None) -> HttpResponse[T]:
        return await self._client.request(self._get_op, self._params(blueprint_id, item_id), options=options)

    async def add(self, blueprint_id: str, dto: dict[str, Any], options: Options = None) -> HttpResponse[T]:
        return await self._client.request(self._add_op, {"blueprintId": blueprint_id}, body=dto, options=options)

    async def update(
        self, blueprint_id: str, item_id: str, dto: dict[str, Any], options: Options = None
    ) -> HttpResponse[T]:
        """Partially update a rule."""
        return await self._client.request(
            self._update_op, self._params(blueprint_id, item_id), body=dto, options=options
        )

    async def remove(self, blueprint_id: str, item_id: str, options: Options = None) -> HttpResponse[T]:
        return await self._client.request(self._remove_op, self._params(blueprint_id, item_id), options=options)


class BlueprintAppOperations:
    """Applications attached to a blueprint."""

    def __init__(self, client: APIClient):
        self._client = client

    async def list(self, blueprint_id: str, options: Options = None) -> HttpResponse[builtins.list[str]]:
        return await self._client.request(ops.LIST_BLUEPRINT_APPS, {"blueprintId": blueprint_id}, options=options)

    # The service answers with the whole blueprint, not the app
    async def add(self, blueprint_id: str, dto: dict[str, Any], options: Options = None) -> HttpResponse[Blueprint]:
        return await self._client.request(
            ops.ADD_BLUEPRINT_APP, {"blueprintId": blueprint_id}, body=dto, options=options
        )

    async def remove(self, blueprint_id: str, app_id: str, options: Options = None) -> HttpResponse[Blueprint]:
        return await self._client.request(
            ops.REMOVE_BLUEPRINT_APP, {"blueprintId": blueprint_id, "appId": app_id}, options=options
        )


class BlueprintPermissionOperations:
    """Blueprint-wide and per-user permissions."""

    def __init__(self, client: APIClient):
        self._client = client

    async def get(self, blueprint_id: str, options: Options = None) -> HttpResponse[Permissions]:
        return await self._client.request(
            ops.GET_BLUEPRINT_PERMISSIONS, {"blueprintId": blueprint_id}, options=options
        )

    async def update(
        self, blueprint_id: str, dto: dict[str, Any], options: Options = None
    ) -> HttpResponse[Permissions]:
        return await self._client.request(
            ops.UPDATE_BLUEPRINT_PERMISSIONS, {"blueprintId": blueprint_id}, body=dto, options=options
        )

    async def list_users(
        self, blueprint_id: str, options: Options = None
    ) -> HttpResponse[builtins.list[UserPermissions]]:
        return await self._client.request(
            ops.LIST_BLUEPRINT_USER_PERMISSIONS, {"blueprintId": blueprint_id}, options=options
        )

    async def get_user(
        self, blueprint_id: str, user_id: str, options: Options = None
    ) -> HttpResponse[UserPermissions]:
        return await self._client.request(
            ops.GET_BLUEPRINT_USER_PERMISSIONS, {"blueprintId": blueprint_id, "userId": user_id}, options=options
        )

    async def add_user(
        self, blueprint_id: str, dto: dict[str, Any], options: Options = None
    ) -> HttpResponse[UserPermissions]:
        return await self._client.request(
            ops.ADD_BLUEPRINT_USER_PERMISSIONS, {"blueprintId": blueprint_id}, body=dto, options=options
        )

    async def update_user(
        self, blueprint_id: str, user_id: str, dto: dict[str, Any], options: Options = None
    ) -> HttpResponse[UserPermissions]:
        return await self._client.request(
            ops.UPDATE_BLUEPRINT_USER_PERMISSIONS,
            {"blueprintId": blueprint_id, "userId": user_id},
            body=dto,
            options=options,
        )

    async def remove_user(
        self, blueprint_id: str, user_id: str, options: Options = None
    ) -> HttpResponse[UserPermissions]:
        return await self._client.request(
            ops.REMOVE_BLUEPRINT_USER_PERMISSIONS, {"blueprintId": blueprint_id, "userId": user_id}, options=options
        )


class BlueprintOperations:
    """Operations on blueprints and their sub-resources."""

    def __init__(self, client: APIClient):
        self._client = client

        self.apps = BlueprintAppOperations(client)
        self.permissions = BlueprintPermissionOperations(client)
        self.assertions: BlueprintRuleOperations[AssertionRule] = BlueprintRuleOperations(
            client,
            "assertionId",
            ops.LIST_BLUEPRINT_ASSERTIONS,
            ops.GET_BLUEPRINT_ASSERTION,
            ops.ADD_BLUEPRINT_ASSERTION,
            ops.UPDATE_BLUEPRINT_ASSERTION,
            ops.REMOVE_BLUEPRINT_ASSERTION,
        )
        self.parameters: BlueprintRuleOperations[ParameterRule] = BlueprintRuleOperations(
            client,
            "parameterId",
            ops.LIST_BLUEPRINT_PARAMETERS,
            ops.GET_BLUEPRINT_PARAMETER,
            ops.ADD_BLUEPRINT_PARAMETER,
            ops.UPDATE_BLUEPRINT_PARAMETER,
            ops.REMOVE_BLUEPRINT_PARAMETER,
        )
        self.correlations: BlueprintRuleOperations[CorrelationRule] = BlueprintRuleOperations(
            client,
            "correlationId",
            ops.LIST_BLUEPRINT_CORRELATIONS,
            ops.GET_BLUEPRINT_CORRELATION,
            ops.ADD_BLUEPRINT_CORRELATION,
            ops.UPDATE_BLUEPRINT_CORRELATION,
            ops.REMOVE_BLUEPRINT_CORRELATION,
        )
        self.files: BlueprintRuleOperations[FileRule] = BlueprintRuleOperations(
            client,
            "fileId",
            ops.LIST_BLUEPRINT_FILES,
            ops.GET_BLUEPRINT_FILE,
            ops.ADD_BLUEPRINT_FILE,
            ops.UPDATE_BLUEPRINT_FILE,
            ops.REMOVE_BLUEPRINT_FILE,
        )
        self.run_configurations: BlueprintRuleOperations[RunConfiguration] = BlueprintRuleOperations(
            client,
            "runConfigurationId",
            ops.LIST_BLUEPRINT_RUN_CONFIGURATIONS,
            ops.GET_BLUEPRINT_RUN_CONFIGURATION,
            ops.ADD_BLUEPRINT_RUN_CONFIGURATION,
            ops.UPDATE_BLUEPRINT_RUN_CONFIGURATION,
            ops.REMOVE_BLUEPRINT_RUN_CONFIGURATION,
        )

    async def create(self, dto: dict[str, Any], options: Options = None) -> HttpResponse[Blueprint]:
        return await self._client.request(ops.CREATE_BLUEPRINT, body=dto, options=options)

    async def list(self, options: Options = None) -> HttpResponse[Page[Blueprint]]:
        return await self._client.request(ops.LIST_BLUEPRINTS, options=options)

    async def get(self, blueprint_id: str, options: Options = None) -> HttpResponse[Blueprint]:
        return await self._client.request(ops.GET_BLUEPRINT, {"blueprintId": blueprint_id}, options=options)

    async def update(self, blueprint_id: str, dto: dict[str, Any], options: Options = None) -> HttpResponse[Blueprint]:
        """Partially update a blueprint."""
        return await self._client.request(
            ops.UPDATE_BLUEPRINT, {"blueprintId": blueprint_id}, body=dto, options=options
        )

    async def delete(self, blueprint_id: str, options: Options = None) -> HttpResponse[Blueprint]:
        return await self._client.request(ops.DELETE_BLUEPRINT, {"blueprintId": blueprint_id}, options=options)
