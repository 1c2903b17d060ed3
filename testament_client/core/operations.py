"""Endpoint descriptors for the service's REST API."""

from testament_client.core.request import Operation

# =============================================================================
# Namespaces
# =============================================================================

CREATE_NAMESPACE = Operation("POST", "/api/namespaces", has_body=True)
LIST_NAMESPACES = Operation("GET", "/api/namespaces")
GET_NAMESPACE = Operation("GET", "/api/namespaces/{namespaceId}")
LIST_MEMBER_NAMESPACES = Operation("GET", "/api/users/{memberId}/namespaces")
UPDATE_NAMESPACE = Operation("PUT", "/api/namespaces/{namespaceId}", has_body=True)
DELETE_NAMESPACE = Operation("DELETE", "/api/namespaces/{namespaceId}")

# =============================================================================
# Applications
# =============================================================================

CREATE_APP = Operation("POST", "/api/apps", has_body=True)
LIST_APPS = Operation("GET", "/api/apps")
GET_APP = Operation("GET", "/api/apps/{appId}")
UPDATE_APP = Operation("PUT", "/api/apps/{appId}", has_body=True)
DELETE_APP = Operation("DELETE", "/api/apps/{appId}")

# =============================================================================
# Environments
# =============================================================================

CREATE_ENVIRONMENT = Operation("POST", "/api/environments", has_body=True)
LIST_ENVIRONMENTS = Operation("GET", "/api/environments")
GET_ENVIRONMENT = Operation("GET", "/api/environments/{environmentId}")
UPDATE_ENVIRONMENT = Operation("PUT", "/api/environments/{environmentId}", has_body=True)
DELETE_ENVIRONMENT = Operation("DELETE", "/api/environments/{environmentId}")

# =============================================================================
# Blueprints
# =============================================================================

CREATE_BLUEPRINT = Operation("POST", "/api/blueprints", has_body=True)
LIST_BLUEPRINTS = Operation("GET", "/api/blueprints")
GET_BLUEPRINT = Operation("GET", "/api/blueprints/{blueprintId}")
UPDATE_BLUEPRINT = Operation("PATCH", "/api/blueprints/{blueprintId}", has_body=True)
DELETE_BLUEPRINT = Operation("DELETE", "/api/blueprints/{blueprintId}")

LIST_BLUEPRINT_APPS = Operation("GET", "/api/blueprints/{blueprintId}/apps")
ADD_BLUEPRINT_APP = Operation("POST", "/api/blueprints/{blueprintId}/apps", has_body=True)
REMOVE_BLUEPRINT_APP = Operation("DELETE", "/api/blueprints/{blueprintId}/apps/{appId}")

LIST_BLUEPRINT_ASSERTIONS = Operation("GET", "/api/blueprints/{blueprintId}/assertions")
GET_BLUEPRINT_ASSERTION = Operation("GET", "/api/blueprints/{blueprintId}/assertions/{assertionId}")
ADD_BLUEPRINT_ASSERTION = Operation("POST", "/api/blueprints/{blueprintId}/assertions", has_body=True)
UPDATE_BLUEPRINT_ASSERTION = Operation(
    "PATCH", "/api/blueprints/{blueprintId}/assertions/{assertionId}", has_body=True
)
REMOVE_BLUEPRINT_ASSERTION = Operation("DELETE", "/api/blueprints/{blueprintId}/assertions/{assertionId}")

LIST_BLUEPRINT_PARAMETERS = Operation("GET", "/api/blueprints/{blueprintId}/parameters")
GET_BLUEPRINT_PARAMETER = Operation("GET", "/api/blueprints/{blueprintId}/parameters/{parameterId}")
ADD_BLUEPRINT_PARAMETER = Operation("POST", "/api/blueprints/{blueprintId}/parameters", has_body=True)
UPDATE_BLUEPRINT_PARAMETER = Operation(
    "PATCH", "/api/blueprints/{blueprintId}/parameters/{parameterId}", has_body=True
)
REMOVE_BLUEPRINT_PARAMETER = Operation("DELETE", "/api/blueprints/{blueprintId}/parameters/{parameterId}")

LIST_BLUEPRINT_CORRELATIONS = Operation("GET", "/api/blueprints/{blueprintId}/correlations")
GET_BLUEPRINT_CORRELATION = Operation("GET", "/api/blueprints/{blueprintId}/correlations/{correlationId}")
ADD_BLUEPRINT_CORRELATION = Operation("POST", "/api/blueprints/{blueprintId}/correlations", has_body=True)
UPDATE_BLUEPRINT_CORRELATION = Operation(
    "PATCH", "/api/blueprints/{blueprintId}/correlations/{correlationId}", has_body=True
)
REMOVE_BLUEPRINT_CORRELATION = Operation("DELETE", "/api/blueprints/{blueprintId}/correlations/{correlationId}")

LIST_BLUEPRINT_FILES = Operation("GET", "/api/blueprints/{blueprintId}/files")
GET_BLUEPRINT_FILE = Operation("GET", "/api/blueprints/{blueprintId}/files/{fileId}")
ADD_BLUEPRINT_FILE = Operation("POST", "/api/blueprints/{blueprintId}/files", has_body=True)
UPDATE_BLUEPRINT_FILE = Operation("PATCH", "/api/blueprints/{blueprintId}/files/{fileId}", has_body=True)
REMOVE_BLUEPRINT_FILE = Operation("DELETE", "/api/blueprints/{blueprintId}/files/{fileId}")

LIST_BLUEPRINT_RUN_CONFIGURATIONS = Operation("GET", "/api/blueprints/{blueprintId}/run-configurations")
GET_BLUEPRINT_RUN_CONFIGURATION = Operation(
    "GET", "/api/blueprints/{blueprintId}/run-configurations/{runConfigurationId}"
)
ADD_BLUEPRINT_RUN_CONFIGURATION = Operation(
    "POST", "/api/blueprints/{blueprintId}/run-configurations", has_body=True
)
UPDATE_BLUEPRINT_RUN_CONFIGURATION = Operation(
    "PATCH", "/api/blueprints/{blueprintId}/run-configurations/{runConfigurationId}", has_body=True
)
REMOVE_BLUEPRINT_RUN_CONFIGURATION = Operation(
    "DELETE", "/api/blueprints/{blueprintId}/run-configurations/{runConfigurationId}"
)

GET_BLUEPRINT_PERMISSIONS = Operation("GET", "/api/blueprints/{blueprintId}/permissions")
UPDATE_BLUEPRINT_PERMISSIONS = Operation("PATCH", "/api/blueprints/{blueprintId}/permissions", has_body=True)
LIST_BLUEPRINT_USER_PERMISSIONS = Operation("GET", "/api/blueprints/{blueprintId}/permissions/users")
GET_BLUEPRINT_USER_PERMISSIONS = Operation("GET", "/api/blueprints/{blueprintId}/permissions/users/{userId}")
ADD_BLUEPRINT_USER_PERMISSIONS = Operation(
    "POST", "/api/blueprints/{blueprintId}/permissions/users", has_body=True
)
UPDATE_BLUEPRINT_USER_PERMISSIONS = Operation(
    "PATCH", "/api/blueprints/{blueprintId}/permissions/users/{userId}", has_body=True
)
REMOVE_BLUEPRINT_USER_PERMISSIONS = Operation(
    "DELETE", "/api/blueprints/{blueprintId}/permissions/users/{userId}"
)
