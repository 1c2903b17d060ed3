"""Tests for request building."""

import pytest

from testament_client.core import operations as ops
from testament_client.core.http import MissingPathParameter, ValidationError
from testament_client.core.request import (
    Operation,
    RequestOptions,
    build_request,
    build_url,
    expand_path,
)

BASE_URL = "http://localhost:8081"

ALL_OPERATIONS = [value for name, value in vars(ops).items() if isinstance(value, Operation)]


@pytest.mark.parametrize("operation", ALL_OPERATIONS, ids=lambda op: f"{op.method} {op.path}")
def test_all_placeholders_substituted(operation: Operation) -> None:
    params = {name: f"{name}-1" for name in operation.placeholders}

    request = build_request(BASE_URL, operation, params)

    assert "{" not in request.url and "}" not in request.url
    assert request.url.startswith(f"{BASE_URL}/api/")
    assert "?" not in request.url
    assert request.method == operation.method


@pytest.mark.parametrize(
    "operation",
    [op for op in ALL_OPERATIONS if op.placeholders],
    ids=lambda op: f"{op.method} {op.path}",
)
def test_missing_placeholder_fails(operation: Operation) -> None:
    params = {name: "x" for name in operation.placeholders[:-1]}

    with pytest.raises(MissingPathParameter) as exc_info:
        build_request(BASE_URL, operation, params)

    assert exc_info.value.parameter == operation.placeholders[-1]
    assert exc_info.value.template == operation.path
    assert isinstance(exc_info.value, ValidationError)


def test_none_value_counts_as_missing() -> None:
    with pytest.raises(MissingPathParameter):
        expand_path("/api/namespaces/{namespaceId}", {"namespaceId": None})


def test_extra_path_params_are_ignored() -> None:
    assert expand_path("/api/apps/{appId}", {"appId": "a1", "other": "x"}) == "/api/apps/a1"


def test_path_values_are_url_encoded() -> None:
    assert expand_path("/api/namespaces/{namespaceId}", {"namespaceId": "a b/c?"}) == "/api/namespaces/a%20b%2Fc%3F"


def test_non_string_path_values() -> None:
    assert expand_path("/api/apps/{appId}", {"appId": 42}) == "/api/apps/42"


def test_absolute_path_replaces_base_path() -> None:
    assert build_url("http://host:8081/prefix/", "/api/apps") == "http://host:8081/api/apps"


def test_query_string_encoding() -> None:
    url = build_url(BASE_URL, "/api/blueprints", {"description": "Simple Blueprint", "metadata.creator.userId": "u&1"})

    assert url == f"{BASE_URL}/api/blueprints?description=Simple+Blueprint&metadata.creator.userId=u%261"


def test_empty_query_omits_question_mark() -> None:
    request = build_request(BASE_URL, ops.LIST_NAMESPACES, options=RequestOptions(query={}))

    assert request.url == f"{BASE_URL}/api/namespaces"


def test_headers_are_merged_verbatim() -> None:
    options = RequestOptions(headers={"X-User-Id": "123", "accept": "application/json"})

    request = build_request(BASE_URL, ops.GET_APP, {"appId": "a1"}, options)

    assert request.headers == {"X-User-Id": "123", "accept": "application/json"}


def test_body_passed_through_unserialized() -> None:
    dto = {"name": "Namespace 1", "members": [{"userId": "u1"}]}

    request = build_request(BASE_URL, ops.CREATE_NAMESPACE, body=dto)

    assert request.body is dto


def test_body_dropped_for_operations_without_one() -> None:
    request = build_request(BASE_URL, ops.DELETE_NAMESPACE, {"namespaceId": "n1"}, body={"ignored": True})

    assert request.body is None
    assert request.url == f"{BASE_URL}/api/namespaces/n1"


def test_request_options_coerce() -> None:
    assert RequestOptions.coerce(None) == RequestOptions()
    options = RequestOptions(headers={"a": "b"})
    assert RequestOptions.coerce(options) is options
    assert RequestOptions.coerce({"query": {"q": "1"}}) == RequestOptions(headers={}, query={"q": "1"})


def test_update_operations_use_expected_methods() -> None:
    assert ops.UPDATE_NAMESPACE.method == "PUT"
    assert ops.UPDATE_APP.method == "PUT"
    assert ops.UPDATE_ENVIRONMENT.method == "PUT"
    assert ops.UPDATE_BLUEPRINT.method == "PATCH"
    assert ops.UPDATE_BLUEPRINT_PARAMETER.method == "PATCH"
    assert ops.UPDATE_BLUEPRINT_PERMISSIONS.method == "PATCH"
