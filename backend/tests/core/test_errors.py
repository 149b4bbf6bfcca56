"""Error hierarchy: HTTP status, code and response envelope per error type."""

import pytest

from ecoaware.core.errors import (
    AuthenticationError, BusinessRuleError, ConflictError, DatabaseError,
    ErrorCategory, IdentityProviderError, PermissionDeniedError,
    ResourceNotFoundError,
)


@pytest.mark.parametrize("error, status, code", [
    (ResourceNotFoundError("Event", 3), 404, "RESOURCE_NOT_FOUND"),
    (AuthenticationError(), 401, "UNAUTHORIZED"),
    (PermissionDeniedError(), 403, "FORBIDDEN"),
    (BusinessRuleError("past", "EVENT_IS_PAST"), 400, "EVENT_IS_PAST"),
    (ConflictError("dup"), 409, "CONFLICT"),
    (DatabaseError("gone", "execute"), 503, "DATABASE_ERROR"),
    (IdentityProviderError("timeout"), 502, "IDENTITY_PROVIDER_ERROR"),
])
def test_status_and_code(error, status, code):
    assert error.http_status == status
    assert error.code == code


def test_not_found_response_names_resource():
    body = ResourceNotFoundError("Post", 12).to_response()["error"]
    assert body["message"] == "Post not found"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["context"] == {"resource": "Post", "resource_id": "12"}


def test_database_error_message_includes_operation():
    err = DatabaseError("Integrity constraint violated", "commit")
    assert err.message == "Database commit failed: Integrity constraint violated"
    assert err.operation == "commit"
