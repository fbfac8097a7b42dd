"""Tests for domain exceptions (error_code, message, details) and their HTTP mapping."""

import pytest

from estates.core.exception_handlers import ERROR_CODE_STATUS
from estates.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    EstatesException,
    ResourceNotFoundException,
    StateConflictException,
    ValidationException,
)


def test_estates_exception_default_error_code() -> None:
    """Base EstatesException uses class name as error_code when not provided."""
    exc = EstatesException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "EstatesException"
    assert exc.details == {}


def test_estates_exception_to_dict() -> None:
    exc = EstatesException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("property", "p-1")
    assert exc.message == "property not found: p-1"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "property", "resource_id": "p-1"}


def test_authorization_exception_with_resource_and_action() -> None:
    exc = AuthorizationException("building", "delete")
    assert exc.message == "Permission denied: delete on building"
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.details == {"resource": "building", "action": "delete"}


def test_authorization_exception_custom_message() -> None:
    exc = AuthorizationException(message="Administrator authority required")
    assert exc.message == "Administrator authority required"
    assert exc.details == {}


def test_authentication_exception_default_message() -> None:
    exc = AuthenticationException()
    assert exc.message == "Authentication failed"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_validation_exception_with_and_without_field() -> None:
    assert ValidationException("Bad", field="files").details == {"field": "files"}
    assert ValidationException("Bad").details == {}


def test_state_conflict_exception() -> None:
    exc = StateConflictException("Identity is already enabled", "enabled")
    assert exc.error_code == "STATE_CONFLICT"
    assert exc.details == {"field": "enabled"}


@pytest.mark.parametrize(
    ("exc", "status"),
    [
        (ResourceNotFoundException("identity", "x"), 404),
        (AuthenticationException(), 401),
        (AuthorizationException("property", "update"), 403),
        (ValidationException("bad"), 400),
        (StateConflictException("same"), 409),
    ],
)
def test_error_codes_map_to_http_status(exc: EstatesException, status: int) -> None:
    assert ERROR_CODE_STATUS[exc.error_code] == status
