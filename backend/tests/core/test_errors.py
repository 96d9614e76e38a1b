"""Error Hierarchy — status codes, codes and the {status, message} envelope."""

from jadwal.core.errors import (
    AccessDeniedError, DatabaseError, ErrorCategory, InputValidationError,
    JadwalError, ResourceNotFoundError,
)


def test_all_errors_share_base():
    for exc in (
        InputValidationError("Email is required", "email"),
        ResourceNotFoundError("Email is not found", "User"),
        AccessDeniedError(),
        DatabaseError("boom", "query"),
    ):
        assert isinstance(exc, JadwalError)


def test_validation_error_envelope():
    exc = InputValidationError("Title is required", "title")
    assert exc.http_status == 400
    assert exc.category is ErrorCategory.VALIDATION
    assert exc.to_response() == {
        "status": "Bad Request", "message": "Title is required",
    }


def test_not_found_envelope():
    exc = ResourceNotFoundError("Schedule with ID 9 Not Found", "Schedule")
    assert exc.to_response() == {
        "status": "Not Found", "message": "Schedule with ID 9 Not Found",
    }


def test_access_denied_envelope():
    assert AccessDeniedError().to_response() == {
        "status": "Forbidden", "message": "Access denied!",
    }


def test_database_error_hides_detail():
    exc = DatabaseError("connection refused on 10.0.0.3", "query")
    assert exc.http_status == 500
    assert exc.to_response() == {
        "status": "Internal Server Error", "message": "Something went wrong",
    }
    assert "10.0.0.3" not in str(exc.to_response())
    assert exc.detail == "connection refused on 10.0.0.3"
    assert exc.operation == "query"


def test_error_categories_cover_raised_errors_only():
    assert {c.name for c in ErrorCategory} == {
        "VALIDATION", "RESOURCE_NOT_FOUND", "FORBIDDEN", "DATABASE",
    }
