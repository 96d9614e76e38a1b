"""Error Hierarchy — typed, categorized exceptions for all Jadwal failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - to_response() produces the {status, message} envelope; status is the HTTP reason phrase
    - No internal details leaked in user-facing messages (DatabaseError always says
      "Something went wrong", the driver message goes to the log only)

Design Decisions:
    - Single hierarchy with JadwalError base: FastAPI global handler catches all
      (uniform error shape across endpoints)
"""

from enum import Enum
from http import HTTPStatus


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    FORBIDDEN = "forbidden"
    DATABASE = "database"


class JadwalError(Exception):
    """Base exception for all Jadwal errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    @property
    def status_text(self) -> str:
        return HTTPStatus(self.http_status).phrase

    def to_response(self) -> dict:
        """Convert to the standard {status, message} error envelope."""
        return {"status": self.status_text, "message": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class InputValidationError(JadwalError):
    """Request input is missing or malformed."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400,
        )
        self.field = field


class ResourceNotFoundError(JadwalError):
    """Requested user or schedule does not exist."""
    def __init__(self, message: str, resource_type: str):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.resource_type = resource_type


class AccessDeniedError(JadwalError):
    """Schedule belongs to a different user."""
    def __init__(self):
        super().__init__(
            "Access denied!", "ACCESS_DENIED", ErrorCategory.FORBIDDEN, 403,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(JadwalError):
    """Database operation failed."""
    def __init__(self, detail: str, operation: str):
        super().__init__(
            "Something went wrong", "DATABASE_ERROR", ErrorCategory.DATABASE, 500,
        )
        self.detail = detail
        self.operation = operation
