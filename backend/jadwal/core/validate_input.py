"""Input Validation — boundary checks for email, title and weekday.

Invariants:
    - Every check runs before any store access
    - Failures raise InputValidationError with the exact user-facing message
    - Email check is syntax-only (no DNS lookups, no special-use or dotless domain rules)
    - Schedule ids are parsed, never validated: malformed ids become 0

Design Decisions:
    - email-validator over a hand-written regex: same grammar pydantic's EmailStr uses
    - Checks are separate functions, not one validate_all(): each endpoint
      orders them differently and the order decides which message wins
"""

import re

from email_validator import EmailNotValidError, validate_email as _check_email_syntax

from jadwal.core.domain_types import (
    EMAIL_MAX_LENGTH, QUERY_INT_MAX, QUERY_INT_MIN, TITLE_MAX_LENGTH, VALID_DAYS,
)
from jadwal.core.errors import InputValidationError


def validate_email(email: str | None) -> str:
    """Reject empty or malformed addresses. Returns the address unchanged."""
    if not email:
        raise InputValidationError("Email is required", "email")
    if len(email) > EMAIL_MAX_LENGTH:
        raise InputValidationError("Invalid email", "email")
    try:
        _check_email_syntax(
            email,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        raise InputValidationError("Invalid email", "email")
    return email


def validate_title(title: str | None) -> str:
    if not title:
        raise InputValidationError("Title is required", "title")
    if len(title) > TITLE_MAX_LENGTH:
        raise InputValidationError("Title is too long", "title")
    return title


def validate_day(day: str) -> str:
    """Day must be one of the five lowercase weekday names."""
    if day not in VALID_DAYS:
        raise InputValidationError("Day is invalid", "day")
    return day


def validate_required_day(day: str | None) -> str:
    if not day:
        raise InputValidationError("Day is required", "day")
    return validate_day(day)


_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_schedule_id(raw: str | None) -> int:
    """Lenient id parse: anything that is not a signed 64-bit integer becomes 0.

    Never raises, so a bad id cannot pre-empt the email and user checks;
    id 0 never exists and ends up as a 404.
    """
    if not raw or not _INTEGER.fullmatch(raw):
        return 0
    value = int(raw)
    if not QUERY_INT_MIN <= value <= QUERY_INT_MAX:
        return 0
    return value
