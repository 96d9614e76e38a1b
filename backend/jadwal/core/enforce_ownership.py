"""Ownership Enforcement — a schedule is only mutable by the user who owns it."""

from jadwal.core.domain_types import UserId
from jadwal.core.errors import AccessDeniedError


def check_ownership(schedule_owner_id: UserId | None, user_id: UserId) -> None:
    """Raise AccessDeniedError unless the resolved user owns the schedule."""
    if schedule_owner_id != user_id:
        raise AccessDeniedError()
