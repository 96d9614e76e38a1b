"""Check-in Handler — returns the existing user for an email or registers one.

Invariants:
    - Email validated before any store access
    - Repeated check-ins with the same email return the same user id
"""

import logging

from jadwal.core.repository_protocols import UserRepository
from jadwal.core.validate_input import validate_email
from jadwal.schemas.user import UserResponse

logger = logging.getLogger(__name__)


class CheckinHandlers:
    """User registration handler."""

    def __init__(self, users: UserRepository):
        self.users = users

    async def check_in(self, email: str | None) -> UserResponse:
        email = validate_email(email)
        user = await self.users.find_or_create(email)
        logger.info("User checked in", extra={"user_id": user.id})
        return UserResponse.model_validate(user)
