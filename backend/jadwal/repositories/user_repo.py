"""User Repository — find-or-create and lookup by email.

Invariants:
    - get_by_email returns None for "not found"; any other store failure is DatabaseError
    - find_or_create is idempotent per email: a second call returns the first row

Design Decisions:
    - Unique index on users.email turns the check-then-insert race into an
      IntegrityError; the loser rolls back and re-reads the winner's row
      instead of creating a duplicate
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jadwal.core.errors import DatabaseError
from jadwal.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """User persistence backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_email(self, email: str) -> User | None:
        try:
            result = await self.db.execute(
                select(User).where(User.email == email).order_by(User.id),
            )
        except SQLAlchemyError as e:
            logger.error(f"User lookup failed: {e}", extra={"operation": "query"})
            raise DatabaseError(str(e), "query")
        return result.scalars().first()

    async def find_or_create(self, email: str) -> User:
        """Return the user with this email, inserting one on first check-in."""
        user = await self.get_by_email(email)
        if user:
            return user

        user = User(email=email)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info("Concurrent check-in lost insert race, re-reading user")
            existing = await self.get_by_email(email)
            if existing is None:
                raise DatabaseError("User insert conflicted without a row", "insert")
            return existing
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"User insert failed: {e}", extra={"operation": "insert"})
            raise DatabaseError(str(e), "insert")

        logger.info("User created", extra={"user_id": user.id})
        return user
