"""Schedule Repository — CRUD plus per-day lookups for a user's schedules.

Invariants:
    - get_by_id returns None for "not found", DatabaseError for store failures
    - Ids outside the INTEGER column range are "not found" without a query
    - get_for_user_on_day and get_counts_per_day NEVER raise: a failed query
      degrades to [] / all-zero counts and is logged at WARNING
    - get_counts_per_day always returns the five weekday keys

Design Decisions:
    - Swallowing failures in the day lookups keeps the read endpoints answering
      200 during partial store outages; callers cannot tell "no data" from
      "lookup failed" and do not try to
    - update/delete are plain awaitables; fire-and-forget dispatch lives in
      services/background_mutations.py
"""

import logging

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jadwal.core.day_counts import empty_day_counts, tally_day_counts
from jadwal.core.domain_types import SCHEDULE_ID_MAX, ScheduleId, UserId
from jadwal.core.errors import DatabaseError
from jadwal.models.schedule import Schedule

logger = logging.getLogger(__name__)


class SqlScheduleRepository:
    """Schedule persistence backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user_id: UserId, title: str, day: str) -> Schedule:
        schedule = Schedule(user_id=user_id, title=title, day=day)
        self.db.add(schedule)
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Schedule insert failed: {e}",
                extra={"user_id": user_id, "operation": "insert"},
            )
            raise DatabaseError(str(e), "insert")
        logger.info(
            "Schedule created",
            extra={"user_id": user_id, "schedule_id": schedule.id},
        )
        return schedule

    async def get_by_id(self, schedule_id: ScheduleId) -> Schedule | None:
        if not 1 <= schedule_id <= SCHEDULE_ID_MAX:
            return None
        try:
            result = await self.db.execute(
                select(Schedule).where(Schedule.id == schedule_id),
            )
        except SQLAlchemyError as e:
            logger.error(
                f"Schedule lookup failed: {e}",
                extra={"schedule_id": schedule_id, "operation": "query"},
            )
            raise DatabaseError(str(e), "query")
        return result.scalar_one_or_none()

    async def get_for_user_on_day(
        self, user_id: UserId, day: str,
    ) -> list[Schedule]:
        """All of the user's schedules on exactly this day; [] on any failure."""
        try:
            result = await self.db.execute(
                select(Schedule)
                .where(Schedule.user_id == user_id)
                .where(Schedule.day == day)
                .order_by(Schedule.id),
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.warning(
                f"Schedule day lookup failed, returning empty list: {e}",
                extra={"user_id": user_id, "operation": "query"},
            )
            return []

    async def get_counts_per_day(self, user_id: UserId) -> dict[str, int]:
        """Schedule count per weekday; all zeros on any failure."""
        try:
            result = await self.db.execute(
                select(Schedule.day, func.count())
                .where(Schedule.user_id == user_id)
                .group_by(Schedule.day),
            )
            return tally_day_counts(result.all())
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.warning(
                f"Schedule count lookup failed, returning zeros: {e}",
                extra={"user_id": user_id, "operation": "query"},
            )
            return empty_day_counts()

    async def update(self, schedule_id: ScheduleId, title: str, day: str) -> int:
        """Overwrite title and day. Returns the number of rows touched."""
        result = await self.db.execute(
            update(Schedule)
            .where(Schedule.id == schedule_id)
            .values(title=title, day=day),
        )
        await self.db.commit()
        return result.rowcount

    async def delete(self, schedule_id: ScheduleId) -> int:
        result = await self.db.execute(
            delete(Schedule).where(Schedule.id == schedule_id),
        )
        await self.db.commit()
        return result.rowcount
