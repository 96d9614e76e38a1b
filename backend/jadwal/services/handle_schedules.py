"""Schedule Handlers — list, create, and authorize delete/update of a user's schedules.

Invariants:
    - Every operation validates the email first, then resolves the user
      (404 "Email is not found" when absent, DatabaseError → 500 otherwise)
    - Delete and update check ownership before anything is dispatched
    - Delete/update handlers only validate and authorize: persistence is
      dispatched by the route as a background task (see background_mutations.py)
    - The update result reflects the intended post-update state, not the stored row

Design Decisions:
    - create_schedule validates title and day before resolving the user,
      list_schedules resolves the user before validating the day: each order
      decides which error a request with several problems receives
"""

import logging

from jadwal.core.domain_types import ScheduleId, UserId
from jadwal.core.enforce_ownership import check_ownership
from jadwal.core.errors import AccessDeniedError, ResourceNotFoundError
from jadwal.core.repository_protocols import (
    ScheduleLike, ScheduleRepository, UserLike, UserRepository,
)
from jadwal.core.validate_input import (
    validate_day, validate_email, validate_required_day, validate_title,
)
from jadwal.schemas.schedule import DayCounts, ScheduleResponse

logger = logging.getLogger(__name__)


class ScheduleHandlers:
    """Schedule endpoint handlers."""

    def __init__(self, users: UserRepository, schedules: ScheduleRepository):
        self.users = users
        self.schedules = schedules

    async def list_schedules(
        self, email: str | None, day: str | None,
    ) -> list[ScheduleResponse] | DayCounts:
        """Schedules on one day when day is given, otherwise counts for all five days."""
        email = validate_email(email)
        user = await self._resolve_user(email)

        if day:
            day = validate_day(day)
            rows = await self.schedules.get_for_user_on_day(UserId(user.id), day)
            return [ScheduleResponse.model_validate(row) for row in rows]

        counts = await self.schedules.get_counts_per_day(UserId(user.id))
        return DayCounts(**counts)

    async def create_schedule(
        self, email: str | None, title: str | None, day: str | None,
    ) -> ScheduleResponse:
        email = validate_email(email)
        title = validate_title(title)
        day = validate_required_day(day)
        user = await self._resolve_user(email)

        schedule = await self.schedules.create(UserId(user.id), title, day)
        return ScheduleResponse.model_validate(schedule)

    async def authorize_delete(
        self, email: str | None, schedule_id: int,
    ) -> ScheduleId:
        """Check the caller may delete the schedule. Returns the id to delete."""
        email = validate_email(email)
        user = await self._resolve_user(email)
        schedule = await self._get_owned_schedule(user, ScheduleId(schedule_id))
        return ScheduleId(schedule.id)

    async def apply_title_update(
        self, email: str | None, schedule_id: int, title: str | None,
    ) -> ScheduleResponse:
        """Check the caller may retitle the schedule and return its updated form.

        The returned schedule is built in memory; persisting it is the caller's job.
        """
        email = validate_email(email)
        user = await self._resolve_user(email)
        schedule = await self._get_owned_schedule(user, ScheduleId(schedule_id))
        title = validate_title(title)

        current = ScheduleResponse.model_validate(schedule)
        return current.model_copy(update={"title": title})

    async def _resolve_user(self, email: str) -> UserLike:
        user = await self.users.get_by_email(email)
        if user is None:
            raise ResourceNotFoundError("Email is not found", "User")
        return user

    async def _get_owned_schedule(
        self, user: UserLike, schedule_id: ScheduleId,
    ) -> ScheduleLike:
        schedule = await self.schedules.get_by_id(schedule_id)
        if schedule is None:
            raise ResourceNotFoundError(
                f"Schedule with ID {schedule_id} Not Found", "Schedule",
            )
        try:
            check_ownership(schedule.user_id, UserId(user.id))
        except AccessDeniedError:
            logger.warning(
                "Ownership check failed",
                extra={"user_id": user.id, "schedule_id": schedule_id},
            )
            raise
        return schedule
