"""Request Dependencies — build the per-request handler context.

Invariants:
    - Both repositories share the request's single AsyncSession
      (FastAPI caches get_db per request)
    - Handlers receive repositories, never the session or the global manager
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from jadwal.infrastructure.database import get_db
from jadwal.repositories import SqlScheduleRepository, SqlUserRepository
from jadwal.services.handle_checkin import CheckinHandlers
from jadwal.services.handle_schedules import ScheduleHandlers


def get_user_repository(db: AsyncSession = Depends(get_db)) -> SqlUserRepository:
    return SqlUserRepository(db)


def get_schedule_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlScheduleRepository:
    return SqlScheduleRepository(db)


def get_checkin_handlers(
    users: SqlUserRepository = Depends(get_user_repository),
) -> CheckinHandlers:
    return CheckinHandlers(users)


def get_schedule_handlers(
    users: SqlUserRepository = Depends(get_user_repository),
    schedules: SqlScheduleRepository = Depends(get_schedule_repository),
) -> ScheduleHandlers:
    return ScheduleHandlers(users, schedules)
