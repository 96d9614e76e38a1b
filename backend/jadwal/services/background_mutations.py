"""Background Mutations — fire-and-forget persistence for schedule delete and update.

Invariants:
    - Runs after the HTTP response is sent (Starlette BackgroundTasks); nothing
      flows back to the client, success or failure
    - Opens its own DB session: the request session is already closed when this runs
    - Never raises: store failures are logged with schedule_id and dropped

Design Decisions:
    - Fire-and-forget is accepted here: a client may see 200/201 for a mutation
      that later fails. No retry, no dead-letter queue; the log is the only trace
"""

import logging

from jadwal.core.domain_types import ScheduleId
from jadwal.core.errors import DatabaseError
from jadwal.infrastructure.database import get_db_manager
from jadwal.repositories.schedule_repo import SqlScheduleRepository

logger = logging.getLogger(__name__)


async def delete_schedule_in_background(schedule_id: ScheduleId) -> None:
    """Background task: delete one schedule row."""
    manager = get_db_manager()
    if not manager:
        logger.error(
            f"Cannot delete schedule {schedule_id}: database not initialized",
            extra={"schedule_id": schedule_id},
        )
        return

    try:
        async with manager.session() as db:
            deleted = await SqlScheduleRepository(db).delete(schedule_id)
    except DatabaseError as e:
        logger.error(
            f"Background delete of schedule {schedule_id} failed: {e.detail}",
            extra={
                "schedule_id": schedule_id,
                "error_code": e.code,
                "operation": "delete",
            },
        )
        return

    if not deleted:
        logger.warning(
            f"Schedule {schedule_id} already deleted (background cleanup)",
            extra={"schedule_id": schedule_id},
        )
        return
    logger.info(
        f"Schedule {schedule_id} deleted in background",
        extra={"schedule_id": schedule_id},
    )


async def update_schedule_in_background(
    schedule_id: ScheduleId, title: str, day: str,
) -> None:
    """Background task: overwrite title and day of one schedule row."""
    manager = get_db_manager()
    if not manager:
        logger.error(
            f"Cannot update schedule {schedule_id}: database not initialized",
            extra={"schedule_id": schedule_id},
        )
        return

    try:
        async with manager.session() as db:
            updated = await SqlScheduleRepository(db).update(
                schedule_id, title, day,
            )
    except DatabaseError as e:
        logger.error(
            f"Background update of schedule {schedule_id} failed: {e.detail}",
            extra={
                "schedule_id": schedule_id,
                "error_code": e.code,
                "operation": "update",
            },
        )
        return

    if not updated:
        logger.warning(
            f"Schedule {schedule_id} vanished before background update",
            extra={"schedule_id": schedule_id},
        )
        return
    logger.info(
        f"Schedule {schedule_id} updated in background",
        extra={"schedule_id": schedule_id},
    )
