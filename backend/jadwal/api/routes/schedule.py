"""Schedule Routes — list, create, delete and retitle schedules on /schedule.

Invariants:
    - The caller is identified by the `email` query parameter on every method
    - DELETE and PATCH respond before the mutation is persisted: persistence is
      queued on BackgroundTasks and its outcome never reaches the response
    - A missing, non-integer or overflowing `id` is read as 0, which never exists (404)

Design Decisions:
    - Same path, method-dispatched handlers
    - PATCH answers 201 with the in-memory updated schedule
"""

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status

from jadwal.api.deps import get_schedule_handlers
from jadwal.core.validate_input import parse_schedule_id
from jadwal.schemas.envelope import EmptyData, Envelope
from jadwal.schemas.schedule import (
    DayCounts, ScheduleCreate, ScheduleResponse, ScheduleTitleUpdate,
)
from jadwal.services.background_mutations import (
    delete_schedule_in_background, update_schedule_in_background,
)
from jadwal.services.handle_schedules import ScheduleHandlers

router = APIRouter(prefix="/schedule", tags=["schedule"])


@router.get(
    "", response_model=Envelope[list[ScheduleResponse] | DayCounts],
)
async def list_schedules(
    email: str | None = Query(None),
    day: str | None = Query(None),
    handlers: ScheduleHandlers = Depends(get_schedule_handlers),
):
    """Schedules on `day`, or per-day counts when `day` is omitted."""
    data = await handlers.list_schedules(email, day)
    return Envelope[list[ScheduleResponse] | DayCounts](data=data)


@router.post(
    "", response_model=Envelope[ScheduleResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_schedule(
    body: ScheduleCreate | None = None,
    email: str | None = Query(None),
    handlers: ScheduleHandlers = Depends(get_schedule_handlers),
):
    body = body or ScheduleCreate()
    schedule = await handlers.create_schedule(email, body.title, body.day)
    return Envelope[ScheduleResponse](data=schedule)


@router.delete(
    "", response_model=Envelope[EmptyData], status_code=status.HTTP_200_OK,
)
async def delete_schedule(
    background_tasks: BackgroundTasks,
    email: str | None = Query(None),
    schedule_id: str | None = Query(None, alias="id"),
    handlers: ScheduleHandlers = Depends(get_schedule_handlers),
):
    """Authorize now, delete after the response is sent."""
    target_id = await handlers.authorize_delete(
        email, parse_schedule_id(schedule_id),
    )
    background_tasks.add_task(delete_schedule_in_background, target_id)
    return Envelope[EmptyData](data=EmptyData())


@router.patch(
    "", response_model=Envelope[ScheduleResponse],
    status_code=status.HTTP_201_CREATED,
)
async def update_schedule(
    background_tasks: BackgroundTasks,
    body: ScheduleTitleUpdate | None = None,
    email: str | None = Query(None),
    schedule_id: str | None = Query(None, alias="id"),
    handlers: ScheduleHandlers = Depends(get_schedule_handlers),
):
    """Retitle a schedule. The response shows the new title before it is stored."""
    body = body or ScheduleTitleUpdate()
    updated = await handlers.apply_title_update(
        email, parse_schedule_id(schedule_id), body.title,
    )
    background_tasks.add_task(
        update_schedule_in_background, updated.id, updated.title, updated.day,
    )
    return Envelope[ScheduleResponse](data=updated)
