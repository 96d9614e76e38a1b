"""Check-in Route — POST /checkin registers or returns a user by email."""

from fastapi import APIRouter, Depends, status

from jadwal.api.deps import get_checkin_handlers
from jadwal.schemas.envelope import Envelope
from jadwal.schemas.user import CheckinRequest, UserResponse
from jadwal.services.handle_checkin import CheckinHandlers

router = APIRouter(tags=["checkin"])


@router.post(
    "/checkin", response_model=Envelope[UserResponse],
    status_code=status.HTTP_200_OK,
)
async def checkin(
    body: CheckinRequest | None = None,
    handlers: CheckinHandlers = Depends(get_checkin_handlers),
):
    """Find or create the user for this email. A missing body counts as no email."""
    user = await handlers.check_in(body.email if body else None)
    return Envelope[UserResponse](data=user)
