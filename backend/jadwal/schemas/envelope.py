"""Response Envelope — uniform {status, message, data} wrapper for every endpoint.

Invariants:
    - Success envelopes carry status = message = "Success"
    - data is one of: UserResponse, ScheduleResponse, list[ScheduleResponse],
      DayCounts, EmptyData (serialized as {})
    - Error envelopes ({status, message}, no data) come from JadwalError.to_response()
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

SUCCESS = "Success"

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Tagged response envelope parameterized over the payload type."""
    status: str = SUCCESS
    message: str = SUCCESS
    data: T


class EmptyData(BaseModel):
    """Payload for operations that return nothing (serializes to {})."""
    pass
