"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - "Not found" is None, store failures are DatabaseError (never conflated)
    - Day lookups never raise: failures degrade to empty results

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass plain fakes
    - Async in Protocol: implementations do IO, the pure functions that
      consume their results stay synchronous
"""

from typing import Protocol

from jadwal.core.domain_types import ScheduleId, UserId


class UserLike(Protocol):
    """Structural contract for User rows handed to handlers."""
    id: int
    email: str


class ScheduleLike(Protocol):
    """Structural contract for Schedule rows handed to handlers."""
    id: int
    user_id: int | None
    title: str
    day: str


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def find_or_create(self, email: str) -> UserLike: ...
    async def get_by_email(self, email: str) -> UserLike | None: ...


class ScheduleRepository(Protocol):
    """Contract for schedule persistence — implemented by shell."""
    async def create(
        self, user_id: UserId, title: str, day: str,
    ) -> ScheduleLike: ...
    async def get_by_id(self, schedule_id: ScheduleId) -> ScheduleLike | None: ...
    async def get_for_user_on_day(
        self, user_id: UserId, day: str,
    ) -> list[ScheduleLike]: ...
    async def get_counts_per_day(self, user_id: UserId) -> dict[str, int]: ...
    async def update(
        self, schedule_id: ScheduleId, title: str, day: str,
    ) -> int: ...
    async def delete(self, schedule_id: ScheduleId) -> int: ...
