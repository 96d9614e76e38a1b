"""Repositories — SQLAlchemy implementations of the core repository protocols.

Invariants:
    - One repository per table, bound to a single AsyncSession
    - Repositories commit their own writes; reads never commit
"""

from jadwal.repositories.user_repo import SqlUserRepository
from jadwal.repositories.schedule_repo import SqlScheduleRepository

__all__ = ["SqlUserRepository", "SqlScheduleRepository"]
