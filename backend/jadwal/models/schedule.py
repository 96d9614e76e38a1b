"""Schedule ORM — a titled entry on one weekday, owned by a user.

Invariants:
    - user_id references users.id (foreign key, no cascade)
    - title fits VARCHAR(50); day fits VARCHAR(10) and is validated at the boundary,
      not by a CHECK constraint
    - idx_day index supports the per-day lookups
"""

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from jadwal.core.domain_types import DAY_MAX_LENGTH, TITLE_MAX_LENGTH
from jadwal.db.base import Base


class Schedule(Base):
    __tablename__ = "schedules"
    __table_args__ = (Index("idx_day", "day"),)

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True,
    )
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    day: Mapped[str] = mapped_column(String(DAY_MAX_LENGTH), nullable=False)