"""User ORM — identity for check-in, keyed by email.

Invariants:
    - id is an auto-increment integer primary key
    - email is unique; rows are never mutated or deleted by this service
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from jadwal.core.domain_types import EMAIL_MAX_LENGTH
from jadwal.db.base import Base


class User(Base):
    """A person identified only by email address."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    email: Mapped[str] = mapped_column(
        String(EMAIL_MAX_LENGTH), nullable=False, unique=True,
    )