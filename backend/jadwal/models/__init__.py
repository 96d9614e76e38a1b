"""ORM Models — SQLAlchemy declarative models for users and their schedules.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the owner; every Schedule row references a user

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all runs
"""

from jadwal.models.user import User  # noqa: F401
from jadwal.models.schedule import Schedule  # noqa: F401
