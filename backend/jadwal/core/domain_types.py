"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ScheduleId wrap ints — never use a bare int for identities in domain logic
    - Weekday is a closed enumeration: monday..friday, lowercase
    - VALID_DAYS is immutable and derived from Weekday (single source of truth)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
ScheduleId = NewType("ScheduleId", int)


# ─── Limits ──────────────────────────────────────────────────────

EMAIL_MAX_LENGTH: int = 100
TITLE_MAX_LENGTH: int = 50
DAY_MAX_LENGTH: int = 10

# schedules.id is a 32-bit INTEGER column; query ids parse as signed 64-bit
SCHEDULE_ID_MAX: int = 2**31 - 1
QUERY_INT_MIN: int = -(2**63)
QUERY_INT_MAX: int = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class Weekday(str, Enum):
    """Days a schedule entry can be assigned to. Weekends are not schedulable."""
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"


VALID_DAYS: frozenset[str] = frozenset(day.value for day in Weekday)
