"""Day Tallies — fold grouped (day, count) rows into a full five-day mapping.

Invariants:
    - Result always has exactly the five Weekday keys, in weekday order
    - Days absent from the rows default to 0
    - Rows for days outside VALID_DAYS are ignored (never add keys)
"""

from collections.abc import Iterable

from jadwal.core.domain_types import VALID_DAYS, Weekday


def empty_day_counts() -> dict[str, int]:
    return {day.value: 0 for day in Weekday}


def tally_day_counts(rows: Iterable[tuple[str, int]]) -> dict[str, int]:
    """Overlay GROUP BY rows onto zero-seeded counts."""
    counts = empty_day_counts()
    for day, count in rows:
        if day in VALID_DAYS:
            counts[day] = int(count)
    return counts
