"""Consecutive-day activity streak."""

from collections.abc import Iterable
from datetime import date, timedelta

from src.domain.models.ledger import Transaction
from src.utils.date_utils import to_day


def compute_streak(transactions: Iterable[Transaction], today: date) -> int:
    """Return the run of consecutive active days ending today or yesterday.

    A missing entry for today does not break the streak; the day may still
    be in progress. Undated entries are ignored. A future-dated entry is the most
    recent day, so it resets the streak to 0.

    Args:
        transactions: Ledger to inspect.
        today: Current calendar day.

    Returns:
        int: Number of consecutive days with at least one entry.
    """
    days = sorted(
        {day for day in (to_day(t.date) for t in transactions) if day is not None},
        reverse=True,
    )
    if not days:
        return 0
    if days[0] not in (today, today - timedelta(days=1)):
        return 0
    streak = 1
    for newer, older in zip(days, days[1:]):
        if (newer - older).days != 1:
            break
        streak += 1
    return streak


__all__ = ["compute_streak"]
