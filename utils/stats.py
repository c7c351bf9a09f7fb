import calendar
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from models.elo import EloEntry
from models.stats import EloStats, RecentPerformance

DEFAULT_RECENT_WINDOW = 10


class Period(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


def shift_months(moment: datetime, months: int) -> datetime:
    """Move back `months` calendar months, clamping to the last day of the target month."""
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month_zero = divmod(month_index, 12)
    month = month_zero + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def period_cutoff(period, now: datetime) -> datetime:
    period = Period(period)
    if period is Period.WEEK:
        return now - timedelta(days=7)
    if period is Period.MONTH:
        return shift_months(now, 1)
    return shift_months(now, 12)


def elo_stats(
    entries: Iterable[EloEntry],
    period,
    now: Optional[datetime] = None,
) -> EloStats:
    """Sum rating change over entries dated on or after the period cutoff."""
    now = now or datetime.now(timezone.utc)
    cutoff = period_cutoff(period, now)
    selected = sorted(
        (entry for entry in entries if entry.date >= cutoff),
        key=lambda entry: (entry.date, entry.id),
    )
    change = sum(entry.elo_change for entry in selected)
    average = change / len(selected) if selected else 0.0
    return EloStats(change=change, entries=selected, average_per_game=average)


def best_streak(changes: Iterable[int]) -> int:
    max_streak = 0
    current = 0
    for change in changes:
        if change > 0:
            current += 1
            max_streak = max(max_streak, current)
        else:
            current = 0
    return max_streak


def recent_performance(
    entries: Sequence[EloEntry],
    limit: int = DEFAULT_RECENT_WINDOW,
) -> RecentPerformance:
    """Win rate, average change and best streak over the last `limit` entries.

    `entries` are expected oldest first, as the store returns them.
    """
    recent: List[EloEntry] = list(entries)[-limit:] if limit > 0 else []
    if not recent:
        return RecentPerformance()
    changes = [entry.elo_change for entry in recent]
    wins = sum(1 for change in changes if change > 0)
    return RecentPerformance(
        games=len(changes),
        win_rate=wins / len(changes) * 100,
        average_change=sum(changes) / len(changes),
        best_streak=best_streak(changes),
    )
