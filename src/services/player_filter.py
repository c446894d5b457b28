"""
Date range filtering for player collections.

A calendar date used as a bound spans its whole day: the start bound is
the first millisecond of the day and the end bound the last one, both in
local time unless a time zone is given.
"""

from datetime import date, datetime, time, tzinfo
from typing import Optional, Sequence, Tuple

from src.models.date_range import DateRange
from src.models.player import Player

_END_OF_DAY = time(23, 59, 59, 999000)


def _localize(dt: datetime, tz: Optional[tzinfo]) -> datetime:
    if tz is None:
        return dt.astimezone()
    return dt.replace(tzinfo=tz)


def day_start(day: date, tz: Optional[tzinfo] = None) -> datetime:
    """00:00:00.000 on the given day."""
    return _localize(datetime.combine(day, time.min), tz)


def day_end(day: date, tz: Optional[tzinfo] = None) -> datetime:
    """23:59:59.999 on the given day."""
    return _localize(datetime.combine(day, _END_OF_DAY), tz)


def filter_by_date_range(
    players: Sequence[Player],
    date_range: DateRange,
    tz: Optional[tzinfo] = None
) -> Tuple[Player, ...]:
    """
    Keep the players created inside the date range.

    Each set bound is checked independently and a player must pass all of
    them. A start after the end is not an error; it simply matches nothing.
    Order is preserved and the input is never modified.

    Args:
        players: Full player collection
        date_range: Inclusive range, either bound may be unset
        tz: Time zone for the day boundaries, local time when None

    Returns:
        Tuple of the players that satisfy every active bound
    """
    if not date_range.is_active:
        return tuple(players)

    lower = day_start(date_range.start, tz) if date_range.start is not None else None
    upper = day_end(date_range.end, tz) if date_range.end is not None else None

    filtered = []
    for player in players:
        if lower is not None and player.created_at < lower:
            continue
        if upper is not None and player.created_at > upper:
            continue
        filtered.append(player)

    return tuple(filtered)
