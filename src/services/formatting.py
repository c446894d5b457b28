"""
Display formatting for player records.

Timestamps are rendered in US English conventions regardless of the
process locale, e.g. "Feb 10, 2024, 10:00 AM".
"""

from datetime import datetime, tzinfo
from typing import Any, Iterable, Iterator, List, Optional, Union

import pandas as pd

from src.models.player import Player
from src.utils.date_parsing import parse_timestamp

SCORE_PLACEHOLDER = "N/A"
COLUMNS = ["Name", "Score", "Created At"]

_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_timestamp(value: Union[str, datetime], tz: Optional[tzinfo] = None) -> str:
    """
    Format a timestamp for display.

    Args:
        value: ISO-8601 string or datetime (always a valid timestamp)
        tz: Display time zone, local time when None

    Returns:
        str: e.g. "Feb 10, 2024, 09:05 AM"
    """
    dt = parse_timestamp(value).astimezone(tz)
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{_MONTH_ABBR[dt.month - 1]} {dt.day}, {dt.year}, {hour:02d}:{dt.minute:02d} {meridiem}"


def format_score(
    score: Any,
    placeholder: str = SCORE_PLACEHOLDER,
    zero_is_missing: bool = True
) -> str:
    """
    Format a score for display.

    None and "" always map to the placeholder. A score of 0 maps to the
    placeholder too unless zero_is_missing is False. Non-numeric scores
    are shown as sent.
    """
    if score is None or score == "":
        return placeholder
    if zero_is_missing and score == 0:
        return placeholder
    if isinstance(score, float) and score.is_integer():
        return str(int(score))
    return str(score)


def player_rows(
    players: Iterable[Player],
    placeholder: str = SCORE_PLACEHOLDER,
    zero_is_missing: bool = True,
    tz: Optional[tzinfo] = None
) -> Iterator[List[str]]:
    """Yield [name, score, created at] display cells for each player."""
    for player in players:
        yield [
            player.name,
            format_score(player.score, placeholder, zero_is_missing),
            format_timestamp(player.created_at, tz),
        ]


def players_to_frame(
    players: Iterable[Player],
    placeholder: str = SCORE_PLACEHOLDER,
    zero_is_missing: bool = True,
    tz: Optional[tzinfo] = None
) -> pd.DataFrame:
    """Build the Name / Score / Created At table shown on the players screen."""
    rows = list(player_rows(players, placeholder, zero_is_missing, tz))
    return pd.DataFrame(rows, columns=COLUMNS)
