"""
State package - Per-screen state and reducers.

Contains:
- SummaryState / reduce_summary: dashboard total count
- PlayersState / reduce_players: player list, date filter and counts
- load_summary / load_players: drive a fetch through the reducers
"""

from src.state.screens import (
    ScreenStatus,
    FetchStarted,
    FetchSucceeded,
    FetchFailed,
    RangeChanged,
    FiltersCleared,
    SummaryState,
    PlayersState,
    reduce_summary,
    reduce_players,
    load_summary,
    load_players,
)

__all__ = [
    "ScreenStatus",
    "FetchStarted",
    "FetchSucceeded",
    "FetchFailed",
    "RangeChanged",
    "FiltersCleared",
    "SummaryState",
    "PlayersState",
    "reduce_summary",
    "reduce_players",
    "load_summary",
    "load_players",
]
