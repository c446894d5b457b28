"""
Models package - Record and filter types.

Contains:
- Player: one player record from the trivia backend
- DateRange: inclusive calendar-date filter
"""

from src.models.player import Player
from src.models.date_range import DateRange

__all__ = [
    "Player",
    "DateRange",
]
