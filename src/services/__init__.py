"""
Services package - Player data pipeline.

Contains:
- Date range filtering of player collections
- Display formatting (timestamps, scores, table rows)
- CSV export of the filtered list
"""

from src.services.player_filter import filter_by_date_range, day_start, day_end
from src.services.formatting import format_timestamp, format_score, players_to_frame
from src.services.export import ExportFile, DirectorySaver, build_csv, export_players

__all__ = [
    'filter_by_date_range',
    'day_start',
    'day_end',
    'format_timestamp',
    'format_score',
    'players_to_frame',
    'ExportFile',
    'DirectorySaver',
    'build_csv',
    'export_players',
]
