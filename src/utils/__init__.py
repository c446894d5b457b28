"""
Utils package - Shared utilities.

Contains:
- Run ID generation (log file naming)
- Date input and timestamp parsing
"""

from src.utils.date_parsing import parse_date_input, parse_timestamp
from src.utils.run_id import get_run_id

__all__ = [
    "get_run_id",
    "parse_date_input",
    "parse_timestamp",
]
