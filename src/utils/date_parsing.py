from datetime import date, datetime
from typing import Optional


def parse_date_input(date_string: Optional[str]) -> Optional[date]:
    """
    Parse a calendar-date input value into a date.
    
    Supports formats:
    - Date input value: "2024-02-01"
    - Empty string or None: unset bound
    
    Args:
        date_string: Value of a date input
        
    Returns:
        date, or None when the input is empty
        
    Raises:
        ValueError: If string cannot be parsed
    """
    if date_string is None:
        return None
    date_string = date_string.strip()
    if not date_string:
        return None
    try:
        return datetime.strptime(date_string, "%Y-%m-%d").date()
    except ValueError as e:
        raise ValueError(f"Could not parse date '{date_string}': {e}")


def parse_timestamp(value: str | datetime) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware datetime.

    A trailing "Z" is read as UTC. Timestamps without an offset are
    taken to be in local time.
    """
    if isinstance(value, datetime):
        dt = value
    else:
        text = value.strip()
        if text.endswith("Z") or text.endswith("z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return dt
