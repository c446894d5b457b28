"""
CSV export of the filtered player list.

The exporter only produces bytes and a filename. Saving them is left to
the host: the Streamlit app hands them to a download button and the CLI
writes them into a directory with DirectorySaver.
"""

import time
from dataclasses import dataclass
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Callable, Optional, Sequence

from config.dashboard_config import get_config
from src.logging import get_logger
from src.models.player import Player
from src.services.formatting import COLUMNS, player_rows, players_to_frame

CSV_MIME_TYPE = "text/csv;charset=utf-8"


@dataclass(frozen=True)
class ExportFile:
    """
    A ready-to-save export.

    Attributes:
        filename: players_<epoch-ms>.csv
        content: UTF-8 encoded CSV text
        mime_type: Content type to offer the browser
    """
    filename: str
    content: bytes
    mime_type: str = CSV_MIME_TYPE


SaveFile = Callable[[ExportFile], None]


def export_filename(now: Optional[datetime] = None) -> str:
    """Filename embedding the current epoch-millisecond timestamp."""
    if now is None:
        epoch_ms = time.time_ns() // 1_000_000
    else:
        epoch_ms = int(now.timestamp() * 1000)
    return f"players_{epoch_ms}.csv"


def build_csv(
    players: Sequence[Player],
    quote_fields: bool = False,
    placeholder: str = "N/A",
    zero_is_missing: bool = True,
    tz: Optional[tzinfo] = None
) -> str:
    """
    Serialize players to CSV text (header plus one row per player).

    Rows are separated by "\\n" with no trailing newline. By default
    cells are joined with bare commas, so a comma, quote or newline inside
    a value corrupts the row. quote_fields=True quotes such cells and
    doubles embedded quotes.
    """
    if not quote_fields:
        lines = [",".join(COLUMNS)]
        for row in player_rows(players, placeholder, zero_is_missing, tz):
            lines.append(",".join(row))
        return "\n".join(lines)

    frame = players_to_frame(players, placeholder, zero_is_missing, tz)
    return frame.to_csv(index=False, lineterminator="\n").removesuffix("\n")


def export_players(
    players: Sequence[Player],
    save: SaveFile,
    quote_fields: Optional[bool] = None,
    tz: Optional[tzinfo] = None,
    now: Optional[datetime] = None
) -> Optional[ExportFile]:
    """
    Build a CSV export of the players and hand it to save.

    Args:
        players: Filtered players, in display order
        save: Host capability that stores the file
        quote_fields: Quote cells when needed (defaults to config csv_quote_fields)
        tz: Display time zone for Created At, local time when None
        now: Timestamp for the filename, current time when None

    Returns:
        The ExportFile that was saved, or None when players is empty
    """
    logger = get_logger()
    if not players:
        logger.export_skipped()
        return None

    config = get_config()
    if quote_fields is None:
        quote_fields = config.csv_quote_fields

    text = build_csv(
        players,
        quote_fields=quote_fields,
        placeholder=config.score_placeholder,
        zero_is_missing=config.treat_zero_score_as_missing,
        tz=tz,
    )
    export_file = ExportFile(filename=export_filename(now), content=text.encode("utf-8"))

    save(export_file)
    logger.export_written(export_file, len(players))
    return export_file


class DirectorySaver:
    """
    Save exports into a directory on disk.

    Usage:
        saver = DirectorySaver("exports")
        export_players(players, saver)
        print(saver.last_path)
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self.last_path: Optional[Path] = None

    def __call__(self, export_file: ExportFile) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / export_file.filename
        with open(path, "wb") as f:
            f.write(export_file.content)
        self.last_path = path
