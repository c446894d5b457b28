"""
Command line entry point for the trivia dashboard.

Prints the same numbers the Streamlit screens show and can write the
filtered player list to a CSV file.

Usage:
    python -m src.main count
    python -m src.main players --start 2024-02-01 --end 2024-02-29
    python -m src.main players --start 2024-02-01 --export
"""

import argparse
import sys
from typing import List, Optional

from config.dashboard_config import get_config
from src.clients.trivia_client import TriviaClient
from src.logging import get_logger
from src.models.date_range import DateRange
from src.services.export import DirectorySaver, export_players
from src.services.formatting import players_to_frame
from src.state.screens import (
    RangeChanged,
    ScreenStatus,
    load_players,
    load_summary,
    reduce_players,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Trivia dashboard - player statistics and CSV export"
    )
    parser.add_argument(
        "--endpoint",
        help="Players endpoint URL (overrides config)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("count", help="Print the total number of players")

    players = subparsers.add_parser("players", help="List players, optionally filtered by date")
    players.add_argument("--start", default="", help="First day to include (YYYY-MM-DD)")
    players.add_argument("--end", default="", help="Last day to include (YYYY-MM-DD)")
    players.add_argument(
        "--export",
        action="store_true",
        help="Write the filtered list to a CSV file"
    )
    players.add_argument(
        "--export-dir",
        help="Directory for the CSV file (defaults to config export_dir)"
    )
    players.add_argument(
        "--quote",
        action="store_true",
        help="Quote CSV cells that contain commas, quotes or newlines"
    )

    return parser


def run_count(client: TriviaClient) -> int:
    state = load_summary(client)
    if state.status is ScreenStatus.ERROR:
        print(f"❌ {state.error}")
        return 1

    print(f"Total Players: {state.total_count}")
    return 0


def run_players(client: TriviaClient, args: argparse.Namespace) -> int:
    try:
        date_range = DateRange.from_strings(args.start, args.end)
    except ValueError as e:
        print(f"❌ {e}")
        return 2

    state = load_players(client)
    if state.status is ScreenStatus.ERROR:
        print(f"❌ {state.error}")
        return 1

    state = reduce_players(state, RangeChanged(date_range))
    filtered = state.filtered_players
    get_logger().filter_applied(date_range, len(filtered), state.total_count)

    frame = players_to_frame(
        filtered,
        placeholder=get_config().score_placeholder,
        zero_is_missing=get_config().treat_zero_score_as_missing,
    )
    print(state.summary_line())
    if frame.empty:
        print("No players found")
    else:
        print(frame.to_string(index=False))

    if args.export:
        saver = DirectorySaver(args.export_dir or get_config().export_dir)
        quote_fields = True if args.quote else None
        export_file = export_players(filtered, saver, quote_fields=quote_fields)
        if export_file is not None:
            print(f"✅ Wrote {saver.last_path}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI."""
    args = build_parser().parse_args(argv)
    client = TriviaClient(endpoint=args.endpoint)

    if args.command == "count":
        status = run_count(client)
    else:
        status = run_players(client, args)

    get_logger().session_summary()
    return status


if __name__ == "__main__":
    sys.exit(main())
