"""
Screen state for the two dashboard screens.

Each screen owns a frozen state struct that only changes through a pure
reducer:

    state = reduce_players(state, FetchStarted())
    state = reduce_players(state, FetchSucceeded(players))
    state = reduce_players(state, RangeChanged(DateRange.from_strings("2024-02-01")))

Fetch results are only accepted while the screen is LOADING, so a late
response for a screen that already settled is dropped.
"""

from dataclasses import dataclass, field, replace
from datetime import tzinfo
from enum import Enum
from typing import Any, Optional, Tuple, Union

from src.clients.trivia_client import FetchError, FetchErrorKind, TriviaClient
from src.logging import ScreenLogger
from src.models.date_range import DateRange
from src.models.player import Player
from src.services.player_filter import filter_by_date_range


class ScreenStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


# ─── Events ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FetchStarted:
    pass


@dataclass(frozen=True)
class FetchSucceeded:
    payload: Any


@dataclass(frozen=True)
class FetchFailed:
    kind: FetchErrorKind
    message: str


@dataclass(frozen=True)
class RangeChanged:
    date_range: DateRange


@dataclass(frozen=True)
class FiltersCleared:
    pass


ScreenEvent = Union[FetchStarted, FetchSucceeded, FetchFailed, RangeChanged, FiltersCleared]


# ─── States ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SummaryState:
    """State of the dashboard summary screen."""
    status: ScreenStatus = ScreenStatus.IDLE
    total_count: int = 0
    error: Optional[str] = None
    error_kind: Optional[FetchErrorKind] = None

    @property
    def is_loading(self) -> bool:
        return self.status is ScreenStatus.LOADING


@dataclass(frozen=True)
class PlayersState:
    """
    State of the players list screen.

    Attributes:
        status: Fetch lifecycle status
        players: Full collection from the last successful fetch
        date_range: Active date filter
        error: User-facing error message when status is ERROR
        error_kind: Category of that error
        tz: Time zone for the day boundaries, local time when None
    """
    status: ScreenStatus = ScreenStatus.IDLE
    players: Tuple[Player, ...] = ()
    date_range: DateRange = field(default_factory=DateRange)
    error: Optional[str] = None
    error_kind: Optional[FetchErrorKind] = None
    tz: Optional[tzinfo] = field(default=None, compare=False)

    @property
    def is_loading(self) -> bool:
        return self.status is ScreenStatus.LOADING

    @property
    def filtered_players(self) -> Tuple[Player, ...]:
        return filter_by_date_range(self.players, self.date_range, self.tz)

    @property
    def total_count(self) -> int:
        return len(self.players)

    @property
    def filtered_count(self) -> int:
        return len(self.filtered_players)

    @property
    def is_filtered(self) -> bool:
        return self.date_range.is_active

    def summary_line(self) -> str:
        """e.g. 'Showing 3 of 10 players (filtered)'."""
        line = f"Showing {self.filtered_count} of {self.total_count} players"
        if self.is_filtered:
            line += " (filtered)"
        return line


# ─── Reducers ──────────────────────────────────────────────────────

def reduce_summary(state: SummaryState, event: ScreenEvent) -> SummaryState:
    """Apply one event to the summary screen state."""
    if isinstance(event, FetchStarted):
        return replace(state, status=ScreenStatus.LOADING, error=None, error_kind=None)

    if isinstance(event, FetchSucceeded):
        if state.status is not ScreenStatus.LOADING:
            return state
        return replace(state, status=ScreenStatus.SUCCESS, total_count=int(event.payload))

    if isinstance(event, FetchFailed):
        if state.status is not ScreenStatus.LOADING:
            return state
        return replace(state, status=ScreenStatus.ERROR, error=event.message, error_kind=event.kind)

    if isinstance(event, (RangeChanged, FiltersCleared)):
        return state

    raise TypeError(f"Unknown screen event: {event!r}")


def reduce_players(state: PlayersState, event: ScreenEvent) -> PlayersState:
    """Apply one event to the players screen state."""
    if isinstance(event, FetchStarted):
        return replace(state, status=ScreenStatus.LOADING, error=None, error_kind=None)

    if isinstance(event, FetchSucceeded):
        if state.status is not ScreenStatus.LOADING:
            return state
        return replace(state, status=ScreenStatus.SUCCESS, players=tuple(event.payload))

    if isinstance(event, FetchFailed):
        if state.status is not ScreenStatus.LOADING:
            return state
        return replace(state, status=ScreenStatus.ERROR, error=event.message, error_kind=event.kind)

    if isinstance(event, RangeChanged):
        return replace(state, date_range=event.date_range)

    if isinstance(event, FiltersCleared):
        return replace(state, date_range=state.date_range.cleared())

    raise TypeError(f"Unknown screen event: {event!r}")


# ─── Loaders ───────────────────────────────────────────────────────

def load_summary(client: TriviaClient, state: Optional[SummaryState] = None) -> SummaryState:
    """Run the player count fetch through the summary reducer."""
    logger = ScreenLogger("dashboard")
    state = reduce_summary(state or SummaryState(), FetchStarted())

    try:
        count = client.fetch_player_count()
    except FetchError as e:
        logger.error(f"{e.message} ({e.reason})")
        return reduce_summary(state, FetchFailed(e.kind, e.message))

    logger.info(f"Total players: {count}")
    return reduce_summary(state, FetchSucceeded(count))


def load_players(client: TriviaClient, state: Optional[PlayersState] = None) -> PlayersState:
    """Run the players fetch through the players reducer."""
    logger = ScreenLogger("players")
    state = reduce_players(state or PlayersState(), FetchStarted())

    try:
        players = client.fetch_players()
    except FetchError as e:
        logger.error(f"{e.message} ({e.reason})")
        return reduce_players(state, FetchFailed(e.kind, e.message))

    logger.info(f"Loaded {len(players)} players")
    return reduce_players(state, FetchSucceeded(players))
