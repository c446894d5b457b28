"""
Trivia Backend Client - Thin wrapper around the players endpoint.

This client handles:
- One GET request per call to the configured endpoint
- Splitting failures into connection and application errors
- Extracting the `count` or `players` field from the payload

There is no caching and no retry: a failed fetch leaves the data
unavailable until the caller asks again.
"""

import time
from enum import Enum
from typing import Any, Dict, Optional, Tuple

import requests
from pydantic import ValidationError

from config.dashboard_config import get_config
from src.logging import get_logger
from src.models.player import Player


class FetchErrorKind(Enum):
    """Category of a failed fetch, used to pick the message shown."""
    CONNECTION = "connection"
    APPLICATION = "application"


CONNECTION_ERROR_MESSAGE = "Error connecting to server"
PLAYER_COUNT_ERROR_MESSAGE = "Failed to fetch player count"
PLAYERS_ERROR_MESSAGE = "Failed to fetch players"


class FetchError(Exception):
    """Base class for fetch failures."""
    kind: FetchErrorKind = FetchErrorKind.APPLICATION

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.reason = reason or message


class ServerConnectionError(FetchError):
    """Raised when the endpoint is unreachable or returns a non-JSON body."""
    kind = FetchErrorKind.CONNECTION

    def __init__(self, reason: Optional[str] = None):
        super().__init__(CONNECTION_ERROR_MESSAGE, reason)


class ApplicationError(FetchError):
    """Raised when the endpoint answers but reports (or implies) a failure."""
    kind = FetchErrorKind.APPLICATION


class TriviaClient:
    """
    Client for the trivia backend's players endpoint.

    Usage:
        client = TriviaClient()
        total = client.fetch_player_count()
        players = client.fetch_players()
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.

        Args:
            endpoint: Players endpoint URL (defaults to config players_endpoint)
            timeout: Request timeout in seconds (defaults to config request_timeout)
            session: Optional requests session, mainly for injecting a stub
        """
        config = get_config()
        self.endpoint = endpoint or config.players_endpoint
        self.timeout = timeout if timeout is not None else config.request_timeout
        self.session = session or requests.Session()
        self.logger = get_logger()

    def fetch_payload(self, failure_message: str = PLAYERS_ERROR_MESSAGE) -> Dict[str, Any]:
        """
        GET the endpoint and return the decoded payload.

        Args:
            failure_message: Message carried by ApplicationError for this call site

        Returns:
            The JSON object, known to have success == true

        Raises:
            ServerConnectionError: Transport failure or non-JSON body
            ApplicationError: Payload is not an object or success is not true
        """
        self.logger.fetch_started(self.endpoint)

        try:
            response = self.session.get(self.endpoint, timeout=self.timeout)
            payload = response.json()
        except requests.RequestException as e:
            self.logger.fetch_failed(self.endpoint, FetchErrorKind.CONNECTION.value, str(e))
            raise ServerConnectionError(str(e)) from e
        except ValueError as e:
            # requests' JSONDecodeError is a ValueError
            self.logger.fetch_failed(self.endpoint, FetchErrorKind.CONNECTION.value, f"Invalid JSON: {e}")
            raise ServerConnectionError(f"Invalid JSON: {e}") from e

        if not isinstance(payload, dict) or payload.get("success") is not True:
            reason = "Server reported failure"
            if isinstance(payload, dict) and payload.get("message"):
                reason = f"{reason}: {payload['message']}"
            self.logger.fetch_failed(self.endpoint, FetchErrorKind.APPLICATION.value, reason)
            raise ApplicationError(failure_message, reason)

        return payload

    def _require(self, payload: Dict[str, Any], field: str, failure_message: str) -> Any:
        if field not in payload or payload[field] is None:
            reason = f"Payload is missing '{field}'"
            self.logger.fetch_failed(self.endpoint, FetchErrorKind.APPLICATION.value, reason)
            raise ApplicationError(failure_message, reason)
        return payload[field]

    def fetch_player_count(self) -> int:
        """
        Fetch the total number of players (summary screen).

        Returns:
            Count of all players known to the backend
        """
        started = time.perf_counter()
        payload = self.fetch_payload(PLAYER_COUNT_ERROR_MESSAGE)
        count = self._require(payload, "count", PLAYER_COUNT_ERROR_MESSAGE)

        # JSON numbers may arrive as 12.0
        if isinstance(count, float) and count.is_integer():
            count = int(count)
        if isinstance(count, bool) or not isinstance(count, int):
            reason = f"'count' is not a whole number: {count!r}"
            self.logger.fetch_failed(self.endpoint, FetchErrorKind.APPLICATION.value, reason)
            raise ApplicationError(PLAYER_COUNT_ERROR_MESSAGE, reason)

        elapsed_ms = (time.perf_counter() - started) * 1000
        self.logger.fetch_succeeded(self.endpoint, "count", count, elapsed_ms)
        return count

    def fetch_players(self) -> Tuple[Player, ...]:
        """
        Fetch every player record (listing screen).

        Returns:
            Tuple of players in the order the backend sent them

        Raises:
            ApplicationError: players missing or not a list, or a record
                without a parseable createdAt
        """
        started = time.perf_counter()
        payload = self.fetch_payload(PLAYERS_ERROR_MESSAGE)
        raw_players = self._require(payload, "players", PLAYERS_ERROR_MESSAGE)

        if not isinstance(raw_players, list):
            reason = f"'players' is not a list: {type(raw_players).__name__}"
            self.logger.fetch_failed(self.endpoint, FetchErrorKind.APPLICATION.value, reason)
            raise ApplicationError(PLAYERS_ERROR_MESSAGE, reason)

        try:
            players = tuple(Player.model_validate(item) for item in raw_players)
        except ValidationError as e:
            reason = f"Player record without a usable createdAt: {e.error_count()} error(s)"
            self.logger.fetch_failed(self.endpoint, FetchErrorKind.APPLICATION.value, reason)
            self.logger.debug(str(e))
            raise ApplicationError(PLAYERS_ERROR_MESSAGE, reason) from e

        elapsed_ms = (time.perf_counter() - started) * 1000
        self.logger.fetch_succeeded(self.endpoint, "players", len(players), elapsed_ms)
        return players
