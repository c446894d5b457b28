"""Shared fixtures for the trivia dashboard tests."""
from __future__ import annotations

from typing import Any

import pytest

import config.dashboard_config as dashboard_config
from src.logging import reset_logger
from src.models.player import Player


class StubResponse:
    def __init__(self, payload: Any = None, json_error: Exception | None = None):
        self._payload = payload
        self._json_error = json_error

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class StubSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, payload: Any = None, error: Exception | None = None,
                 json_error: Exception | None = None):
        self.payload = payload
        self.error = error
        self.json_error = json_error
        self.calls: list[dict] = []

    def get(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return StubResponse(self.payload, self.json_error)


@pytest.fixture(autouse=True)
def isolated_runtime(tmp_path, monkeypatch):
    """Fresh config and logger per test, logging into a temp directory."""
    for name in (
        "TRIVIA_PLAYERS_ENDPOINT",
        "TRIVIA_REQUEST_TIMEOUT",
        "TRIVIA_EXPORT_DIR",
        "TRIVIA_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TRIVIA_LOG_DIR", str(tmp_path / "logs"))
    dashboard_config._config_instance = None
    reset_logger()
    yield
    reset_logger()
    dashboard_config._config_instance = None


@pytest.fixture
def stub_session():
    return StubSession


@pytest.fixture
def raw_players() -> list[dict]:
    return [
        {"_id": "a1", "name": "Ann", "score": 10, "createdAt": "2024-01-05T10:00:00Z"},
        {"_id": "b2", "name": "Bo", "score": None, "createdAt": "2024-02-10T10:00:00Z"},
    ]


@pytest.fixture
def players(raw_players) -> tuple[Player, ...]:
    return tuple(Player.model_validate(item) for item in raw_players)


def _make_player(player_id: str, created_at: str, name: str | None = None,
                 score: Any = None) -> Player:
    return Player.model_validate(
        {"_id": player_id, "name": name or player_id, "score": score, "createdAt": created_at}
    )


@pytest.fixture
def make_player():
    return _make_player
