"""Tests for the trivia backend client."""
from __future__ import annotations

import pytest
import requests

from src.clients.trivia_client import (
    ApplicationError,
    FetchError,
    FetchErrorKind,
    ServerConnectionError,
    TriviaClient,
)

ENDPOINT = "https://example.test/api/players/all"


def make_client(session) -> TriviaClient:
    return TriviaClient(endpoint=ENDPOINT, timeout=3.0, session=session)


class TestFetchPlayerCount:
    def test_returns_count(self, stub_session):
        session = stub_session({"success": True, "count": 7})
        assert make_client(session).fetch_player_count() == 7

    def test_single_get_to_configured_endpoint(self, stub_session):
        session = stub_session({"success": True, "count": 7})
        make_client(session).fetch_player_count()
        assert session.calls == [{"url": ENDPOINT, "timeout": 3.0}]

    def test_success_false_is_application_error(self, stub_session):
        session = stub_session({"success": False})
        with pytest.raises(ApplicationError) as exc_info:
            make_client(session).fetch_player_count()
        assert exc_info.value.kind is FetchErrorKind.APPLICATION
        assert exc_info.value.message == "Failed to fetch player count"

    def test_missing_count_is_application_error(self, stub_session):
        session = stub_session({"success": True})
        with pytest.raises(ApplicationError):
            make_client(session).fetch_player_count()

    def test_non_integer_count_is_application_error(self, stub_session):
        session = stub_session({"success": True, "count": "seven"})
        with pytest.raises(ApplicationError):
            make_client(session).fetch_player_count()

    def test_whole_float_count(self, stub_session):
        session = stub_session({"success": True, "count": 7.0})
        count = make_client(session).fetch_player_count()
        assert count == 7
        assert isinstance(count, int)

    def test_fractional_count_is_application_error(self, stub_session):
        session = stub_session({"success": True, "count": 7.5})
        with pytest.raises(ApplicationError):
            make_client(session).fetch_player_count()

    def test_count_ignores_players_field(self, stub_session):
        session = stub_session({"success": True, "count": 2, "players": "not checked"})
        assert make_client(session).fetch_player_count() == 2


class TestFetchPlayers:
    def test_returns_players_in_order(self, stub_session, raw_players):
        session = stub_session({"success": True, "players": raw_players})
        players = make_client(session).fetch_players()
        assert isinstance(players, tuple)
        assert [p.name for p in players] == ["Ann", "Bo"]
        assert [p.id for p in players] == ["a1", "b2"]
        assert players[1].score is None

    def test_empty_list(self, stub_session):
        session = stub_session({"success": True, "players": []})
        assert make_client(session).fetch_players() == ()

    def test_success_false_message(self, stub_session):
        session = stub_session({"success": False, "message": "db down"})
        with pytest.raises(ApplicationError) as exc_info:
            make_client(session).fetch_players()
        assert exc_info.value.message == "Failed to fetch players"
        assert "db down" in exc_info.value.reason

    def test_missing_players_field(self, stub_session):
        session = stub_session({"success": True, "count": 3})
        with pytest.raises(ApplicationError):
            make_client(session).fetch_players()

    def test_players_not_a_list(self, stub_session):
        session = stub_session({"success": True, "players": {"a": 1}})
        with pytest.raises(ApplicationError):
            make_client(session).fetch_players()

    def test_loose_records_are_kept(self, stub_session, raw_players):
        loose = [
            {"_id": "c3", "name": None, "createdAt": "2024-02-11T10:00:00Z"},
            {"name": "No id", "score": "high", "createdAt": "2024-02-12T10:00:00Z"},
        ]
        session = stub_session({"success": True, "players": raw_players + loose})
        players = make_client(session).fetch_players()
        assert len(players) == 4
        assert players[2].name == ""
        assert players[3].id is None
        assert players[3].score == "high"

    def test_malformed_record(self, stub_session):
        session = stub_session({"success": True, "players": [{"_id": "x", "name": "No date"}]})
        with pytest.raises(ApplicationError):
            make_client(session).fetch_players()

    def test_payload_not_an_object(self, stub_session):
        session = stub_session([1, 2, 3])
        with pytest.raises(ApplicationError):
            make_client(session).fetch_players()


class TestConnectionErrors:
    def test_transport_failure(self, stub_session):
        session = stub_session(error=requests.ConnectionError("unreachable"))
        with pytest.raises(ServerConnectionError) as exc_info:
            make_client(session).fetch_players()
        assert exc_info.value.kind is FetchErrorKind.CONNECTION
        assert exc_info.value.message == "Error connecting to server"

    def test_timeout(self, stub_session):
        session = stub_session(error=requests.Timeout("slow"))
        with pytest.raises(ServerConnectionError):
            make_client(session).fetch_player_count()

    def test_non_json_body(self, stub_session):
        session = stub_session(json_error=ValueError("Expecting value"))
        with pytest.raises(ServerConnectionError):
            make_client(session).fetch_player_count()

    def test_no_retry(self, stub_session):
        session = stub_session(error=requests.ConnectionError("unreachable"))
        with pytest.raises(FetchError):
            make_client(session).fetch_players()
        assert len(session.calls) == 1

    def test_errors_share_base_class(self):
        assert issubclass(ServerConnectionError, FetchError)
        assert issubclass(ApplicationError, FetchError)


class TestDefaults:
    def test_uses_config_endpoint(self, stub_session, monkeypatch):
        monkeypatch.setenv("TRIVIA_PLAYERS_ENDPOINT", "https://other.test/players")
        monkeypatch.setenv("TRIVIA_REQUEST_TIMEOUT", "4.5")
        session = stub_session({"success": True, "count": 1})
        client = TriviaClient(session=session)
        client.fetch_player_count()
        assert session.calls == [{"url": "https://other.test/players", "timeout": 4.5}]
