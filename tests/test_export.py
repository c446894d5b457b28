"""Tests for CSV export."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.models.date_range import DateRange
from src.services.export import (
    CSV_MIME_TYPE,
    DirectorySaver,
    ExportFile,
    build_csv,
    export_filename,
    export_players,
)
from src.services.player_filter import filter_by_date_range

UTC = timezone.utc
NOW = datetime(2024, 1, 1, tzinfo=UTC)


class RecordingSaver:
    def __init__(self):
        self.saved: list[ExportFile] = []

    def __call__(self, export_file: ExportFile) -> None:
        self.saved.append(export_file)


class TestBuildCsv:
    def test_scenario_naive_join(self, players):
        filtered = filter_by_date_range(players, DateRange.from_strings("2024-02-01"), UTC)
        text = build_csv(filtered, quote_fields=False, tz=UTC)
        assert text.split("\n") == [
            "Name,Score,Created At",
            "Bo,N/A,Feb 10, 2024, 10:00 AM",
        ]

    def test_scenario_quoted(self, players):
        filtered = filter_by_date_range(players, DateRange.from_strings("2024-02-01"), UTC)
        text = build_csv(filtered, quote_fields=True, tz=UTC)
        assert text.split("\n") == [
            "Name,Score,Created At",
            'Bo,N/A,"Feb 10, 2024, 10:00 AM"',
        ]

    def test_no_trailing_newline(self, players):
        assert not build_csv(players, tz=UTC).endswith("\n")
        assert not build_csv(players, quote_fields=True, tz=UTC).endswith("\n")

    def test_quotes_embedded_delimiters(self, make_player):
        player = make_player("x", "2024-02-10T10:00:00Z", name='Smith, "JJ"', score=3)
        lines = build_csv([player], quote_fields=True, tz=UTC).split("\n")
        assert lines[1] == '"Smith, ""JJ""",3,"Feb 10, 2024, 10:00 AM"'

    def test_naive_join_does_not_escape(self, make_player):
        player = make_player("x", "2024-02-10T10:00:00Z", name="Smith, J", score=3)
        lines = build_csv([player], quote_fields=False, tz=UTC).split("\n")
        assert lines[1] == "Smith, J,3,Feb 10, 2024, 10:00 AM"

    def test_rows_follow_input_order(self, players):
        lines = build_csv(tuple(reversed(players)), quote_fields=False, tz=UTC).split("\n")
        assert [line.split(",")[0] for line in lines[1:]] == ["Bo", "Ann"]


class TestExportFilename:
    def test_embeds_epoch_milliseconds(self):
        assert export_filename(NOW) == "players_1704067200000.csv"

    def test_current_time(self):
        name = export_filename()
        assert name.startswith("players_") and name.endswith(".csv")
        assert name[len("players_"):-len(".csv")].isdigit()


class TestExportPlayers:
    def test_empty_input_is_noop(self):
        saver = RecordingSaver()
        assert export_players([], saver) is None
        assert saver.saved == []

    def test_saves_utf8_csv(self, players):
        saver = RecordingSaver()
        export_file = export_players(players, saver, tz=UTC, now=NOW)
        assert saver.saved == [export_file]
        assert export_file.filename == "players_1704067200000.csv"
        assert export_file.mime_type == CSV_MIME_TYPE
        assert export_file.content.decode("utf-8").startswith("Name,Score,Created At\nAnn,10,")

    def test_default_export_matches_naive_join(self, players):
        saver = RecordingSaver()
        filtered = filter_by_date_range(players, DateRange.from_strings("2024-02-01"), UTC)
        export_file = export_players(filtered, saver, tz=UTC, now=NOW)
        assert export_file.content.decode("utf-8") == "Name,Score,Created At\nBo,N/A,Feb 10, 2024, 10:00 AM"

    def test_non_numeric_score_is_exported_as_sent(self, make_player):
        player = make_player("x", "2024-02-10T10:00:00Z", name="Cy", score="high")
        export_file = export_players([player], RecordingSaver(), tz=UTC, now=NOW)
        assert export_file.content.decode("utf-8").split("\n")[1] == "Cy,high,Feb 10, 2024, 10:00 AM"

    def test_non_ascii_names(self, make_player):
        saver = RecordingSaver()
        player = make_player("x", "2024-02-10T10:00:00Z", name="Zoë", score=1)
        export_file = export_players([player], saver, tz=UTC, now=NOW)
        assert "Zoë" in export_file.content.decode("utf-8")

    def test_quote_setting_from_config(self, players, tmp_path, monkeypatch):
        import config.dashboard_config as dashboard_config

        monkeypatch.chdir(tmp_path)
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "dashboard_config.json").write_text('{"csv_quote_fields": true}')
        dashboard_config._config_instance = None

        export_file = export_players(players, RecordingSaver(), tz=UTC, now=NOW)
        assert 'Bo,N/A,"Feb 10, 2024, 10:00 AM"' in export_file.content.decode("utf-8")

    def test_save_failure_propagates(self, players):
        def failing_save(export_file):
            raise OSError("disk full")

        with pytest.raises(OSError):
            export_players(players, failing_save, tz=UTC, now=NOW)


class TestDirectorySaver:
    def test_writes_file(self, players, tmp_path):
        saver = DirectorySaver(tmp_path / "exports")
        export_file = export_players(players, saver, tz=UTC, now=NOW)
        assert saver.last_path == tmp_path / "exports" / "players_1704067200000.csv"
        assert saver.last_path.read_bytes() == export_file.content
