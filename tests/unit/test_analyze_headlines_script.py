"""
Tests for the analyze_headlines script.

The NLTK tagger and VADER lexicon are swapped for the fixture doubles
so the script runs offline and deterministically.
"""

import json
import sys

import pytest

import scripts.analyze_headlines as script
from pipeline.sentiment import SentimentScorer

from tests.fakes import DEFAULT_TAGS, SENTIMENT_LEXICON, FakeTagger


@pytest.fixture(autouse=True)
def offline_collaborators(monkeypatch):
    monkeypatch.setattr(script, "NltkTagger", lambda: FakeTagger(dict(DEFAULT_TAGS)))
    monkeypatch.setattr(
        script, "SentimentScorer", lambda: SentimentScorer(lexicon=SENTIMENT_LEXICON)
    )


class TestAnalyzePlayers:
    """Tests for analyze_players function."""

    def test_results_for_every_player(self, headlines_csv, players_csv):
        results = script.analyze_players(headlines_csv, players_csv)

        assert list(results) == ["Jane Doe", "Caitlin Clark", "A'ja Wilson", "Bench Player"]
        assert results["Bench Player"] is None
        assert results["Jane Doe"]["total_headlines"] == 3

    def test_player_tables(self, headlines_csv, players_csv):
        clark = script.analyze_players(headlines_csv, players_csv)["Caitlin Clark"]

        assert clark["total_headlines"] == 2
        assert clark["top_words"][0] == {"word": "stunning", "count": 2}
        words = [entry["word"] for entry in clark["top_words"]]
        # Roster names and team names never appear.
        assert "clark" not in words
        assert "fever" not in words

    def test_roster_exclusion_uses_all_players(self, headlines_csv, players_csv):
        """Other players' names are excluded even when one player is selected."""
        results = script.analyze_players(headlines_csv, players_csv, player="Jane Doe")

        words = [entry["word"] for entry in results["Jane Doe"]["top_words"]]
        assert "wilson" not in words
        assert list(results) == ["Jane Doe"]

    def test_min_headlines(self, headlines_csv, players_csv):
        results = script.analyze_players(headlines_csv, players_csv, min_headlines=2)

        assert results["A'ja Wilson"] is None
        assert results["Caitlin Clark"] is not None

    def test_unknown_player_raises(self, headlines_csv, players_csv):
        with pytest.raises(ValueError, match="Player not found"):
            script.analyze_players(headlines_csv, players_csv, player="Nobody")


class TestAnalyzeGames:
    """Tests for analyze_games function."""

    def test_results_keyed_by_game_id(self, headlines_csv, players_csv, games_csv):
        results = script.analyze_games(headlines_csv, players_csv, games_csv)

        assert list(results) == ["401", "402", "Aces @ Sky"]
        assert results["Aces @ Sky"] is None
        assert results["401"]["total_headlines"] == 2

    def test_player_roster_excluded(self, headlines_csv, players_csv, games_csv):
        """Game tables exclude player names and team names alike."""
        results = script.analyze_games(headlines_csv, players_csv, games_csv)

        assert results["402"]["top_words"] == [{"word": "dominates", "count": 1}]
        words = [entry["word"] for entry in results["401"]["top_words"]]
        assert words[0] == "stunning"
        assert "clark" not in words

    @pytest.mark.parametrize("game", ["402", "Fever @ Aces"])
    def test_single_game_by_id_or_name(self, headlines_csv, players_csv, games_csv, game):
        results = script.analyze_games(headlines_csv, players_csv, games_csv, game=game)

        assert list(results) == ["402"]

    def test_unknown_game_raises(self, headlines_csv, players_csv, games_csv):
        with pytest.raises(ValueError, match="Game not found"):
            script.analyze_games(headlines_csv, players_csv, games_csv, game="999")


class TestMain:
    """Tests for the CLI entry point."""

    def test_writes_json(self, headlines_csv, players_csv, tmp_path, monkeypatch):
        output = tmp_path / "out" / "analysis.json"
        monkeypatch.setattr(sys, "argv", [
            "analyze_headlines",
            "--headlines", str(headlines_csv),
            "--players", str(players_csv),
            "--output", str(output),
            "--player", "Caitlin Clark",
        ])

        script.main()

        data = json.loads(output.read_text())
        assert list(data) == ["Caitlin Clark"]
        assert data["Caitlin Clark"]["top_adjectives"][0]["word"] == "stunning"

    def test_missing_input_exits(self, players_csv, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "argv", [
            "analyze_headlines",
            "--headlines", str(tmp_path / "missing.csv"),
            "--players", str(players_csv),
            "--output", str(tmp_path / "out.json"),
        ])

        with pytest.raises(SystemExit) as exc_info:
            script.main()
        assert exc_info.value.code == 1

    def test_unknown_player_exits(self, headlines_csv, players_csv, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "argv", [
            "analyze_headlines",
            "--headlines", str(headlines_csv),
            "--players", str(players_csv),
            "--output", str(tmp_path / "out.json"),
            "--player", "Nobody",
        ])

        with pytest.raises(SystemExit):
            script.main()

    def test_games_mode_writes_json(
        self, headlines_csv, players_csv, games_csv, tmp_path, monkeypatch
    ):
        output = tmp_path / "games.json"
        monkeypatch.setattr(sys, "argv", [
            "analyze_headlines",
            "--games",
            "--headlines", str(headlines_csv),
            "--players", str(players_csv),
            "--games-file", str(games_csv),
            "--output", str(output),
            "--game", "401",
        ])

        script.main()

        data = json.loads(output.read_text())
        assert list(data) == ["401"]
        assert data["401"]["top_adjectives"][0]["word"] == "stunning"

    def test_games_mode_missing_games_file_exits(
        self, headlines_csv, players_csv, tmp_path, monkeypatch
    ):
        monkeypatch.setattr(sys, "argv", [
            "analyze_headlines",
            "--games",
            "--headlines", str(headlines_csv),
            "--players", str(players_csv),
            "--games-file", str(tmp_path / "missing.csv"),
            "--output", str(tmp_path / "out.json"),
        ])

        with pytest.raises(SystemExit) as exc_info:
            script.main()
        assert exc_info.value.code == 1
