"""
Pytest fixtures for the headline analysis tests.

Fixtures provide a small lexicon, a dictionary-backed tagger, and a
fixed sentiment lexicon so analysis results are deterministic and do
not depend on NLTK model downloads or the full VADER word list.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Callable

import pytest

from pipeline.models import Headline
from pipeline.sentiment import SentimentScorer
from utils.lexicon_config import Lexicon

from tests.fakes import DEFAULT_TAGS, SENTIMENT_LEXICON, FakeTagger

# ---------------------------------------------------------------------------
# Analysis collaborators
# ---------------------------------------------------------------------------


@pytest.fixture
def lexicon() -> Lexicon:
    """A small lexicon standing in for config/lexicon.yaml."""
    return Lexicon(
        stop_words=frozenset({"the", "a", "of", "to", "in", "for", "win", "player", "after"}),
        team_names=frozenset({"fever", "aces", "sky", "las", "vegas"}),
        sports_nouns=frozenset({"fans", "fouls", "rebounds", "ot", "mvp"}),
        pos_overrides=MappingProxyType({
            "fans": "nn",
            "fouls": "nns",
            "rebounds": "nns",
            "unrivaled": "nn",
        }),
    )


@pytest.fixture
def tagger() -> FakeTagger:
    return FakeTagger(dict(DEFAULT_TAGS))


@pytest.fixture
def scorer() -> SentimentScorer:
    return SentimentScorer(lexicon=SENTIMENT_LEXICON)


@pytest.fixture
def analyze_with(tagger, scorer, lexicon) -> Callable:
    """
    Factory that runs analyze_headlines with the fixture collaborators.

    Usage:
        result = analyze_with(["Clark stuns Sky"], roster=["Caitlin Clark"])

    Plain strings are wrapped as Headline(headline=...).
    """
    from pipeline.analysis import analyze_headlines

    def _analyze(headlines: list, roster: list[str] | None = None):
        batch = [Headline(headline=h) if isinstance(h, str) else h for h in headlines]
        return analyze_headlines(
            batch,
            roster or [],
            tagger=tagger,
            scorer=scorer,
            lexicon=lexicon,
        )

    return _analyze


@pytest.fixture
def roster() -> list[str]:
    """Full player roster used for name exclusion."""
    return ["Caitlin Clark", "A'ja Wilson", "Jane Doe", "Player X"]


# ---------------------------------------------------------------------------
# File-based fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def headlines_csv(tmp_path) -> Path:
    """
    Indexed headlines CSV in the export format: unnamed first column.

    Row "x" has no integer index and must be skipped.
    """
    filepath = tmp_path / "all-headlines-with-index.csv"
    filepath.write_text(
        ",link,headline,datetime,source,summary,authors,image_desc\n"
        '0,https://a.example/1,Clark delivers stunning win,2024-06-01,ESPN,"Fever rally, again",AP,Clark shooting\n'
        "1,https://a.example/2,Wilson dominates Sky,2024-06-02,AP,,,\n"
        "2,https://a.example/3,Fans call performance stunning,2024-06-03,Yahoo,,,\n"
        "x,https://a.example/4,Bad index row,2024-06-04,AP,,,\n"
    )
    return filepath


@pytest.fixture
def players_csv(tmp_path) -> Path:
    """Player CSV with JSON and Python-literal id lists."""
    filepath = tmp_path / "player-headlines.csv"
    filepath.write_text(
        "full_name,matched_headlines\n"
        'A\'ja Wilson,"[1]"\n'
        'Caitlin Clark,"[0, 2]"\n'
        'Jane Doe,"[0, 1, 2, 99,]"\n'
        'Bench Player,"[]"\n'
    )
    return filepath


@pytest.fixture
def games_csv(tmp_path) -> Path:
    """
    Game CSV keyed by game id.

    The third row has no away team and must be skipped.
    """
    filepath = tmp_path / "game-headlines.csv"
    filepath.write_text(
        "game_id,home_team,away_team,datetime,matched_headlines\n"
        '401,Fever,Sky,2024-06-16T16:00Z,"[0, 2]"\n'
        '402,Aces,Fever,2024-06-20T19:00Z,"[1,]"\n'
        '404,Sky,,2024-06-21T19:00Z,"[1]"\n'
        ',Sky,Aces,,"[]"\n'
    )
    return filepath
