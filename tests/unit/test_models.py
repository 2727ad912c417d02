"""Unit tests for pipeline.models module."""

import dataclasses
import math

import pytest

from pipeline.models import Entity, Headline, as_text


class TestAsText:
    """Tests for as_text coercion."""

    @pytest.mark.parametrize("value", [None, 42, 3.5, math.nan, ["a"], b"bytes"])
    def test_non_strings_become_empty(self, value):
        assert as_text(value) == ""

    def test_strings_unchanged(self):
        assert as_text("Clark") == "Clark"


class TestHeadline:
    """Tests for the Headline value type."""

    def test_from_record_coerces_fields(self):
        headline = Headline.from_record({
            "link": "https://a.example/1",
            "headline": "Clark stuns Sky",
            "summary": None,
            "authors": math.nan,
            "extra": "ignored",
        })

        assert headline.headline == "Clark stuns Sky"
        assert headline.summary == ""
        assert headline.authors == ""
        assert headline.source == ""

    def test_text_joins_headline_and_summary(self):
        headline = Headline(headline="Clark stuns Sky", summary="Record night")

        assert headline.text == "Clark stuns Sky Record night"

    def test_text_without_summary(self):
        assert Headline(headline="Clark stuns Sky").text == "Clark stuns Sky "

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Headline().headline = "changed"


class TestEntity:
    """Tests for the Entity value type."""

    def test_headline_count(self):
        assert Entity(name="Caitlin Clark", matched_headlines=(1, 2, 3)).headline_count == 3

    def test_player_is_not_game(self):
        assert not Entity(name="Caitlin Clark").is_game

    def test_game_entity(self):
        game = Entity(
            name="Sky @ Fever",
            home_team="Fever",
            away_team="Sky",
            game_id="401620210",
        )

        assert game.is_game

    def test_to_dict(self):
        data = Entity(name="Caitlin Clark", matched_headlines=(4, 5)).to_dict()

        assert data["matched_headlines"] == [4, 5]
        assert data["headline_count"] == 2
        assert data["name"] == "Caitlin Clark"
