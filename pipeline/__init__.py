"""Pipeline module for headline loading and text analysis."""

from .analysis import AnalysisResult, analyze, analyze_headlines
from .exclusion import build_name_tokens, should_exclude
from .fouls import classify_foul, split_plays_by_foul
from .loaders import (
    filter_headlines_by_word,
    load_game_entities,
    load_headlines,
    load_player_entities,
    parse_id_list,
    resolve_entity_headlines,
)
from .models import Entity, Headline
from .sentiment import SentimentScorer, strip_quotes
from .tagger import NltkTagger, TaggerContractError

__all__ = [
    "AnalysisResult",
    "Entity",
    "Headline",
    "NltkTagger",
    "SentimentScorer",
    "TaggerContractError",
    "analyze",
    "analyze_headlines",
    "build_name_tokens",
    "classify_foul",
    "filter_headlines_by_word",
    "load_game_entities",
    "load_headlines",
    "load_player_entities",
    "parse_id_list",
    "resolve_entity_headlines",
    "should_exclude",
    "split_plays_by_foul",
    "strip_quotes",
]
