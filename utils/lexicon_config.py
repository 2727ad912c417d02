"""
Lexicon configuration loading from YAML.

This module provides cached access to the stop words, team names,
sports nouns, and part-of-speech overrides in config/lexicon.yaml.
The lists are plain data so tests can build smaller Lexicon values
directly instead of loading the full file.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml


CONFIG_PATH = Path(__file__).parent.parent / "config" / "lexicon.yaml"

REQUIRED_KEYS: tuple[str, ...] = (
    "stop_words",
    "team_names",
    "sports_nouns",
    "pos_overrides",
)


@dataclass(frozen=True)
class Lexicon:
    """
    Immutable lexical lists consulted by the exclusion filter and tagger.

    Attributes:
        stop_words: Lowercase words never counted in any table.
        team_names: Lowercase team nicknames and city fragments.
        sports_nouns: Words counted only as general words, never as
            adjectives or verbs.
        pos_overrides: Lowercase word → Penn Treebank tag that replaces
            the tagger's output in every context.
    """

    stop_words: frozenset[str] = frozenset()
    team_names: frozenset[str] = frozenset()
    sports_nouns: frozenset[str] = frozenset()
    pos_overrides: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_dict(cls, config: dict) -> "Lexicon":
        """
        Build a Lexicon from a parsed config mapping, lowercasing all entries.

        Args:
            config: Dict with stop_words, team_names, sports_nouns (lists)
                and pos_overrides (mapping).

        Returns:
            Lexicon instance.

        Raises:
            ValueError: If a required key is missing.
        """
        missing = [key for key in REQUIRED_KEYS if key not in config]
        if missing:
            raise ValueError(f"Lexicon config missing keys: {', '.join(missing)}")

        overrides = {
            str(word).lower(): str(tag).lower()
            for word, tag in (config["pos_overrides"] or {}).items()
        }
        return cls(
            stop_words=_lowered(config["stop_words"]),
            team_names=_lowered(config["team_names"]),
            sports_nouns=_lowered(config["sports_nouns"]),
            pos_overrides=MappingProxyType(overrides),
        )


def _lowered(words: list | None) -> frozenset[str]:
    return frozenset(str(word).lower() for word in words or [])


@lru_cache(maxsize=4)
def load_lexicon(path: Path | None = None) -> Lexicon:
    """
    Load the lexicon from config/lexicon.yaml (or an explicit path).

    Args:
        path: Optional override for the YAML file location.

    Returns:
        Lexicon built from the file.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        yaml.YAMLError: If config file is invalid YAML.
        ValueError: If a required key is missing.
    """
    with open(path or CONFIG_PATH) as f:
        config = yaml.safe_load(f) or {}

    return Lexicon.from_dict(config)
