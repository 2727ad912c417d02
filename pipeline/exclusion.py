"""
Exclusion filter for headline tokens.

Decides which words count toward the analysis tables. Stop words,
team names, fragments of any known player name, very short tokens,
and pure numbers are all suppressed. Player-name exclusion is global:
every name on the roster is excluded, not only the entity being
analyzed.
"""

import re
from collections.abc import Iterable

from utils.constants import MIN_WORD_LENGTH
from utils.lexicon_config import Lexicon

_DIGITS_RE = re.compile(r"^\d+$")
_WHITESPACE_RE = re.compile(r"\s+")


def build_name_tokens(names: Iterable[str]) -> frozenset[str]:
    """
    Split every full name into lowercase single-word fragments.

    Args:
        names: Full player names, e.g. ["Caitlin Clark", "A'ja Wilson"].

    Returns:
        Frozenset of fragments, e.g. {"caitlin", "clark", "a'ja", "wilson"}.
        Non-string entries are ignored.
    """
    tokens: set[str] = set()
    for name in names:
        if not isinstance(name, str):
            continue
        tokens.update(part for part in _WHITESPACE_RE.split(name.lower()) if part)
    return frozenset(tokens)


def should_exclude(word: str, name_tokens: frozenset[str], lexicon: Lexicon) -> bool:
    """
    Check whether a word is left out of word, adjective, verb and phrase counts.

    Words shorter than MIN_WORD_LENGTH are always excluded, even when they
    carry meaning ("ot" for overtime). This trades a few real words for a
    lot less noise from initials and fragments.

    Args:
        word: Token in any case.
        name_tokens: Lowercase player-name fragments from build_name_tokens.
        lexicon: Stop word and team name lists.

    Returns:
        True if the word should not be counted.
    """
    lower = word.lower()
    return (
        lower in lexicon.stop_words
        or lower in lexicon.team_names
        or lower in name_tokens
        or len(word) < MIN_WORD_LENGTH
        or bool(_DIGITS_RE.match(word))
    )


def is_sports_noun(word: str, lexicon: Lexicon) -> bool:
    """True if word is a sports noun that must never count as adjective/verb."""
    return word.lower() in lexicon.sports_nouns
