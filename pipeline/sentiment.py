"""
Lexicon-based sentiment scoring for headline text.

Scores come from the VADER lexicon (word valences on a -4..+4 scale)
shipped with vaderSentiment. Quoted spans are removed before scoring:
a direct quote carries the speaker's sentiment, not the outlet's
framing, and must not reach the emotional-word tables.
"""

import re
import string
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping

from vaderSentiment.vaderSentiment import (
    N_SCALAR,
    SentimentIntensityAnalyzer,
    negated,
    normalize,
)

# A ±2 cut-off on the AFINN ±5 scale, rescaled to VADER's ±4 (2 / 5 * 4).
EMOTION_THRESHOLD = 1.6

# Straight double, straight single, and typographic double quotes.
# Non-greedy and non-nested: each span ends at the next matching quote.
_QUOTED_RE = re.compile(r'"[^"]*"|\'[^\']*\'|“[^”]*”')

# Trimmed from both ends of a token before lookup.
_EDGE_CHARS = string.punctuation + "“”‘’"


@dataclass(frozen=True)
class TokenScore:
    """A token from the scored text and its valence, if it has one."""

    value: str
    score: float | None = None


@dataclass(frozen=True)
class SentimentResult:
    normalized_score: float
    tokens: tuple[TokenScore, ...]


def strip_quotes(text: str) -> str:
    """Remove every quoted span from text."""
    return _QUOTED_RE.sub("", text)


def is_emotionally_significant(token: TokenScore) -> bool:
    """True if the token's valence magnitude reaches EMOTION_THRESHOLD."""
    return token.score is not None and abs(token.score) >= EMOTION_THRESHOLD


@lru_cache(maxsize=1)
def load_vader_lexicon() -> Mapping[str, float]:
    """Load VADER's word → valence lexicon once."""
    return SentimentIntensityAnalyzer().lexicon


class SentimentScorer:
    """
    Score text token by token against a valence lexicon.

    A word directly preceded by a negation ("not", "never", "isn't")
    has its valence flipped and dampened by VADER's negation scalar.
    The normalized score is VADER's normalization of the summed token
    valences, in the range -1..1.

    Example:
        scorer = SentimentScorer()
        result = scorer.score_text("Clark delivers a brilliant performance")
        result.normalized_score  # > 0
    """

    def __init__(self, lexicon: Mapping[str, float] | None = None) -> None:
        self._lexicon = lexicon if lexicon is not None else load_vader_lexicon()

    def score_token(self, word: str, previous: str | None = None) -> float | None:
        valence = self._lexicon.get(word.lower())
        if valence is None:
            return None
        if previous is not None and negated([previous]):
            return valence * N_SCALAR
        return float(valence)

    def score_text(self, text: str) -> SentimentResult:
        """
        Score text without any preprocessing.

        Callers that need the quote rule should pass strip_quotes(text).

        Args:
            text: Text to score.

        Returns:
            SentimentResult with per-token scores in text order.
        """
        tokens: list[TokenScore] = []
        previous: str | None = None
        total = 0.0

        for raw in text.split():
            word = raw.strip(_EDGE_CHARS)
            if not word:
                continue
            score = self.score_token(word, previous)
            if score is not None:
                total += score
            tokens.append(TokenScore(value=word, score=score))
            previous = word

        normalized = normalize(total) if total else 0.0
        return SentimentResult(normalized_score=normalized, tokens=tuple(tokens))
