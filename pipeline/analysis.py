"""
Headline text analysis.

Turns one entity's batch of matched headlines into ranked word,
adjective, verb, phrase and emotional-word tables plus an overall
sentiment score.

Ties in every table are broken by first occurrence. Counters keep
insertion order and the final sort is stable, so the order of the
input headlines is part of the result. Callers must pass headlines in
load order, never in a shuffled display order.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict, dataclass

from utils.constants import (
    MIN_PHRASE_COUNT,
    PHRASE_SIZES,
    TOP_ADJECTIVES_LIMIT,
    TOP_EMOTIONAL_LIMIT,
    TOP_PHRASES_LIMIT,
    TOP_VERBS_LIMIT,
    TOP_WORDS_LIMIT,
)
from utils.lexicon_config import Lexicon, load_lexicon

from .exclusion import build_name_tokens, is_sports_noun, should_exclude
from .models import Headline
from .sentiment import (
    EMOTION_THRESHOLD,
    SentimentScorer,
    is_emotionally_significant,
    strip_quotes,
)
from .tagger import (
    NltkTagger,
    Tagger,
    clean_token,
    is_adjective,
    is_verb,
    resolve_tag,
    tag_text,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Result types
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class WordCount:
    word: str
    count: int


@dataclass(frozen=True)
class PhraseCount:
    phrase: str
    count: int


@dataclass(frozen=True)
class EmotionalWordCount:
    word: str
    count: int
    sentiment: float


@dataclass(frozen=True)
class AnalysisResult:
    """Ranked tables and overall sentiment for one batch of headlines."""

    total_headlines: int
    top_words: tuple[WordCount, ...]
    top_adjectives: tuple[WordCount, ...]
    top_verbs: tuple[WordCount, ...]
    top_positive_words: tuple[EmotionalWordCount, ...]
    top_negative_words: tuple[EmotionalWordCount, ...]
    top_phrases: tuple[PhraseCount, ...]
    overall_sentiment: float

    @classmethod
    def empty(cls) -> "AnalysisResult":
        return cls(
            total_headlines=0,
            top_words=(),
            top_adjectives=(),
            top_verbs=(),
            top_positive_words=(),
            top_negative_words=(),
            top_phrases=(),
            overall_sentiment=0.0,
        )

    def to_dict(self) -> dict:
        """JSON-serializable form with lists of plain dicts."""
        return asdict(self, dict_factory=_dict_factory)


def _dict_factory(items: list[tuple[str, object]]) -> dict:
    return {key: list(value) if isinstance(value, tuple) else value for key, value in items}


class EmotionalWord:
    """Running count and valence sum for one emotional word."""

    __slots__ = ("count", "total_sentiment")

    def __init__(self) -> None:
        self.count = 0
        self.total_sentiment = 0.0

    def add(self, score: float) -> None:
        self.count += 1
        self.total_sentiment += score

    @property
    def average(self) -> float:
        return self.total_sentiment / self.count


# -----------------------------------------------------------------------------
# Ranking helpers
# -----------------------------------------------------------------------------


def rank_counts(counts: Counter, limit: int, min_count: int = 1) -> list[tuple[str, int]]:
    """
    Sort a counter by count descending and truncate.

    sorted() is stable, so equal counts keep the counter's insertion
    (first occurrence) order.
    """
    ranked = sorted(
        ((key, count) for key, count in counts.items() if count >= min_count),
        key=lambda item: item[1],
        reverse=True,
    )
    return ranked[:limit]


def rank_emotional(
    records: dict[str, EmotionalWord],
    positive: bool,
    limit: int = TOP_EMOTIONAL_LIMIT,
) -> tuple[EmotionalWordCount, ...]:
    """
    Select positive or negative emotional words, most frequent first.

    The averaged valence is only a filter; ordering is by count.
    """
    entries = [
        EmotionalWordCount(word=word, count=record.count, sentiment=record.average)
        for word, record in records.items()
    ]
    if positive:
        selected = [e for e in entries if e.sentiment >= EMOTION_THRESHOLD]
    else:
        selected = [e for e in entries if e.sentiment <= -EMOTION_THRESHOLD]
    selected.sort(key=lambda e: e.count, reverse=True)
    return tuple(selected[:limit])


def extract_phrases(
    words: Sequence[str],
    name_tokens: frozenset[str],
    lexicon: Lexicon,
    sizes: Iterable[int] = PHRASE_SIZES,
) -> list[str]:
    """
    Build every bigram, then every trigram, from a cleaned token stream.

    A window is dropped if any of its words fails the exclusion filter.

    Args:
        words: Cleaned, non-empty, lowercase tokens in text order.
        name_tokens: Player-name fragments for the exclusion filter.
        lexicon: Lexical lists for the exclusion filter.
        sizes: Window sizes, in emission order.

    Returns:
        Phrases in emission order (may contain repeats).
    """
    excluded = [should_exclude(word, name_tokens, lexicon) for word in words]
    phrases = []
    for size in sizes:
        for start in range(len(words) - size + 1):
            if any(excluded[start:start + size]):
                continue
            phrases.append(" ".join(words[start:start + size]))
    return phrases


# -----------------------------------------------------------------------------
# Analysis
# -----------------------------------------------------------------------------


def analyze_headlines(
    headlines: Sequence[Headline],
    entity_names: Iterable[str],
    *,
    tagger: Tagger | None = None,
    scorer: SentimentScorer | None = None,
    lexicon: Lexicon | None = None,
) -> AnalysisResult:
    """
    Analyze one entity's headlines.

    Args:
        headlines: Headlines (or raw row dicts) in load order. Non-string
            fields are read as "".
        entity_names: Full names of every known player (the whole roster,
            not only the entity under analysis).
        tagger: Tokenizer/POS tagger. Defaults to NltkTagger.
        scorer: Sentiment scorer. Defaults to the VADER lexicon.
        lexicon: Stop words, team names, sports nouns and POS overrides.
            Defaults to config/lexicon.yaml.

    Returns:
        AnalysisResult. An empty batch gives AnalysisResult.empty().

    Raises:
        TaggerContractError: If the tagger returns misaligned tags.
    """
    if not headlines:
        return AnalysisResult.empty()

    tagger = tagger or NltkTagger()
    scorer = scorer or SentimentScorer()
    lexicon = lexicon or load_lexicon()
    name_tokens = build_name_tokens(entity_names)

    word_counts: Counter = Counter()
    adjective_counts: Counter = Counter()
    verb_counts: Counter = Counter()
    phrase_counts: Counter = Counter()
    emotional_words: dict[str, EmotionalWord] = {}
    total_sentiment = 0.0

    for item in headlines:
        text = _as_headline(item).text

        sentiment = scorer.score_text(strip_quotes(text))
        total_sentiment += sentiment.normalized_score
        for token in sentiment.tokens:
            if not is_emotionally_significant(token):
                continue
            word = token.value.lower()
            if should_exclude(word, name_tokens, lexicon) or is_sports_noun(word, lexicon):
                continue
            emotional_words.setdefault(word, EmotionalWord()).add(token.score)

        tagged = tag_text(tagger, text)
        for raw, tagger_tag in tagged:
            word = clean_token(raw)
            if not word or should_exclude(word, name_tokens, lexicon):
                continue

            word_counts[word] += 1
            if is_sports_noun(word, lexicon):
                continue

            tag = resolve_tag(word, tagger_tag, lexicon)
            if is_adjective(tag):
                adjective_counts[word] += 1
            if is_verb(tag):
                verb_counts[word] += 1

        cleaned = [word for word in (clean_token(raw) for raw, _ in tagged) if word]
        phrase_counts.update(extract_phrases(cleaned, name_tokens, lexicon))

    logger.debug(
        f"Analyzed {len(headlines)} headlines: {len(word_counts)} words, "
        f"{len(phrase_counts)} phrases, {len(emotional_words)} emotional words"
    )

    return AnalysisResult(
        total_headlines=len(headlines),
        top_words=_word_counts(rank_counts(word_counts, TOP_WORDS_LIMIT)),
        top_adjectives=_word_counts(rank_counts(adjective_counts, TOP_ADJECTIVES_LIMIT)),
        top_verbs=_word_counts(rank_counts(verb_counts, TOP_VERBS_LIMIT)),
        top_positive_words=rank_emotional(emotional_words, positive=True),
        top_negative_words=rank_emotional(emotional_words, positive=False),
        top_phrases=tuple(
            PhraseCount(phrase=phrase, count=count)
            for phrase, count in rank_counts(
                phrase_counts, TOP_PHRASES_LIMIT, min_count=MIN_PHRASE_COUNT
            )
        ),
        overall_sentiment=total_sentiment / len(headlines),
    )


def _as_headline(item: object) -> Headline:
    if isinstance(item, Headline):
        return item
    if isinstance(item, Mapping):
        return Headline.from_record(dict(item))
    return Headline()


def _word_counts(ranked: list[tuple[str, int]]) -> tuple[WordCount, ...]:
    return tuple(WordCount(word=word, count=count) for word, count in ranked)


# Short name used by callers that mirror the viewer's API.
analyze = analyze_headlines
