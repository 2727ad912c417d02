"""
Tokenization and part-of-speech tagging for headline text.

The default tagger splits text with an NLTK regexp tokenizer and tags
it with the averaged perceptron POS tagger, which emits Penn Treebank
tags (JJ*, VB*, NN*).
Generic taggers regularly misread basketball nouns ("fouls",
"rebounds", "playoffs") as verbs, so every tag is passed through the
lexicon's override table before it is classified.
"""

import logging
import re
from typing import Protocol

import nltk
from nltk.tokenize import RegexpTokenizer

from utils.lexicon_config import Lexicon

logger = logging.getLogger(__name__)

_NON_WORD_RE = re.compile(r"[^\w]")

# Words with internal hyphens or apostrophes stay whole; every other
# punctuation mark is its own token, so sentence-final periods never
# stick to the word before them.
TOKEN_PATTERN = r"\w+(?:[-'’]\w+)*|[^\w\s]"

# nltk >= 3.9 loads the English perceptron model under this name.
TAGGER_RESOURCE = "averaged_perceptron_tagger_eng"


class TaggerContractError(AssertionError):
    """Raised when a tagger returns a different number of tags than tokens."""


class Tagger(Protocol):
    """Anything that can split text into tokens and tag them one-to-one."""

    def tokenize(self, text: str) -> list[str]: ...

    def tag(self, tokens: list[str]) -> list[str]: ...


def ensure_tagger_data() -> None:
    """Download the NLTK perceptron tagger model quietly if it is missing."""
    try:
        nltk.data.find(f"taggers/{TAGGER_RESOURCE}")
    except LookupError:
        logger.info(f"Downloading NLTK resource {TAGGER_RESOURCE}...")
        nltk.download(TAGGER_RESOURCE, quiet=True)


class NltkTagger:
    """Punctuation-splitting tokenizer plus NLTK's default English POS tagger."""

    def __init__(self) -> None:
        self._tokenizer = RegexpTokenizer(TOKEN_PATTERN)
        self._data_checked = False

    def tokenize(self, text: str) -> list[str]:
        return self._tokenizer.tokenize(text)

    def tag(self, tokens: list[str]) -> list[str]:
        if not tokens:
            return []
        if not self._data_checked:
            ensure_tagger_data()
            self._data_checked = True
        return [tag for _, tag in nltk.pos_tag(tokens)]


def clean_token(raw: str) -> str:
    """Strip non-word characters and lowercase ("Clark's" -> "clarks")."""
    return _NON_WORD_RE.sub("", raw).lower()


def tag_text(tagger: Tagger, text: str) -> list[tuple[str, str]]:
    """
    Tokenize and tag text, pairing each token with its tag.

    Args:
        tagger: Tagger implementation.
        text: Raw headline text.

    Returns:
        List of (raw_token, tag) in text order.

    Raises:
        TaggerContractError: If the tagger returns a tag list whose length
            differs from the token list. Misaligned tags would silently
            corrupt every downstream table, so this is never recovered.
    """
    tokens = tagger.tokenize(text)
    tags = tagger.tag(tokens)
    if len(tags) != len(tokens):
        raise TaggerContractError(
            f"Tagger returned {len(tags)} tags for {len(tokens)} tokens"
        )
    return list(zip(tokens, tags))


def resolve_tag(clean_word: str, tagger_tag: str, lexicon: Lexicon) -> str:
    """
    Pick the effective tag for a word: override table first, tagger second.

    Overrides apply in every context, regardless of the surrounding words.

    Returns:
        Lowercase tag, e.g. "jj", "vbz", "nns".
    """
    tag = lexicon.pos_overrides.get(clean_word) or tagger_tag or ""
    return tag.lower()


def is_adjective(tag: str) -> bool:
    return tag.startswith("jj") and not tag.startswith("nn")


def is_verb(tag: str) -> bool:
    return tag.startswith("vb") and not tag.startswith("nn")
