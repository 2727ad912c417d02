"""
Project-wide constants for the headline narrative analysis.

Centralized here so they can be imported by the pipeline, scripts,
and tests without pulling in any config loading.
"""

# -----------------------------------------------------------------------------
# Data layout
# -----------------------------------------------------------------------------

RAW_DATA_SUBDIR = "raw"
ANALYSIS_DATA_SUBDIR = "analysis"

HEADLINES_FILENAME = "all-headlines-with-index.csv"
PLAYERS_FILENAME = "player-headlines.csv"
GAMES_FILENAME = "game-headlines.csv"
ANALYSIS_FILENAME = "headline_analysis.json"
GAME_ANALYSIS_FILENAME = "game_headline_analysis.json"

# Columns read from the headlines CSV. The index column is unnamed in the
# header and is located by position instead.
HEADLINE_FIELDS: tuple[str, ...] = (
    "link",
    "headline",
    "datetime",
    "source",
    "summary",
    "authors",
    "image_desc",
)

PLAYER_NAME_FIELD = "full_name"
PLAYER_HEADLINES_FIELD = "matched_headlines"

# Game rows share the matched_headlines column with player rows.
GAME_ID_FIELD = "game_id"
GAME_HOME_FIELD = "home_team"
GAME_AWAY_FIELD = "away_team"
GAME_DATETIME_FIELD = "datetime"

# -----------------------------------------------------------------------------
# Analysis limits
# -----------------------------------------------------------------------------

# Tokens shorter than this are always excluded ("ot" is dropped, "mvp" kept).
MIN_WORD_LENGTH = 3

TOP_WORDS_LIMIT = 10
TOP_ADJECTIVES_LIMIT = 5
TOP_VERBS_LIMIT = 5
TOP_EMOTIONAL_LIMIT = 5
TOP_PHRASES_LIMIT = 20

# A phrase must recur at least this often across the batch to be reported.
MIN_PHRASE_COUNT = 2

PHRASE_SIZES: tuple[int, ...] = (2, 3)

# -----------------------------------------------------------------------------
# Foul classification
# -----------------------------------------------------------------------------

FOUL_FLAGRANT = "flagrant"
FOUL_TECHNICAL = "technical"
FOUL_REGULAR = "regular"

# Checked in order; the first matching keyword decides the foul type.
FOUL_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("flagrant", FOUL_FLAGRANT),
    ("technical", FOUL_TECHNICAL),
    ("foul", FOUL_REGULAR),
)
