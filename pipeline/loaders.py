"""
CSV loading for headlines and player or game → headline matches.

Three files feed the analysis:
- The headlines CSV, whose first (unnamed) column is the integer index
  that player rows refer to.
- The player CSV, with a full name and a JSON array of matched headline
  indices per row. Some exports write that array with Python literal
  syntax instead of JSON, so both are accepted.
- The game CSV, with game id, home and away team, tip-off datetime and
  the same matched headline indices column.
"""

import ast
import json
import logging
from collections.abc import Iterable
from pathlib import Path

import polars as pl

from utils.constants import (
    GAME_AWAY_FIELD,
    GAME_DATETIME_FIELD,
    GAME_HOME_FIELD,
    GAME_ID_FIELD,
    HEADLINE_FIELDS,
    PLAYER_HEADLINES_FIELD,
    PLAYER_NAME_FIELD,
)

from .models import Entity, Headline, as_text

logger = logging.getLogger(__name__)


def _read_csv(path: Path) -> pl.DataFrame:
    """Read a CSV with every column as a string, tolerating ragged rows."""
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {path}")
    return pl.read_csv(path, infer_schema_length=0, truncate_ragged_lines=True)


def parse_id_list(raw: str | None) -> list[int]:
    """
    Parse a list-of-ids cell.

    Tries JSON first ("[1, 2, 3]"), then Python literal syntax
    ("[1, 2, 3,]" or "(1, 2)").

    Args:
        raw: Cell content.

    Returns:
        List of ints. Unparseable cells and non-integer items yield [].
    """
    if not raw or not raw.strip():
        return []

    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        try:
            value = ast.literal_eval(raw)
        except (ValueError, SyntaxError, TypeError):
            logger.warning(f"Could not parse id list: {raw[:80]!r}")
            return []

    if not isinstance(value, (list, tuple)):
        logger.warning(f"Id list is not a sequence: {raw[:80]!r}")
        return []

    try:
        return [int(item) for item in value]
    except (TypeError, ValueError):
        logger.warning(f"Id list has non-integer items: {raw[:80]!r}")
        return []


def load_headlines(path: Path) -> dict[int, Headline]:
    """
    Load the indexed headlines CSV.

    Args:
        path: Path to the headlines CSV.

    Returns:
        Dict mapping headline index to Headline, in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    logger.info(f"Loading headlines from {path}")
    df = _read_csv(path)
    if not df.columns:
        return {}
    index_column = df.columns[0]

    headlines: dict[int, Headline] = {}
    skipped = 0
    for row in df.iter_rows(named=True):
        try:
            index = int(as_text(row.get(index_column)).strip())
        except ValueError:
            skipped += 1
            continue
        headlines[index] = Headline.from_record(
            {field: row.get(field) for field in HEADLINE_FIELDS}
        )

    logger.info(f"Loaded {len(headlines):,} headlines (skipped {skipped:,} rows without index)")
    return headlines


def load_player_entities(path: Path) -> list[Entity]:
    """
    Load players and their matched headline ids.

    Args:
        path: Path to the player CSV.

    Returns:
        Entities sorted by headline count, most covered first. Players
        with equal counts keep file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the name or matched headlines column is missing.
    """
    logger.info(f"Loading players from {path}")
    df = _read_csv(path)

    missing = {PLAYER_NAME_FIELD, PLAYER_HEADLINES_FIELD} - set(df.columns)
    if missing:
        raise ValueError(f"Player CSV missing columns: {', '.join(sorted(missing))}")

    entities = [
        Entity(
            name=as_text(row[PLAYER_NAME_FIELD]),
            matched_headlines=tuple(parse_id_list(row[PLAYER_HEADLINES_FIELD])),
        )
        for row in df.iter_rows(named=True)
        if as_text(row[PLAYER_NAME_FIELD])
    ]
    entities.sort(key=lambda entity: entity.headline_count, reverse=True)

    logger.info(f"Loaded {len(entities):,} players")
    return entities


def game_name(home_team: str, away_team: str) -> str:
    """Display name for a game, away team first ("Sky @ Fever")."""
    return f"{away_team} @ {home_team}"


def load_game_entities(path: Path) -> list[Entity]:
    """
    Load games and their matched headline ids.

    Rows without both team names are skipped. Missing game id and
    datetime cells become "".

    Args:
        path: Path to the game CSV.

    Returns:
        Game entities in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If a team or matched headlines column is missing.
    """
    logger.info(f"Loading games from {path}")
    df = _read_csv(path)

    required = {GAME_HOME_FIELD, GAME_AWAY_FIELD, PLAYER_HEADLINES_FIELD}
    missing = required - set(df.columns)
    if missing:
        raise ValueError(f"Game CSV missing columns: {', '.join(sorted(missing))}")

    entities = []
    skipped = 0
    for row in df.iter_rows(named=True):
        home_team = as_text(row[GAME_HOME_FIELD]).strip()
        away_team = as_text(row[GAME_AWAY_FIELD]).strip()
        if not (home_team and away_team):
            skipped += 1
            continue
        entities.append(
            Entity(
                name=game_name(home_team, away_team),
                matched_headlines=tuple(parse_id_list(row[PLAYER_HEADLINES_FIELD])),
                home_team=home_team,
                away_team=away_team,
                game_id=as_text(row.get(GAME_ID_FIELD)),
                datetime=as_text(row.get(GAME_DATETIME_FIELD)),
            )
        )

    logger.info(f"Loaded {len(entities):,} games (skipped {skipped:,} rows without teams)")
    return entities


def resolve_entity_headlines(entity: Entity, headlines: dict[int, Headline]) -> list[Headline]:
    """
    Look up an entity's matched headlines.

    Keeps the order of entity.matched_headlines and drops ids with no
    headline. This order is the tie-break order for the analysis.
    """
    return [headlines[i] for i in entity.matched_headlines if i in headlines]


def filter_headlines_by_word(headlines: Iterable[Headline], word: str) -> list[Headline]:
    """
    Keep headlines whose headline or summary contains word (case-insensitive).

    An empty word returns every headline.
    """
    needle = word.lower()
    return [h for h in headlines if needle in h.text.lower()]
