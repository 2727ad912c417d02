"""
Analyze matched headlines for every player or every game.

Loads the indexed headlines CSV and the player → headline matches,
runs the headline text analysis per player, and writes one JSON file
keyed by player name. With --games, the game → headline matches are
analyzed instead and keyed by game id. Entities with no resolvable
headlines are written as null.

Player names are excluded from the word tables in both modes.

Usage:
    uv run python -m scripts.analyze_headlines
    uv run python -m scripts.analyze_headlines --player "Caitlin Clark"
    uv run python -m scripts.analyze_headlines --games
    uv run python -m scripts.analyze_headlines --headlines data/raw/all-headlines-with-index.csv --output data/analysis/headline_analysis.json
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from pipeline.analysis import analyze_headlines
from pipeline.loaders import (
    load_game_entities,
    load_headlines,
    load_player_entities,
    resolve_entity_headlines,
)
from pipeline.models import Entity, Headline
from pipeline.sentiment import SentimentScorer
from pipeline.tagger import NltkTagger
from utils.constants import ANALYSIS_FILENAME, GAME_ANALYSIS_FILENAME
from utils.formatting import format_duration, format_sentiment, format_top_words
from utils.lexicon_config import load_lexicon
from utils.paths import get_analysis_dir, get_games_path, get_headlines_path, get_players_path

# -----------------------------------------------------------------------------
# Logging setup
# -----------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Core processing
# -----------------------------------------------------------------------------


def entity_key(entity: Entity) -> str:
    """Output key: game id for games that have one, otherwise the name."""
    if entity.is_game and entity.game_id:
        return entity.game_id
    return entity.name


def analyze_entities(
    entities: list[Entity],
    headlines: dict[int, Headline],
    roster: list[str],
    min_headlines: int = 1,
    desc: str = "Analyzing",
) -> dict[str, dict | None]:
    """
    Run the headline analysis for each entity against one roster.

    Args:
        entities: Players or games to analyze.
        headlines: Indexed headlines from load_headlines.
        roster: Full player name list used for name exclusion.
        min_headlines: Entities with fewer resolved headlines get null.
        desc: Progress bar label.

    Returns:
        Dict mapping entity_key to AnalysisResult dict (or None).
    """
    # Shared across entities; each analyze call still builds fresh counters.
    tagger = NltkTagger()
    scorer = SentimentScorer()
    lexicon = load_lexicon()

    results: dict[str, dict | None] = {}
    for entity in tqdm(entities, desc=desc, unit=" entities"):
        key = entity_key(entity)
        entity_headlines = resolve_entity_headlines(entity, headlines)
        if len(entity_headlines) < max(min_headlines, 1):
            results[key] = None
            continue
        result = analyze_headlines(
            entity_headlines,
            roster,
            tagger=tagger,
            scorer=scorer,
            lexicon=lexicon,
        )
        results[key] = result.to_dict()

    return results


def analyze_players(
    headlines_path: Path,
    players_path: Path,
    player: str | None = None,
    min_headlines: int = 1,
) -> dict[str, dict | None]:
    """
    Run the headline analysis for each player.

    The roster used for name exclusion is always the full player list,
    even when a single player is selected.

    Args:
        headlines_path: Path to the indexed headlines CSV.
        players_path: Path to the player CSV.
        player: Optional single player name to analyze.
        min_headlines: Players with fewer resolved headlines get null.

    Returns:
        Dict mapping player name to AnalysisResult dict (or None).

    Raises:
        ValueError: If the selected player is not in the player CSV.
    """
    headlines = load_headlines(headlines_path)
    entities = load_player_entities(players_path)
    roster = [entity.name for entity in entities]

    if player is not None:
        entities = [entity for entity in entities if entity.name == player]
        if not entities:
            raise ValueError(f"Player not found: {player}")

    return analyze_entities(entities, headlines, roster, min_headlines, desc="Players")


def analyze_games(
    headlines_path: Path,
    players_path: Path,
    games_path: Path,
    game: str | None = None,
    min_headlines: int = 1,
) -> dict[str, dict | None]:
    """
    Run the headline analysis for each game.

    Game headlines mention players too, so the full player roster from
    the player CSV drives name exclusion here as well.

    Args:
        headlines_path: Path to the indexed headlines CSV.
        players_path: Path to the player CSV (roster only).
        games_path: Path to the game CSV.
        game: Optional single game, by game id or "Away @ Home" name.
        min_headlines: Games with fewer resolved headlines get null.

    Returns:
        Dict mapping game id (or name, when the id is blank) to
        AnalysisResult dict (or None).

    Raises:
        ValueError: If the selected game is not in the game CSV.
    """
    headlines = load_headlines(headlines_path)
    roster = [entity.name for entity in load_player_entities(players_path)]
    entities = load_game_entities(games_path)

    if game is not None:
        entities = [entity for entity in entities if game in (entity.game_id, entity.name)]
        if not entities:
            raise ValueError(f"Game not found: {game}")

    return analyze_entities(entities, headlines, roster, min_headlines, desc="Games")


# -----------------------------------------------------------------------------
# CLI
# -----------------------------------------------------------------------------


def main() -> None:
    """Main entry point for headline analysis."""
    default_headlines = get_headlines_path()
    default_players = get_players_path()
    default_games = get_games_path()
    default_output = get_analysis_dir() / ANALYSIS_FILENAME
    default_game_output = get_analysis_dir() / GAME_ANALYSIS_FILENAME

    parser = argparse.ArgumentParser(
        description="Analyze matched headlines per player or per game into JSON"
    )
    parser.add_argument(
        "--headlines",
        type=Path,
        default=None,
        help=f"Path to indexed headlines CSV (default: {default_headlines})",
    )
    parser.add_argument(
        "--players",
        type=Path,
        default=None,
        help=f"Path to player headlines CSV (default: {default_players})",
    )
    parser.add_argument(
        "--games",
        action="store_true",
        help="Analyze games instead of players",
    )
    parser.add_argument(
        "--games-file",
        type=Path,
        default=None,
        help=f"Path to game headlines CSV (default: {default_games})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help=(
            f"Path to write analysis JSON (default: {default_output}, "
            f"or {default_game_output} with --games)"
        ),
    )
    parser.add_argument(
        "--player",
        type=str,
        default=None,
        help="Analyze a single player by full name",
    )
    parser.add_argument(
        "--game",
        type=str,
        default=None,
        help="With --games, analyze a single game by id or 'Away @ Home' name",
    )
    parser.add_argument(
        "--min-headlines",
        type=int,
        default=1,
        help="Minimum resolved headlines for an entity to be analyzed (default: 1)",
    )
    args = parser.parse_args()

    headlines_path = args.headlines or default_headlines
    players_path = args.players or default_players
    games_path = args.games_file or default_games
    if args.games:
        output_path = args.output or default_game_output
        inputs = (headlines_path, players_path, games_path)
        selected = args.game
    else:
        output_path = args.output or default_output
        inputs = (headlines_path, players_path)
        selected = args.player

    for path in inputs:
        if not path.exists():
            logger.error(f"Input file not found: {path}")
            sys.exit(1)

    logger.info("=" * 60)
    logger.info(f"Headline Analysis ({'games' if args.games else 'players'})")
    logger.info("=" * 60)
    logger.info(f"Headlines: {headlines_path}")
    logger.info(f"Players:   {players_path}")
    if args.games:
        logger.info(f"Games:     {games_path}")
    logger.info(f"Output:    {output_path}")
    logger.info("=" * 60)

    start_time = time.time()
    try:
        if args.games:
            results = analyze_games(
                headlines_path,
                players_path,
                games_path,
                game=args.game,
                min_headlines=args.min_headlines,
            )
        else:
            results = analyze_players(
                headlines_path,
                players_path,
                player=args.player,
                min_headlines=args.min_headlines,
            )
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    elapsed = time.time() - start_time

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info(f"Wrote analysis to {output_path}")

    analyzed = {key: r for key, r in results.items() if r is not None}
    logger.info("=" * 60)
    logger.info("Summary")
    logger.info("=" * 60)
    logger.info(f"Entities:         {len(results):,}")
    logger.info(f"Analyzed:         {len(analyzed):,}")
    logger.info(f"Skipped (empty):  {len(results) - len(analyzed):,}")
    logger.info(f"Elapsed:          {format_duration(elapsed)}")

    if selected and len(analyzed) == 1:
        result = next(iter(analyzed.values()))
        logger.info(f"Sentiment:        {format_sentiment(result['overall_sentiment'])}")
        logger.info(f"Top words:        {format_top_words(result['top_words'])}")
        logger.info(f"Top phrases:      {format_top_words(result['top_phrases'], key='phrase')}")


if __name__ == "__main__":
    main()
