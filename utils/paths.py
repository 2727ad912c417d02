"""
Centralized data path construction.

All data directory paths should be obtained through this module to ensure
consistent handling of the DATA_DIR environment variable.

Functions (not module-level constants) ensure environment is read at runtime,
not import time.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from utils.constants import (
    ANALYSIS_DATA_SUBDIR,
    GAMES_FILENAME,
    HEADLINES_FILENAME,
    PLAYERS_FILENAME,
    RAW_DATA_SUBDIR,
)


def get_data_dir() -> Path:
    """
    Get the data directory from environment or use default.

    Reads DATA_DIR from environment (with .env support).
    Default: ./data

    Returns:
        Path to data directory.
    """
    load_dotenv()
    data_dir = os.getenv("DATA_DIR", "./data")
    return Path(data_dir)


def get_raw_dir() -> Path:
    """
    Get the raw data directory holding the headline and player CSVs.

    Returns:
        Path to raw data directory (e.g., data/raw/).
    """
    return get_data_dir() / RAW_DATA_SUBDIR


def get_analysis_dir() -> Path:
    """
    Get the directory for per-entity analysis output.

    Returns:
        Path to analysis directory (e.g., data/analysis/)
    """
    return get_data_dir() / ANALYSIS_DATA_SUBDIR


def get_headlines_path() -> Path:
    """Default location of the indexed headlines CSV."""
    return get_raw_dir() / HEADLINES_FILENAME


def get_players_path() -> Path:
    """Default location of the player → matched headlines CSV."""
    return get_raw_dir() / PLAYERS_FILENAME


def get_games_path() -> Path:
    """Default location of the game → matched headlines CSV."""
    return get_raw_dir() / GAMES_FILENAME
