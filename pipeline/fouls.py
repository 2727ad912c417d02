"""
Foul-type classification for play-by-play descriptions.

A plain keyword match over the lowercased description. Flagrant and
technical fouls are checked before the generic "foul" keyword so "Flagrant Foul Type 1" is never filed as a regular foul.
"""

from collections.abc import Iterable

from utils.constants import FOUL_FLAGRANT, FOUL_KEYWORDS, FOUL_REGULAR, FOUL_TECHNICAL


def classify_foul(description: str | None) -> str | None:
    """
    Classify a play description by foul type.

    Args:
        description: Free-text play description, e.g.
            "Wilson shooting foul (Clark draws the foul)".

    Returns:
        "flagrant", "technical" or "regular", or None if the play is
        not a foul.
    """
    if not isinstance(description, str) or not description:
        return None

    text = description.lower()
    for keyword, foul_type in FOUL_KEYWORDS:
        if keyword in text:
            return foul_type
    return None


def split_plays_by_foul(plays: Iterable[dict]) -> dict[str, list[dict]]:
    """
    Group play dicts by the foul type of their "description" field.

    Non-foul plays are dropped. Each group keeps input order.

    Returns:
        Dict with "flagrant", "technical" and "regular" keys.
    """
    groups: dict[str, list[dict]] = {
        FOUL_FLAGRANT: [],
        FOUL_TECHNICAL: [],
        FOUL_REGULAR: [],
    }
    for play in plays:
        foul_type = classify_foul(play.get("description"))
        if foul_type is not None:
            groups[foul_type].append(play)
    return groups
