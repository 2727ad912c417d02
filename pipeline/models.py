"""
Value types shared by the loaders and the headline analysis.

Rows coming out of CSV loading are loosely typed (nulls, numbers,
missing columns). They are coerced into these frozen dataclasses at
the load boundary so the analysis can treat every field as a string.
"""

from dataclasses import asdict, dataclass, field
from typing import Any


def as_text(value: Any) -> str:
    """Return value if it is a string, otherwise an empty string."""
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class Headline:
    """A single news headline matched to one or more entities."""

    link: str = ""
    headline: str = ""
    datetime: str = ""
    source: str = ""
    summary: str = ""
    authors: str = ""
    image_desc: str = ""

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Headline":
        """
        Build a Headline from a loosely typed row.

        Missing keys and non-string values (None, NaN, numbers) become "".

        Args:
            record: Row dict, e.g. from a CSV reader.

        Returns:
            Headline with every field coerced to str.
        """
        return cls(
            link=as_text(record.get("link")),
            headline=as_text(record.get("headline")),
            datetime=as_text(record.get("datetime")),
            source=as_text(record.get("source")),
            summary=as_text(record.get("summary")),
            authors=as_text(record.get("authors")),
            image_desc=as_text(record.get("image_desc")),
        )

    @property
    def text(self) -> str:
        """Headline and summary joined by a single space."""
        return f"{as_text(self.headline)} {as_text(self.summary)}"


@dataclass(frozen=True)
class Entity:
    """
    A player or game and the ids of the headlines matched to it.

    Game entities also carry team and date information; for players
    those fields stay empty.
    """

    name: str
    matched_headlines: tuple[int, ...] = field(default_factory=tuple)
    home_team: str = ""
    away_team: str = ""
    game_id: str = ""
    datetime: str = ""

    @property
    def headline_count(self) -> int:
        return len(self.matched_headlines)

    @property
    def is_game(self) -> bool:
        return bool(self.home_team and self.away_team)

    def to_dict(self) -> dict[str, Any]:
        result = asdict(self)
        result["matched_headlines"] = list(self.matched_headlines)
        result["headline_count"] = self.headline_count
        return result
