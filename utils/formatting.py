"""Human-readable formatting for durations and analysis summaries."""


def format_duration(seconds: float) -> str:
    """
    Format seconds as human-readable duration.

    Args:
        seconds: Duration in seconds.

    Returns:
        Formatted string like "45.2s", "2m 5s", or "1h 2m 5s".
    """
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(int(seconds), 60)
    if minutes < 60:
        return f"{minutes}m {secs}s"
    hours, minutes = divmod(minutes, 60)
    return f"{hours}h {minutes}m {secs}s"


def format_sentiment(score: float) -> str:
    """
    Format a normalized sentiment score with an explicit sign.

    Returns:
        String like "+0.42", "-0.07", or "0.00" for neutral.
    """
    if round(score, 2) == 0:
        return "0.00"
    return f"{score:+.2f}"


def format_top_words(entries: list[dict], key: str = "word", limit: int = 5) -> str:
    """
    Render ranked entries as a compact "word (count)" list.

    Args:
        entries: Dicts with the given key and a "count" field.
        key: Field holding the text ("word" or "phrase").
        limit: Maximum number of entries shown.

    Returns:
        Comma-separated string, or "-" when there are no entries.
    """
    if not entries:
        return "-"
    return ", ".join(f"{entry[key]} ({entry['count']})" for entry in entries[:limit])
