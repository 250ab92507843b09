"""Cyclone season names used by the IMD seasonal frequency tables."""

from __future__ import annotations

MONSOON = "Monsoon"
POST_MONSOON = "Post-Monsoon"
WINTER = "Winter"

SEASONS: tuple[str, ...] = (MONSOON, POST_MONSOON, WINTER)

# Spellings seen across the source tables and UI selectors
_ALIASES: dict[str, str] = {
    "monsoon": MONSOON,
    "sw monsoon": MONSOON,
    "post": POST_MONSOON,
    "post-monsoon": POST_MONSOON,
    "post monsoon": POST_MONSOON,
    "postmonsoon": POST_MONSOON,
    "winter": WINTER,
}


def canonical_season(name: str) -> str:
    """Map a season spelling to its canonical name.

    Unknown names are returned stripped but otherwise unchanged, so a filter
    on an unexpected season simply matches nothing.
    """
    cleaned = name.strip()
    return _ALIASES.get(cleaned.lower(), cleaned)
