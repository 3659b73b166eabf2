"""
Alina Chat - Keyword Rules

Single source of truth for keyword matching. The fallback reply
generator and the suggestion generator both resolve a message to a
Category through the same ordered rule list, so they always agree on
priority (horror → comedy → action).
"""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Optional, Pattern, Tuple


class Category(str, Enum):
    HORROR = "horror"
    COMEDY = "comedy"
    ACTION = "action"


# Order matters: first match wins.
CATEGORY_RULES: List[Tuple[Pattern[str], Category]] = [
    (re.compile(r"\b(?:horror|scary)\b", re.I), Category.HORROR),
    (re.compile(r"\b(?:comedy|funny)\b", re.I), Category.COMEDY),
    (re.compile(r"\baction\b", re.I), Category.ACTION),
]


def detect_category(text: str) -> Optional[Category]:
    """Return the first category whose keywords appear in *text*."""
    for pattern, category in CATEGORY_RULES:
        if pattern.search(text or ""):
            return category
    return None


# ── Catalog query vocabulary ──────────────────────────────

CATALOG_KEYWORDS: Tuple[str, ...] = (
    "movies", "movie", "films", "film", "shows", "show", "series",
    "suggest", "recommend", "best", "top", "rated",
)

# Phrases that mark a lookup on their own
TRIGGER_PHRASES: Tuple[str, ...] = ("tell me about", "what about")

FILLER_PHRASES: Tuple[str, ...] = ("tell me about", "what about", "the movie", "the film")


def _alternation(terms) -> Pattern[str]:
    # Longest first so "the movie" is consumed before "movie"
    ordered = sorted(set(terms), key=len, reverse=True)
    body = "|".join(r"\s+".join(re.escape(w) for w in t.split()) for t in ordered)
    return re.compile(rf"\b(?:{body})\b", re.I)


TRIGGER_PATTERN = _alternation(CATALOG_KEYWORDS + TRIGGER_PHRASES)
STRIP_PATTERN = _alternation(CATALOG_KEYWORDS + FILLER_PHRASES)
