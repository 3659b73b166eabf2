"""
Alina Chat - Metadata Enrichment Agent

Design patterns:
  - Builder: constructs MovieMetadata from a TMDB detail record
  - Null Object: every failure collapses to "no match" (None)

Resolves a free-text phrase to one canonical catalog title via a
two-step lookup (search → details with credits). The first search
result is taken as-is; there is no disambiguation.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from alina.clients.tmdb import get_movie_details, search_movies
from alina.config import settings
from alina.models import MovieMetadata

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"
NO_RATING = "N/A"
NO_PLOT = "No plot summary available."


def _extract_year(date_str: Optional[str]) -> Union[int, str]:
    if date_str and len(date_str) >= 4:
        try:
            return int(date_str[:4])
        except ValueError:
            pass
    return UNKNOWN


def _format_rating(vote_average: Any) -> str:
    try:
        value = float(vote_average)
    except (TypeError, ValueError):
        return NO_RATING
    # TMDB reports unrated titles as 0
    return f"{value:.1f}/10" if value > 0 else NO_RATING


def _format_runtime(runtime: Any) -> str:
    if isinstance(runtime, bool):
        return UNKNOWN
    try:
        minutes = int(runtime)
    except (TypeError, ValueError):
        return UNKNOWN
    return f"{minutes} min" if minutes > 0 else UNKNOWN


def _join_names(items: List[Dict[str, Any]], limit: Optional[int] = None) -> str:
    names = [i["name"] for i in items if isinstance(i, dict) and i.get("name")]
    if limit is not None:
        names = names[:limit]
    return ", ".join(names) or UNKNOWN


def _find_director(crew: List[Dict[str, Any]]) -> str:
    for member in crew:
        if isinstance(member, dict) and member.get("job") == "Director" and member.get("name"):
            return member["name"]
    return UNKNOWN


def build_metadata(details: Dict[str, Any], *, cast_limit: Optional[int] = None) -> Optional[MovieMetadata]:
    """Normalize a TMDB detail record. Returns None when it has no title."""
    title = (details.get("title") or "").strip()
    if not title:
        return None

    credits = details.get("credits") or {}
    return MovieMetadata(
        title=title,
        year=_extract_year(details.get("release_date")),
        rating=_format_rating(details.get("vote_average")),
        genre=_join_names(details.get("genres") or []),
        director=_find_director(credits.get("crew") or []),
        cast=_join_names(credits.get("cast") or [], limit=cast_limit or settings.cast_limit),
        runtime=_format_runtime(details.get("runtime")),
        plot=(details.get("overview") or "").strip() or NO_PLOT,
    )


# ── Resolve a phrase ─────────────────────────────────────


async def resolve_movie(phrase: str, *, language: Optional[str] = None) -> Optional[MovieMetadata]:
    """
    Search the catalog for *phrase* and return the first hit's metadata.
    Never raises: network errors, bad statuses and missing data all
    return None.
    """
    try:
        results = await search_movies(phrase, language=language)
        if not results:
            logger.info("TMDB: no results for %r", phrase)
            return None

        movie_id = results[0].get("id")
        if movie_id is None:
            logger.warning("TMDB: first search result for %r has no id", phrase)
            return None

        details = await get_movie_details(movie_id, language=language)
        metadata = build_metadata(details)
    except Exception as exc:
        logger.warning("Enrichment failed for %r: %s", phrase, exc)
        return None

    if metadata:
        logger.info("Resolved %r → %s (%s)", phrase, metadata.title, metadata.year)
    return metadata
