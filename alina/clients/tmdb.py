"""
Alina Chat - TMDB Client

Design patterns:
  - Repository: abstracts TMDB API behind a clean interface
  - Singleton: shared httpx client with connection pooling

Async HTTP client for the two read-only TMDB v3 lookups the enricher
needs. Every call is bounded by a single timeout and never retried;
errors propagate to the caller as httpx exceptions.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from alina.config import settings

logger = logging.getLogger(__name__)

# ── Shared client ─────────────────────────────────────────

_client: Optional[httpx.AsyncClient] = None


async def get_client() -> httpx.AsyncClient:
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            base_url=settings.tmdb_base_url,
            headers=settings.tmdb_headers,
            timeout=httpx.Timeout(settings.tmdb_timeout_seconds),
        )
    return _client


async def close_client() -> None:
    global _client
    if _client and not _client.is_closed:
        await _client.aclose()
        _client = None


# ── Single-shot request ───────────────────────────────────


async def _request(path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """GET *path* once. Raises httpx.HTTPError on timeout or non-2xx status."""
    query = {**settings.tmdb_params, **(params or {})}
    client = await get_client()
    resp = await client.get(path, params=query)
    resp.raise_for_status()
    data = resp.json()
    if not isinstance(data, dict):
        raise ValueError(f"TMDB returned a non-object body for {path}")
    return data


# ── Public helpers ────────────────────────────────────────


async def search_movies(query: str, language: Optional[str] = None) -> List[Dict[str, Any]]:
    """Execute /search/movie and return the result list in TMDB's relevance order."""
    data = await _request(
        "/search/movie",
        {"query": query, "language": language or settings.tmdb_language, "include_adult": "false"},
    )
    return data.get("results") or []


async def get_movie_details(movie_id: int, language: Optional[str] = None) -> Dict[str, Any]:
    """Fetch full details for a single movie with credits embedded."""
    return await _request(
        f"/movie/{movie_id}",
        {"language": language or settings.tmdb_language, "append_to_response": "credits"},
    )


async def check_tmdb_health() -> Dict[str, Any]:
    """Return the TMDB configuration document; raises when unreachable."""
    return await _request("/configuration")
