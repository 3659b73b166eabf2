"""
Tests for the TMDB HTTP client, using an in-memory httpx transport.
"""

from __future__ import annotations

import httpx
import pytest

from alina.clients import tmdb
from alina.config import settings


@pytest.fixture
def transport_requests(monkeypatch):
    """Install a mock-transport client and collect the requests it sees."""
    seen = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.endswith("/search/movie"):
            return httpx.Response(200, json={"results": [{"id": 27205, "title": "Inception"}]})
        if request.url.path.endswith("/movie/27205"):
            return httpx.Response(200, json={"id": 27205, "title": "Inception", "credits": {"cast": [], "crew": []}})
        return httpx.Response(404, json={"status_message": "not found"})

    client = httpx.AsyncClient(base_url=settings.tmdb_base_url, transport=httpx.MockTransport(_handler))
    monkeypatch.setattr(tmdb, "_client", client)
    yield seen


@pytest.mark.asyncio
async def test_search_movies(transport_requests):
    results = await tmdb.search_movies("Inception", language="en-US")
    assert results[0]["id"] == 27205
    params = transport_requests[0].url.params
    assert params["query"] == "Inception"
    assert params["language"] == "en-US"


@pytest.mark.asyncio
async def test_details_request_credits(transport_requests):
    details = await tmdb.get_movie_details(27205)
    assert details["title"] == "Inception"
    assert transport_requests[0].url.params["append_to_response"] == "credits"


@pytest.mark.asyncio
async def test_error_status_raises(transport_requests):
    with pytest.raises(httpx.HTTPStatusError):
        await tmdb.get_movie_details(1)
    assert len(transport_requests) == 1  # no retry
