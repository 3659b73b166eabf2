"""
Tests for the LLM client, with ChatOpenAI traffic served by an
in-memory httpx transport.
"""

from __future__ import annotations

import json

import httpx
import pytest

from alina import clients
from alina.agents.responder import CATEGORY_FALLBACKS, generate_reply
from alina.config import settings
from alina.keywords import Category
from alina.models import ReplyOrigin
from alina.personas import get_persona


def _completion_body(content: str) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "openai/gpt-4o-mini",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


@pytest.fixture
def llm_transport(monkeypatch):
    """Route completion requests to a scripted handler and record them."""
    state = {"requests": [], "respond": None}

    def _handler(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        return state["respond"](request)

    monkeypatch.setattr(settings, "openrouter_api_key", "test-key")
    monkeypatch.setattr(
        clients, "_http_client", httpx.AsyncClient(transport=httpx.MockTransport(_handler))
    )
    return state


_HISTORY = [
    {"role": "user", "content": "hi"},
    {"role": "assistant", "content": "hello!"},
]


@pytest.mark.asyncio
async def test_server_error_falls_back_without_retry(llm_transport):
    llm_transport["respond"] = lambda request: httpx.Response(500, json={"error": {"message": "upstream down"}})

    reply = await generate_reply("suggest a scary movie", _HISTORY, None, get_persona("alina"))

    assert reply.origin is ReplyOrigin.FALLBACK
    assert reply.text == CATEGORY_FALLBACKS[Category.HORROR]
    assert len(llm_transport["requests"]) == 1

    body = json.loads(llm_transport["requests"][0].content)
    assert [m["role"] for m in body["messages"]] == ["system", "user", "assistant", "user"]
    assert body["messages"][-1]["content"].startswith("suggest a scary movie")


@pytest.mark.asyncio
async def test_timeout_falls_back_without_retry(llm_transport):
    def _timeout(request):
        raise httpx.ReadTimeout("timed out", request=request)

    llm_transport["respond"] = _timeout

    reply = await generate_reply("a funny one", [], None, get_persona("alina"))

    assert reply.origin is ReplyOrigin.FALLBACK
    assert reply.text == CATEGORY_FALLBACKS[Category.COMEDY]
    assert len(llm_transport["requests"]) == 1


@pytest.mark.asyncio
async def test_successful_completion_is_trimmed(llm_transport):
    llm_transport["respond"] = lambda request: httpx.Response(
        200, json=_completion_body("  Inception is a dream-heist classic.  \n")
    )

    persona = get_persona("technical")
    reply = await generate_reply("hello", _HISTORY, None, persona)

    assert reply.origin is ReplyOrigin.MODEL
    assert reply.text == "Inception is a dream-heist classic."
    assert len(llm_transport["requests"]) == 1

    request = llm_transport["requests"][0]
    body = json.loads(request.content)
    assert request.url.path.endswith("/chat/completions")
    assert body["model"] == persona.model
    assert body["temperature"] == persona.temperature
    assert [m["role"] for m in body["messages"]] == ["system", "user", "assistant", "user"]
    assert body["messages"][0]["content"] == persona.system_prompt


def test_message_conversion_roles():
    msgs = clients._to_langchain_messages([
        {"role": "system", "content": "s"},
        {"role": "user", "content": "u"},
        {"role": "assistant", "content": "a"},
    ])
    assert [m.type for m in msgs] == ["system", "human", "ai"]


def test_create_llm_disables_retries(monkeypatch):
    monkeypatch.setattr(settings, "openrouter_api_key", "test-key")
    llm = clients.create_llm(model="openai/gpt-4o-mini")
    assert llm.max_retries == 0
