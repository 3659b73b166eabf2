"""
Alina Chat - LLM Client (LangChain + OpenRouter)

Factory + Adapter pattern: wraps LangChain's ChatOpenAI, pointed at the
OpenAI-compatible OpenRouter endpoint, behind a dict-based API.

Design patterns used:
  - Factory: create_llm() builds configured ChatOpenAI instances
  - Adapter: chat_completion() adapts LangChain to our message dicts
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from alina.config import settings

logger = logging.getLogger(__name__)

# ── LLM Factory ──────────────────────────────────────────

# None lets the OpenAI SDK manage its own httpx client
_http_client: Optional[httpx.AsyncClient] = None


def create_llm(
    *,
    model: str,
    temperature: float = 0.7,
    max_tokens: Optional[int] = None,
) -> ChatOpenAI:
    """
    Factory: create a ChatOpenAI instance for the OpenRouter API.
    Retries are disabled; a timeout is a plain failure.
    """
    return ChatOpenAI(
        model=model,
        openai_api_key=settings.openrouter_api_key,
        openai_api_base=settings.openrouter_base_url,
        temperature=temperature,
        max_tokens=max_tokens or settings.completion_max_tokens,
        timeout=settings.completion_timeout_seconds,
        max_retries=0,
        default_headers=settings.openrouter_headers,
        http_async_client=_http_client,
    )


def is_configured() -> bool:
    return bool(settings.openrouter_api_key.strip())


# ── Message conversion helper ─────────────────────────────

def _to_langchain_messages(messages: List[Dict[str, str]]) -> list:
    """Convert our dict-based messages to LangChain message objects."""
    lc_msgs = []
    for msg in messages:
        role = msg["role"]
        content = msg["content"]
        if role == "system":
            lc_msgs.append(SystemMessage(content=content))
        elif role == "assistant":
            lc_msgs.append(AIMessage(content=content))
        else:
            lc_msgs.append(HumanMessage(content=content))
    return lc_msgs


# ── Core chat completion ──────────────────────────────────


async def chat_completion(
    messages: List[Dict[str, str]],
    *,
    model: str,
    temperature: float = 0.7,
    max_tokens: Optional[int] = None,
) -> str:
    """Send a chat completion request and return the text content."""
    llm = create_llm(model=model, temperature=temperature, max_tokens=max_tokens)

    logger.debug(
        "LLM request: model=%s turns=%d temp=%.1f",
        model, len(messages), temperature,
    )

    response = await llm.ainvoke(_to_langchain_messages(messages))
    content = response.content if isinstance(response.content, str) else ""

    logger.info("LLM response: %d chars, first 100: %s", len(content), repr(content[:100]))
    return content


# ── Health check ──────────────────────────────────────────

_health_client: Optional[httpx.AsyncClient] = None


async def _get_health_client() -> httpx.AsyncClient:
    global _health_client
    if _health_client is None or _health_client.is_closed:
        _health_client = httpx.AsyncClient(
            base_url=settings.openrouter_base_url,
            headers={"Authorization": f"Bearer {settings.openrouter_api_key}"},
            timeout=httpx.Timeout(settings.completion_timeout_seconds),
        )
    return _health_client


async def check_llm_health() -> Dict[str, Any]:
    """Return the model list from the completion API."""
    client = await _get_health_client()
    resp = await client.get("/models")
    resp.raise_for_status()
    return resp.json()


async def close_client() -> None:
    """Clean up any open HTTP connections."""
    global _health_client
    if _health_client and not _health_client.is_closed:
        await _health_client.aclose()
        _health_client = None
