"""
Alina Chat - Pipeline Orchestrator

Design patterns:
  - Chain of Responsibility: phases execute sequentially, each passing
    results to the next
  - Facade: run_chat() is the single entry point

Pipeline flow:
  Classify → Enrich → Generate → Suggest
"""

from __future__ import annotations

import logging
import time

from alina.agents.classifier import extract_search_phrase
from alina.agents.enrichment import resolve_movie
from alina.agents.responder import generate_reply
from alina.agents.suggestions import generate_suggestions
from alina.models import ChatRequest, ChatResponse, Persona

logger = logging.getLogger(__name__)


async def run_chat(request: ChatRequest, persona: Persona) -> ChatResponse:
    """
    Execute the chat pipeline for one request. Stateless: prior turns
    come only from the request itself.
    """
    t0 = time.perf_counter()
    message = request.message.strip()

    # ── Phase 1: Classify ─────────────────────────────────
    phrase = extract_search_phrase(message)
    logger.info("Phase 1 - Classify: message=%r phrase=%r", message[:80], phrase)

    # ── Phase 2: Enrich ───────────────────────────────────
    metadata = None
    if phrase:
        metadata = await resolve_movie(phrase)
        logger.info("Phase 2 - Enrich: %s", metadata.title if metadata else "no match")

    # ── Phase 3: Generate ─────────────────────────────────
    reply = await generate_reply(
        message,
        request.history,
        metadata,
        persona,
        model=request.model,
    )
    logger.info("Phase 3 - Generate: origin=%s chars=%d", reply.origin.value, len(reply.text))

    # ── Phase 4: Suggest ──────────────────────────────────
    suggestions = generate_suggestions(message, metadata)

    elapsed_ms = int((time.perf_counter() - t0) * 1000)
    logger.info("Pipeline complete in %d ms", elapsed_ms)

    return ChatResponse(
        reply=reply.text,
        origin=reply.origin,
        metadata=metadata,
        suggestions=suggestions,
        persona=persona.key,
        model=request.model or persona.model,
        processing_time_ms=elapsed_ms,
    )
