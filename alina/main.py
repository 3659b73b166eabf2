"""
Alina Chat - FastAPI Application

Chat endpoint, persona listing and health check.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, List

from fastapi import FastAPI, HTTPException, Request

from alina import clients
from alina.clients import tmdb
from alina.config import settings
from alina.models import ChatRequest, ChatResponse, PersonaInfo
from alina.personas import UnknownPersonaError, get_persona, list_personas
from alina.pipeline import run_chat

logger = logging.getLogger(__name__)


# ── Lifespan: startup/shutdown ────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and tear down shared HTTP clients."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )
    logger.info("💬 Alina Chat starting up…")
    logger.info("   Completions: %s  key set: %s", settings.openrouter_base_url, clients.is_configured())
    logger.info("   TMDB: %s  language: %s", settings.tmdb_base_url, settings.tmdb_language)
    logger.info("   Default persona: %s", settings.default_persona)

    yield  # app runs here

    logger.info("💬 Alina Chat shutting down…")
    await clients.close_client()
    await tmdb.close_client()


# ── App instance ──────────────────────────────────────────

app = FastAPI(
    title="Alina Chat",
    version="1.0.0",
    description="Persona chat backend with movie metadata enrichment",
    lifespan=lifespan,
)


# ── Logging middleware ────────────────────────────────────


@app.middleware("http")
async def log_requests(request: Request, call_next):
    t0 = time.perf_counter()
    response = await call_next(request)
    elapsed = (time.perf_counter() - t0) * 1000
    logger.info(
        "%s %s → %d (%.0f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed,
    )
    return response


# ── Health endpoint ───────────────────────────────────────


@app.get("/api/health")
async def health():
    """Health check: verifies completion API and TMDB connectivity."""
    status = {"status": "ok", "llm": "unknown", "tmdb": "unknown"}
    if not clients.is_configured():
        status["llm"] = "error: no API key configured"
    else:
        try:
            info = await clients.check_llm_health()
            status["llm"] = "ok"
            models = info.get("data", []) if isinstance(info, dict) else info
            status["llm_models"] = len(models) if isinstance(models, list) else 0
        except Exception as exc:
            status["llm"] = f"error: {exc}"

    try:
        await tmdb.check_tmdb_health()
        status["tmdb"] = "ok"
    except Exception as exc:
        status["tmdb"] = f"error: {exc}"

    ok = status["llm"] == "ok" and status["tmdb"] == "ok"
    status["status"] = "ok" if ok else "degraded"
    return status


# ── Personas ──────────────────────────────────────────────


@app.get("/api/personas", response_model=List[PersonaInfo])
async def personas():
    """List available personas (system prompts are not exposed)."""
    return [
        PersonaInfo(key=p.key, name=p.name, model=p.model, temperature=p.temperature, traits=p.traits)
        for p in list_personas()
    ]


# ── Chat endpoint ─────────────────────────────────────────


@app.post("/api/chat", response_model=ChatResponse)
async def chat(body: ChatRequest):
    """
    Submit one chat turn.

    Returns the reply text, any resolved movie metadata, follow-up
    suggestions and whether the reply came from the model or a fallback.
    """
    if not body.message.strip():
        raise HTTPException(status_code=422, detail="Message cannot be empty")

    try:
        persona = get_persona(body.persona)
    except UnknownPersonaError as exc:
        raise HTTPException(status_code=422, detail=f"Unknown persona: {exc.args[0]}")

    try:
        return await run_chat(body, persona)
    except Exception as exc:
        logger.exception("Chat pipeline failed")
        raise HTTPException(
            status_code=503,
            detail=f"The chat service could not complete the request: {exc}",
        )
