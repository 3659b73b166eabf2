"""
Alina Chat - Response Generator

Design patterns:
  - Template Method: prompt assembly (system → history → user turn)
  - Strategy: live model reply vs. deterministic template fallback

Builds the outbound turn sequence, calls the chat-completion API once,
and substitutes a fixed template reply on any failure. No retries.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from alina.clients import chat_completion, is_configured
from alina.keywords import Category, detect_category
from alina.models import ChatTurn, GeneratedReply, MovieMetadata, Persona, ReplyOrigin

logger = logging.getLogger(__name__)

_HISTORY_ROLES = {"user", "assistant"}

# ── Prompt templates ─────────────────────────────────────

_METADATA_BLOCK = """\

[Movie information]
Title: {title}
Year: {year}
Rating: {rating}
Genre: {genre}
Director: {director}
Cast: {cast}
Plot: {plot}

Respond enthusiastically about "{title}" using the information above. \
Share what makes it worth watching, and mention the director and cast where it helps."""

_GENERAL_GUIDANCE = """\

If this is about movies or shows, recommend titles, share useful information, \
or offer a fun piece of trivia. Otherwise, answer helpfully in your own voice."""

# ── Fallback templates ───────────────────────────────────

ADVISORY_REPLY = (
    "The chat service is not configured yet: no completion API key has been set. "
    "Please add an API key to the server configuration and try again."
)

METADATA_FALLBACK = """\
**{title}** ({year}) is a {genre} title directed by {director}, rated {rating}.

**Cast:** {cast}
**Runtime:** {runtime}

{plot}

Ask me about similar titles, the cast, or more from {director}!"""

CATEGORY_FALLBACKS: Dict[Category, str] = {
    Category.HORROR: (
        "Looking for something scary? Here are a few horror classics worth a watch:\n\n"
        "- **The Conjuring** (2013): a chilling haunted-house story based on real case files\n"
        "- **Get Out** (2017): sharp, unsettling psychological horror\n"
        "- **Hereditary** (2018): a slow-burn family nightmare\n"
        "- **A Quiet Place** (2018): survival horror where silence is everything\n\n"
        "Tell me what kind of scares you like and I can narrow it down!"
    ),
    Category.COMEDY: (
        "In the mood for a laugh? These comedies are crowd favorites:\n\n"
        "- **Superbad** (2007): an outrageous coming-of-age night out\n"
        "- **The Grand Budapest Hotel** (2014): whimsical, quick-witted and stylish\n"
        "- **Game Night** (2018): a party game that spirals out of control\n"
        "- **Paddington 2** (2017): pure feel-good charm\n\n"
        "Want something silly, dark, or romantic? Just say the word!"
    ),
    Category.ACTION: (
        "Ready for some action? Here are a few high-octane picks:\n\n"
        "- **Mad Max: Fury Road** (2015): a relentless desert chase\n"
        "- **John Wick** (2014): stylish, precise and non-stop\n"
        "- **Die Hard** (1988): the blueprint for modern action movies\n"
        "- **Mission: Impossible - Fallout** (2018): jaw-dropping practical stunts\n\n"
        "Tell me your favorite action star and I'll find more!"
    ),
}

GENERIC_FALLBACK = (
    "Hi! I'm your movie and TV companion. I can:\n\n"
    "- **Recommend** movies and shows by genre, mood or favorite titles\n"
    "- **Look up** details like cast, director, ratings and plot\n"
    "- **Share trivia** and behind-the-scenes facts\n\n"
    "Try asking something like \"Tell me about Inception\" or \"suggest a funny movie\"."
)


# ── Message assembly ─────────────────────────────────────


def filter_history(history: Optional[Iterable[Any]]) -> List[ChatTurn]:
    """Keep well-formed user/assistant turns with non-empty text, in order."""
    turns: List[ChatTurn] = []
    for item in history or []:
        try:
            turn = ChatTurn.model_validate(item)
        except ValidationError:
            continue
        if turn.role not in _HISTORY_ROLES or not turn.content.strip():
            continue
        turns.append(turn)
    return turns


def build_user_turn(message: str, metadata: Optional[MovieMetadata]) -> str:
    if metadata:
        return message + "\n" + _METADATA_BLOCK.format(**metadata.model_dump())
    return message + "\n" + _GENERAL_GUIDANCE


def build_messages(
    message: str,
    history: Optional[Iterable[Any]],
    metadata: Optional[MovieMetadata],
    persona: Persona,
) -> List[Dict[str, str]]:
    """Assemble system prompt, prior turns and the new user turn."""
    turns = [
        ChatTurn(role="system", content=persona.system_prompt),
        *filter_history(history),
        ChatTurn(role="user", content=build_user_turn(message, metadata)),
    ]
    return [t.model_dump() for t in turns]


# ── Fallback ─────────────────────────────────────────────


def build_fallback_reply(message: str, metadata: Optional[MovieMetadata]) -> str:
    """Deterministic reply used whenever the completion API cannot answer."""
    if metadata:
        return METADATA_FALLBACK.format(**metadata.model_dump())
    category = detect_category(message)
    if category is not None:
        return CATEGORY_FALLBACKS[category]
    return GENERIC_FALLBACK


# ── Generate ─────────────────────────────────────────────


async def generate_reply(
    message: str,
    history: Optional[Iterable[Any]],
    metadata: Optional[MovieMetadata],
    persona: Persona,
    *,
    model: Optional[str] = None,
    max_tokens: Optional[int] = None,
) -> GeneratedReply:
    """Ask the model for a reply; fall back to a template on any failure."""
    if not is_configured():
        logger.warning("No completion API key configured, returning advisory reply")
        return GeneratedReply(text=ADVISORY_REPLY, origin=ReplyOrigin.FALLBACK)

    messages = build_messages(message, history, metadata, persona)
    model_id = model or persona.model

    try:
        raw = await chat_completion(
            messages,
            model=model_id,
            temperature=persona.temperature,
            max_tokens=max_tokens,
        )
    except Exception as exc:
        logger.warning("Completion call failed (model=%s): %s", model_id, exc)
        raw = ""

    text = (raw or "").strip()
    if text:
        return GeneratedReply(text=text, origin=ReplyOrigin.MODEL)

    logger.info("Using fallback reply (metadata=%s)", bool(metadata))
    return GeneratedReply(text=build_fallback_reply(message, metadata), origin=ReplyOrigin.FALLBACK)
