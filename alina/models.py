"""
Alina Chat - Pydantic Models

Shared data models used across the entire chat pipeline.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr


# ── Conversation ─────────────────────────────────────────


class ChatTurn(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


# ── Catalog enrichment ───────────────────────────────────


class MovieMetadata(BaseModel):
    """A single resolved catalog title, normalized for prompts and templates."""

    model_config = ConfigDict(frozen=True)

    title: str
    year: Union[int, str] = "Unknown"
    rating: str = "N/A"
    genre: str = "Unknown"
    director: str = "Unknown"
    cast: str = "Unknown"
    runtime: str = "Unknown"
    plot: str = "No plot summary available."


# ── Personas ─────────────────────────────────────────────


class Persona(BaseModel):
    """Voice of the assistant: model, sampling temperature and system prompt."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    model: str
    temperature: float = Field(ge=0.0, le=2.0)
    system_prompt: str
    traits: List[str] = Field(default_factory=list)


# ── Reply generation ─────────────────────────────────────


class ReplyOrigin(str, Enum):
    MODEL = "model"
    FALLBACK = "fallback"


class GeneratedReply(BaseModel):
    text: str
    origin: ReplyOrigin


# ── API Contract ─────────────────────────────────────────


class ChatRequest(BaseModel):
    message: StrictStr = Field(..., max_length=4000)
    # Items are validated and filtered downstream, malformed turns are dropped
    history: List[Any] = Field(default_factory=list, max_length=50)
    persona: Optional[str] = Field(default=None, max_length=50)
    model: Optional[str] = Field(default=None, max_length=100)


class ChatResponse(BaseModel):
    reply: str
    origin: ReplyOrigin
    metadata: Optional[MovieMetadata] = None
    suggestions: List[str] = Field(default_factory=list, max_length=4)
    persona: str
    model: str
    processing_time_ms: int


class PersonaInfo(BaseModel):
    key: str
    name: str
    model: str
    temperature: float
    traits: List[str] = Field(default_factory=list)
