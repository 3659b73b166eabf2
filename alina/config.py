"""
Alina Chat - Application Settings

Design patterns:
  - Singleton: single Settings instance shared everywhere
  - Configuration Object: centralizes all env-based config
"""

from __future__ import annotations

from typing import Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration sourced from environment / .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── OpenRouter (chat completions) ─────────────────────
    openrouter_api_key: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_app_name: str = "Alina Chat"
    openrouter_referer: Optional[str] = None
    completion_timeout_seconds: float = 20.0
    completion_max_tokens: int = 700

    # ── TMDB ──────────────────────────────────────────────
    tmdb_api_read_token: str = ""
    tmdb_api_key: str = ""   # v3 key, used only when no read token is set
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_language: str = "en-US"
    tmdb_timeout_seconds: float = 6.0
    cast_limit: int = 5

    # ── Personas ──────────────────────────────────────────
    default_persona: str = "alina"

    # ── App ───────────────────────────────────────────────
    app_host: str = "0.0.0.0"
    app_port: int = 5000
    log_level: str = "info"

    # ── Derived helpers ───────────────────────────────────
    @property
    def tmdb_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.tmdb_api_read_token:
            headers["Authorization"] = f"Bearer {self.tmdb_api_read_token}"
        return headers

    @property
    def tmdb_params(self) -> Dict[str, str]:
        if self.tmdb_api_read_token or not self.tmdb_api_key:
            return {}
        return {"api_key": self.tmdb_api_key}

    @property
    def openrouter_headers(self) -> Dict[str, str]:
        headers = {"X-Title": self.openrouter_app_name}
        if self.openrouter_referer:
            headers["HTTP-Referer"] = self.openrouter_referer
        return headers


# Singleton – import this everywhere
settings = Settings()
