"""
Suggestion Data Models — the tagged outcome of the suggestion generator.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class SuggestionStrategy(str, Enum):
    AI_BACKED = "ai_backed"
    DETERMINISTIC = "deterministic"


class SuggestionResult(BaseModel):
    """Narrative text plus the strategy that produced it."""

    text: str = Field(..., min_length=1)
    strategy: SuggestionStrategy
