"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from accesswai.config import settings
from accesswai.core.scanner import Scanner
from accesswai.llm.gateway import TextGenerator, get_text_generator as build_text_generator


@lru_cache
def get_scanner() -> Scanner:
    """Shared scanner over the full catalog (stateless)."""
    return Scanner()


@lru_cache
def get_text_generator() -> TextGenerator | None:
    """Shared AI text generator, or None when no API key is configured."""
    return build_text_generator(settings)
