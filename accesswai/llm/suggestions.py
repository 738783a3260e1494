"""
Suggestion Generator — Chooses between AI-backed and deterministic narratives.

The strategy is resolved once per call:
- no text generator configured → deterministic, no network attempt
- generator answers with non-empty text within the timeout → AI-backed
- anything else → deterministic

Never raises and never retries.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from accesswai.errors import SuggestionServiceError
from accesswai.llm.fallback import generate_fallback_suggestions
from accesswai.llm.gateway import TextGenerator
from accesswai.llm.prompt_builder import build_prompt
from accesswai.models.llm_models import SuggestionResult, SuggestionStrategy
from accesswai.models.scan_models import Issue

logger = logging.getLogger("accesswai.suggestions")

DEFAULT_TIMEOUT_SECONDS = 30.0


async def generate_suggestions(
    issues: Sequence[Issue],
    text_generator: TextGenerator | None = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> SuggestionResult:
    """
    Produce the recommendation narrative for an issue list.

    Args:
        issues: Ordered issues from the scanner.
        text_generator: Async capability mapping a prompt to text, or None.
        timeout: Upper bound in seconds for the AI call.

    Returns:
        SuggestionResult tagged with the strategy that produced the text.
    """
    if text_generator is None:
        logger.info("No text generator configured — using deterministic suggestions")
        return _deterministic(issues)

    try:
        text = await _request_narrative(issues, text_generator, timeout)
    except SuggestionServiceError as e:
        logger.warning(f"AI suggestions failed: {e} — using deterministic suggestions")
        return _deterministic(issues)

    return SuggestionResult(text=text, strategy=SuggestionStrategy.AI_BACKED)


async def _request_narrative(
    issues: Sequence[Issue],
    text_generator: TextGenerator,
    timeout: float,
) -> str:
    try:
        prompt = build_prompt(issues)
        text = await asyncio.wait_for(text_generator(prompt), timeout=timeout)
    except asyncio.TimeoutError as e:
        raise SuggestionServiceError(f"no response within {timeout}s") from e
    except Exception as e:
        raise SuggestionServiceError(f"{type(e).__name__}: {e}") from e

    if not isinstance(text, str) or not text.strip():
        raise SuggestionServiceError("empty or malformed response")
    return text


def _deterministic(issues: Sequence[Issue]) -> SuggestionResult:
    return SuggestionResult(
        text=generate_fallback_suggestions(issues),
        strategy=SuggestionStrategy.DETERMINISTIC,
    )
