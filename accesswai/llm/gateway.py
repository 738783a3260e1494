"""
LLM Gateway — Wraps the Groq client as a text-generation capability.

Single attempt per call: the SDK timeout bounds it and SDK retries are
disabled. Callers convert any failure into the deterministic fallback.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from groq import Groq

from accesswai.config import Settings, settings as default_settings

logger = logging.getLogger("accesswai.llm")

# prompt -> narrative text
TextGenerator = Callable[[str], Awaitable[str]]


class LLMGateway:
    """Groq chat-completion client exposing `complete(prompt) -> str`."""

    def __init__(self, api_key: str, config: Settings | None = None) -> None:
        config = config or default_settings
        self.model = config.accesswai_model
        self.timeout = config.llm_timeout
        self.temperature = config.llm_temperature
        self.max_tokens = config.llm_max_tokens
        self.client = Groq(api_key=api_key, timeout=self.timeout, max_retries=0)

    async def complete(self, prompt: str) -> str:
        """
        Send a prompt and return the response text verbatim.

        Runs the synchronous Groq SDK in a thread pool to avoid blocking
        the event loop. Errors propagate to the caller.
        """
        response = await asyncio.to_thread(self._sync_complete, prompt)
        content = response.choices[0].message.content or ""
        tokens = getattr(response.usage, "total_tokens", 0) if response.usage else 0
        logger.info(f"LLM completion: model={self.model}, tokens={tokens}")
        return content

    def _sync_complete(self, prompt: str):
        """Synchronous Groq completion call."""
        return self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )


def get_text_generator(config: Settings | None = None) -> TextGenerator | None:
    """
    Build the default text generator, or None when no credential is set.

    Returning None lets the suggestion generator go straight to the
    fallback without a network attempt.
    """
    config = config or default_settings
    if not config.llm_configured:
        logger.warning("GROQ_API_KEY missing — AI suggestions disabled")
        return None
    return LLMGateway(api_key=config.groq_api_key.strip(), config=config).complete
