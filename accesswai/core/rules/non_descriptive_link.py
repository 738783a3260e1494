"""
Non-Descriptive Link Text Rule — Detects low-information anchor text.
"""

from __future__ import annotations

import re
from typing import Any

from accesswai.models.rule_models import LineContext, Rule, Severity


RULE_ID = "non_descriptive_link"

VAGUE_LINK_PHRASES = ("click here", "read more", "here", "more")

_VAGUE_LINK = re.compile(
    r"<a[^>]*>\s*(" + "|".join(VAGUE_LINK_PHRASES) + r")\s*</a>", re.IGNORECASE
)


def check(ctx: LineContext) -> dict[str, Any] | None:
    match = _VAGUE_LINK.search(ctx.line)
    if match is None:
        return None
    return {"text": match.group(1)}


RULE = Rule(
    rule_id=RULE_ID,
    severity=Severity.MEDIUM,
    type="Non-Descriptive Link Text",
    matcher=check,
    description_template="Link text is not descriptive",
    suggestion_template=(
        "Use meaningful link text that describes the destination. "
        'Instead of "click here", use "View the accessibility guide".'
    ),
)
