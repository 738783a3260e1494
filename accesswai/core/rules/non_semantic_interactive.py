"""
Non-Semantic Interactive Element Rule — Detects clickable divs.

A <div> with a click handler is unreachable by keyboard and unnamed for
assistive technology unless it carries role="button".
"""

from __future__ import annotations

import re
from typing import Any

from accesswai.models.rule_models import LineContext, Rule, Severity


RULE_ID = "non_semantic_interactive"

_CLICKABLE_DIV = re.compile(r"<div[^>]*onclick=", re.IGNORECASE)
_BUTTON_ROLE = re.compile(r"""<div[^>]*role=["']button""", re.IGNORECASE)


def check(ctx: LineContext) -> dict[str, Any] | None:
    if _CLICKABLE_DIV.search(ctx.line) and not _BUTTON_ROLE.search(ctx.line):
        return {}
    return None


RULE = Rule(
    rule_id=RULE_ID,
    severity=Severity.HIGH,
    type="Non-Semantic Interactive Element",
    matcher=check,
    description_template="Div with click handler should be a button or have proper ARIA role",
    suggestion_template='Use <button> element or add role="button" and keyboard event handlers.',
)
