"""
Heading Hierarchy Rule — Flags h3-h6 headings near the top of a file.

Approximation only: no heading tree is built. Any heading deeper than
h2 within the first HEADING_CUTOFF_LINES lines is reported.
"""

from __future__ import annotations

import re
from typing import Any

from accesswai.models.rule_models import LineContext, Rule, Severity


RULE_ID = "heading_hierarchy"

HEADING_CUTOFF_LINES = 50
MAX_EARLY_LEVEL = 2

_HEADING = re.compile(r"<h([1-6])", re.IGNORECASE)


def check(ctx: LineContext) -> dict[str, Any] | None:
    match = _HEADING.search(ctx.line)
    if match is None:
        return None
    level = int(match.group(1))
    if level > MAX_EARLY_LEVEL and ctx.index < HEADING_CUTOFF_LINES:
        return {"level": level}
    return None


RULE = Rule(
    rule_id=RULE_ID,
    severity=Severity.LOW,
    type="Heading Hierarchy",
    matcher=check,
    description_template="H{level} used early in document - verify proper heading hierarchy",
    suggestion_template=(
        "Use headings in sequential order (h1, h2, h3) to create a logical document structure."
    ),
)
