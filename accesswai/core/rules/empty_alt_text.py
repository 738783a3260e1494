"""
Empty Alt Text Rule — Flags <img alt="" src=...> that is not marked decorative.

Heuristic: an empty alt is correct for decorative images, so any line
mentioning "decorative" is trusted. Genuinely decorative images without
that marker will be reported.
"""

from __future__ import annotations

import re
from typing import Any

from accesswai.models.rule_models import LineContext, Rule, Severity


RULE_ID = "empty_alt_text"

_EMPTY_ALT_IMG = re.compile(r'<img[^>]*alt=""[^>]*src=', re.IGNORECASE)
DECORATIVE_MARKER = "decorative"


def check(ctx: LineContext) -> dict[str, Any] | None:
    if not _EMPTY_ALT_IMG.search(ctx.line):
        return None
    if DECORATIVE_MARKER in ctx.line.lower():
        return None
    return {}


RULE = Rule(
    rule_id=RULE_ID,
    severity=Severity.MEDIUM,
    type="Empty Alt Text",
    matcher=check,
    description_template="Image has empty alt text but may not be decorative",
    suggestion_template=(
        'If the image is decorative, use alt="" or role="presentation". '
        "Otherwise, provide descriptive alt text."
    ),
)
