"""
Color Contrast Rule — Flags inline styles that set a literal hex color.

The contrast ratio is never computed; the match only asks for a manual
check against WCAG 1.4.3.
"""

from __future__ import annotations

import re
from typing import Any

from accesswai.models.rule_models import LineContext, Rule, Severity


RULE_ID = "color_contrast"

_INLINE_HEX_COLOR = re.compile(
    r"""style=["'][^"']*color:\s*#?([a-f0-9]{3}|[a-f0-9]{6})""", re.IGNORECASE
)


def check(ctx: LineContext) -> dict[str, Any] | None:
    match = _INLINE_HEX_COLOR.search(ctx.line)
    if match is None:
        return None
    return {"color": match.group(1)}


RULE = Rule(
    rule_id=RULE_ID,
    severity=Severity.MEDIUM,
    type="Potential Color Contrast Issue",
    matcher=check,
    description_template="Inline color styling detected - verify WCAG color contrast ratios",
    suggestion_template=(
        "Ensure text has at least 4.5:1 contrast ratio with background "
        "(3:1 for large text). Use a contrast checker tool."
    ),
)
