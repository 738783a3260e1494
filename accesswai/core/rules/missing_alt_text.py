"""
Missing Alt Text Rule — Detects <img> tags with no alt attribute.

Screen readers have nothing to announce for such an image (WCAG 1.1.1).
"""

from __future__ import annotations

import re
from typing import Any

from accesswai.models.rule_models import LineContext, Rule, Severity


RULE_ID = "missing_alt_text"

_IMG_WITHOUT_ALT = re.compile(r"<img(?![^>]*alt=)", re.IGNORECASE)


def check(ctx: LineContext) -> dict[str, Any] | None:
    """Match an <img> tag lacking alt=."""
    if _IMG_WITHOUT_ALT.search(ctx.line):
        return {}
    return None


RULE = Rule(
    rule_id=RULE_ID,
    severity=Severity.CRITICAL,
    type="Missing Alt Text",
    matcher=check,
    description_template="Image element is missing alt attribute for screen readers",
    suggestion_template=(
        "Add an alt attribute describing the image content. "
        'Example: <img src="..." alt="Description of image" />'
    ),
)
