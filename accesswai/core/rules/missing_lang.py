"""
Missing Language Attribute Rule — Detects <html> without lang (WCAG 3.1.1).
"""

from __future__ import annotations

import re
from typing import Any

from accesswai.models.rule_models import LineContext, Rule, Severity


RULE_ID = "missing_lang"

_HTML_WITHOUT_LANG = re.compile(r"<html(?![^>]*lang=)", re.IGNORECASE)


def check(ctx: LineContext) -> dict[str, Any] | None:
    if _HTML_WITHOUT_LANG.search(ctx.line):
        return {}
    return None


RULE = Rule(
    rule_id=RULE_ID,
    severity=Severity.HIGH,
    type="Missing Language Attribute",
    matcher=check,
    description_template="HTML element missing lang attribute",
    suggestion_template='Add lang attribute to help screen readers. Example: <html lang="en">',
)
