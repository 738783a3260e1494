"""
Button Without Text Rule — Detects buttons with no accessible name.

Fires on an empty <button></button> body or a body that starts with an
icon element (<i ...>).
"""

from __future__ import annotations

import re
from typing import Any

from accesswai.models.rule_models import LineContext, Rule, Severity


RULE_ID = "button_without_text"

_EMPTY_BUTTON = re.compile(r"<button[^>]*>\s*</button>", re.IGNORECASE)
_ICON_BUTTON = re.compile(r"<button[^>]*><i ", re.IGNORECASE)


def check(ctx: LineContext) -> dict[str, Any] | None:
    if _EMPTY_BUTTON.search(ctx.line) or _ICON_BUTTON.search(ctx.line):
        return {}
    return None


RULE = Rule(
    rule_id=RULE_ID,
    severity=Severity.HIGH,
    type="Button Without Text",
    matcher=check,
    description_template="Button has no accessible text content for screen readers",
    suggestion_template=(
        "Add visible text or aria-label to the button. "
        'Example: <button aria-label="Submit form">Submit</button>'
    ),
)
