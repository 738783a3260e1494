"""
Missing Form Label Rule — Detects inputs with no label nearby.

An <input> without aria-label/aria-labelledby is accepted when a <label>
appears within LABEL_WINDOW lines either side of it. Hidden, submit and
button inputs are never flagged.
"""

from __future__ import annotations

import re
from typing import Any

from accesswai.models.rule_models import LineContext, Rule, Severity


RULE_ID = "missing_form_label"

LABEL_WINDOW = 2

_UNLABELLED_INPUT = re.compile(r"<input(?![^>]*(aria-label|aria-labelledby))", re.IGNORECASE)
_EXEMPT_INPUT = re.compile(r"""<input[^>]*type=["']?(hidden|submit|button)""", re.IGNORECASE)
_LABEL = re.compile(r"<label", re.IGNORECASE)


def check(ctx: LineContext) -> dict[str, Any] | None:
    """Match an unlabelled input with no <label> in the context window."""
    if not _UNLABELLED_INPUT.search(ctx.line) or _EXEMPT_INPUT.search(ctx.line):
        return None
    if any(_LABEL.search(nearby) for nearby in ctx.window):
        return None
    return {}


RULE = Rule(
    rule_id=RULE_ID,
    severity=Severity.HIGH,
    type="Missing Form Label",
    matcher=check,
    context_window=LABEL_WINDOW,
    description_template="Input field lacks an associated label",
    suggestion_template=(
        "Add a <label> element or aria-label attribute. "
        'Example: <label for="name">Name:</label><input id="name" />'
    ),
)
