"""
Missing ARIA Landmark Rule — Detects layout divs that should be landmarks.

A <div className="..."> naming header/nav/main/footer without any role=
attribute is reported.
"""

from __future__ import annotations

import re
from typing import Any

from accesswai.models.rule_models import LineContext, Rule, Severity


RULE_ID = "missing_landmark"

LANDMARK_NAMES = ("header", "nav", "main", "footer")

_LANDMARK_DIV = re.compile(
    r"""<div[^>]*className=["'][^"']*(""" + "|".join(LANDMARK_NAMES) + ")",
    re.IGNORECASE,
)
_ANY_ROLE = re.compile(r"<div[^>]*role=", re.IGNORECASE)


def check(ctx: LineContext) -> dict[str, Any] | None:
    match = _LANDMARK_DIV.search(ctx.line)
    if match is None or _ANY_ROLE.search(ctx.line):
        return None
    return {"landmark": match.group(1).lower()}


RULE = Rule(
    rule_id=RULE_ID,
    severity=Severity.LOW,
    type="Missing ARIA Landmark",
    matcher=check,
    description_template="Semantic section could benefit from ARIA landmark role",
    suggestion_template=(
        "Consider using semantic HTML5 elements (<header>, <nav>, <main>, <footer>) "
        "or add appropriate ARIA roles."
    ),
)
