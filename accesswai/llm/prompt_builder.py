"""
Prompt Builder — Builds the AI suggestion prompt from scan output.

The model never receives raw source files. It receives severity counts,
the distinct issue types, and a handful of sample issues.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from accesswai.core.scorer import summarize
from accesswai.models.scan_models import Issue

MAX_SAMPLE_ISSUES = 6

INSTRUCTIONS = """\
Return:
1. Overall accessibility health (2–3 sentences)
2. Top 3 blockers and why they matter
3. Quick fixes developers can apply today
4. Long-term accessibility strategy
5. WCAG principles impacted (Perceivable, Operable, Understandable, Robust)

Tone: clear, friendly, professional.
"""


def distinct_issue_types(issues: Sequence[Issue]) -> list[str]:
    """Issue types in first-seen order, without repeats."""
    return list(dict.fromkeys(issue.type for issue in issues))


def build_prompt(issues: Sequence[Issue]) -> str:
    """
    Build the prompt for the text-generation service.

    Args:
        issues: Ordered issues from the scanner.

    Returns:
        Complete prompt string.
    """
    summary = summarize(issues)
    samples = [issue.model_dump(mode="json") for issue in issues[:MAX_SAMPLE_ISSUES]]

    return f"""
You are a WCAG 2.1 AA accessibility expert.

Analyze the detected issues and provide actionable guidance.

Summary:
- Total Issues: {summary.total}
- Critical: {summary.critical}
- High: {summary.high}
- Medium: {summary.medium}
- Low: {summary.low}

Issue Types:
{", ".join(distinct_issue_types(issues))}

Sample Issues:
{json.dumps(samples, indent=2, ensure_ascii=False)}

{INSTRUCTIONS}"""
