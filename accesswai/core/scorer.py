"""
Aggregator / Scorer — Severity summary and 0-100 accessibility score.

score = clamp(round(100 − Σ weight × count), 0, 100)

with weights critical=10, high=5, medium=2, low=0.5. Ties round half
away from zero (99.5 → 100).
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from accesswai.models.rule_models import SEVERITY_WEIGHTS, Severity
from accesswai.models.scan_models import Issue, Summary
from accesswai.models.score_models import ScoreBreakdown, SeverityDeduction

MAX_SCORE = 100
MIN_SCORE = 0


def summarize(issues: Iterable[Issue]) -> Summary:
    """Count issues per severity."""
    counts = {severity.value: 0 for severity in Severity}
    for issue in issues:
        counts[issue.severity.value] += 1
    return Summary(**counts)


def compute_score_breakdown(summary: Summary) -> ScoreBreakdown:
    """Compute the score together with the per-severity deductions."""
    deductions: list[SeverityDeduction] = []
    total = Decimal(0)

    for severity in Severity:
        count = summary.count(severity)
        weight = Decimal(str(SEVERITY_WEIGHTS[severity]))
        deduction = weight * count
        total += deduction
        deductions.append(
            SeverityDeduction(
                severity=severity.value,
                count=count,
                weight=float(weight),
                deduction=float(deduction),
            )
        )

    raw = Decimal(MAX_SCORE) - total
    rounded = int(raw.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    score = min(MAX_SCORE, max(MIN_SCORE, rounded))

    return ScoreBreakdown(score=score, raw_score=float(raw), deductions=deductions)


def calculate_score(summary: Summary) -> int:
    """Accessibility score in [0, 100] for a severity summary."""
    return compute_score_breakdown(summary).score
