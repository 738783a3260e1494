"""
Tests for the Aggregator / Scorer — summary totals, formula, clamping, ties.
"""

import pytest

from accesswai.core.scanner import Scanner
from accesswai.core.scorer import calculate_score, compute_score_breakdown, summarize
from accesswai.models.rule_models import Severity
from accesswai.models.scan_models import Issue, Summary


def _issue(severity, line=1):
    return Issue(
        severity=severity,
        type="Test",
        file="t.html",
        line=line,
        description="d",
        suggestion="s",
        code="c",
    )


def test_summarize_counts_by_severity():
    issues = [
        _issue(Severity.CRITICAL),
        _issue(Severity.CRITICAL),
        _issue(Severity.HIGH),
        _issue(Severity.LOW),
    ]
    summary = summarize(issues)
    assert summary == Summary(critical=2, high=1, medium=0, low=1)
    assert summary.total == len(issues)


def test_summary_totals_match_real_scan(make_file, inaccessible_html):
    issues = Scanner().scan([make_file(inaccessible_html)])
    summary = summarize(issues)
    assert summary.critical + summary.high + summary.medium + summary.low == len(issues)
    assert summary == Summary(critical=1, high=4, medium=2, low=1)


def test_empty_issue_list_scores_100():
    summary = summarize([])
    assert summary == Summary()
    assert calculate_score(summary) == 100


def test_critical_and_high_deductions():
    assert calculate_score(Summary(critical=3, high=2)) == 60


@pytest.mark.parametrize(
    "summary, expected",
    [
        (Summary(critical=1), 90),
        (Summary(high=1), 95),
        (Summary(medium=1), 98),
        (Summary(low=2), 99),
        (Summary(critical=1, high=4, medium=2, low=1), 66),
    ],
)
def test_formula(summary, expected):
    assert calculate_score(summary) == expected


@pytest.mark.parametrize(
    "low, expected",
    [
        (1, 100),  # 99.5
        (3, 99),  # 98.5
        (5, 98),  # 97.5
        (7, 97),  # 96.5
    ],
)
def test_half_point_ties_round_away_from_zero(low, expected):
    assert calculate_score(Summary(low=low)) == expected


def test_score_clamps_at_zero():
    assert calculate_score(Summary(critical=11)) == 0
    assert calculate_score(Summary(critical=50, high=50, medium=50, low=50)) == 0


def test_score_at_exact_zero():
    assert calculate_score(Summary(critical=10)) == 0
    assert calculate_score(Summary(critical=9, high=1, low=9)) == 1  # 0.5 rounds up


def test_breakdown_lists_deductions():
    breakdown = compute_score_breakdown(Summary(critical=1, low=3))
    assert breakdown.score == 89
    assert breakdown.raw_score == 88.5
    by_severity = {d.severity: d.deduction for d in breakdown.deductions}
    assert by_severity == {"critical": 10.0, "high": 0.0, "medium": 0.0, "low": 1.5}
    assert "0.5·low" in breakdown.formula
