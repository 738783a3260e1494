"""
Score Data Models — explainable breakdown of the accessibility score.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SeverityDeduction(BaseModel):
    """Points removed from 100 for one severity level."""

    severity: str
    count: int
    weight: float
    deduction: float


class ScoreBreakdown(BaseModel):
    """Full breakdown of the accessibility score."""

    score: int = Field(..., ge=0, le=100, description="Final score 0-100")
    raw_score: float = Field(..., description="100 minus deductions, before rounding/clamping")
    deductions: list[SeverityDeduction] = Field(default_factory=list)
    formula: str = Field(
        default="score = clamp(round(100 − (10·critical + 5·high + 2·medium + 0.5·low)), 0, 100)",
        description="Human-readable formula used",
    )
