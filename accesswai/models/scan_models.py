"""
Scan Data Models — source files, issues, summaries and the analysis result.

AnalysisResult keeps the camelCase field names of the public API.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from accesswai.models.llm_models import SuggestionStrategy
from accesswai.models.rule_models import Severity


class SourceFile(BaseModel):
    """A single file supplied for analysis."""

    name: str = Field(..., description="File name or archive entry path")
    content: str | bytes = Field(
        ..., description="File source; bytes are decoded as UTF-8 when scanned"
    )


class Issue(BaseModel):
    """One rule match on one line of one file."""

    severity: Severity
    type: str
    file: str
    line: int = Field(..., ge=1)
    description: str
    suggestion: str
    code: str = Field(..., description="The matched line, trimmed")

    model_config = {"frozen": True}


class Summary(BaseModel):
    """Issue counts per severity."""

    critical: int = Field(default=0, ge=0)
    high: int = Field(default=0, ge=0)
    medium: int = Field(default=0, ge=0)
    low: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.critical + self.high + self.medium + self.low

    def count(self, severity: Severity) -> int:
        return getattr(self, severity.value)


class ScanResult(BaseModel):
    """Result of running the catalog over a set of files."""

    issues: list[Issue] = Field(default_factory=list)
    rules_executed: list[str] = Field(default_factory=list)
    files_scanned: int = 0
    files_skipped: list[str] = Field(default_factory=list)
    scan_duration_ms: float = 0.0


class AnalysisResult(BaseModel):
    """Complete outcome of one analysis run, handed to the caller unmodified."""

    projectName: str = "Untitled Project"  # noqa: N815 — wire format
    filesAnalyzed: int = Field(..., ge=0)  # noqa: N815
    issues: list[Issue] = Field(default_factory=list)
    summary: Summary
    accessibilityScore: int = Field(..., ge=0, le=100)  # noqa: N815
    aiSuggestions: str = Field(..., min_length=1)  # noqa: N815
    suggestionStrategy: SuggestionStrategy  # noqa: N815


class AnalyzeRequest(BaseModel):
    """Request body for POST /analyze."""

    projectName: str | None = None  # noqa: N815
    files: list[SourceFile] = Field(default_factory=list)


class RuleInfo(BaseModel):
    """Public metadata for a catalog rule."""

    id: str
    type: str
    severity: Severity
    context_window: int = 0


class RuleDetail(RuleInfo):
    """Catalog rule metadata plus its message templates."""

    description_template: str
    suggestion_template: str
