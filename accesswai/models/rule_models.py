"""
Rule Catalog Data Models — Severity, rule metadata and the line context
handed to each matcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Score deduction per issue
SEVERITY_WEIGHTS: dict[Severity, float] = {
    Severity.CRITICAL: 10,
    Severity.HIGH: 5,
    Severity.MEDIUM: 2,
    Severity.LOW: 0.5,
}


@dataclass(frozen=True)
class LineContext:
    """A candidate line plus the neighbouring lines a rule asked for."""

    line: str
    index: int  # 0-based
    window: tuple[str, ...]

    @property
    def line_number(self) -> int:
        return self.index + 1


# A matcher returns None when the rule does not fire, otherwise the
# fields used to fill the rule's description/suggestion templates.
RuleMatcher = Callable[[LineContext], "dict[str, Any] | None"]


@dataclass(frozen=True)
class Rule:
    """A single line-oriented accessibility heuristic."""

    rule_id: str
    severity: Severity
    type: str
    matcher: RuleMatcher
    description_template: str
    suggestion_template: str
    context_window: int = 0

    def window_for(self, lines: list[str], index: int) -> tuple[str, ...]:
        """Lines within ±context_window of index, clipped to the file."""
        if not self.context_window:
            return (lines[index],)
        start = max(0, index - self.context_window)
        return tuple(lines[start : index + self.context_window + 1])

    def render(self, fields: dict[str, Any]) -> tuple[str, str]:
        """Fill the description and suggestion templates."""
        return (
            self.description_template.format_map(fields),
            self.suggestion_template.format_map(fields),
        )
