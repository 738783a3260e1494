"""
Deterministic Fallback — Builds the suggestion narrative without an LLM.

Used when:
- no API key is configured
- the LLM call fails, times out or returns nothing usable

Pure function of the issue list: identical input gives byte-identical
output.
"""

from __future__ import annotations

from collections.abc import Sequence

from accesswai.core.scorer import summarize
from accesswai.llm.prompt_builder import distinct_issue_types
from accesswai.models.rule_models import Severity
from accesswai.models.scan_models import Issue, Summary

MAX_PRIORITY_FIXES = 3

# Issue type -> checklist entry, in output order
QUICK_WINS: dict[str, str] = {
    "Missing Alt Text": (
        "- **Add alt attributes to images**: This is one of the easiest and most "
        "impactful fixes. Every <img> tag should have an alt attribute describing the image."
    ),
    "Missing Form Label": (
        "- **Label your form inputs**: Wrap inputs with <label> tags or add aria-label "
        "attributes. This helps screen reader users understand what each field is for."
    ),
    "Missing Language Attribute": (
        '- **Add lang attribute to HTML**: Simply add lang="en" (or your language code) '
        "to your <html> tag. This helps screen readers pronounce content correctly."
    ),
    "Button Without Text": (
        "- **Add text to buttons**: Ensure all buttons have visible text or aria-label "
        "attributes so users know what the button does."
    ),
}

LONG_TERM_RECOMMENDATIONS = (
    "1. **Regular Testing**: Use tools like WAVE, axe DevTools, or Lighthouse to "
    "continuously check accessibility\n"
    "2. **Keyboard Navigation**: Ensure all interactive elements can be accessed and "
    "used with just a keyboard\n"
    "3. **Color Contrast**: Maintain at least 4.5:1 contrast ratio for normal text, "
    "3:1 for large text\n"
    "4. **Semantic HTML**: Use proper HTML5 elements (<header>, <nav>, <main>, <footer>) "
    "instead of generic divs\n"
    "5. **ARIA Best Practices**: Only use ARIA when semantic HTML isn't sufficient\n"
)

RESOURCES = (
    "- [WebAIM](https://webaim.org/) - Comprehensive accessibility guides\n"
    "- [WCAG 2.1 Guidelines](https://www.w3.org/WAI/WCAG21/quickref/) - Official standards\n"
    "- [MDN Accessibility](https://developer.mozilla.org/en-US/docs/Web/Accessibility)"
    " - Practical tutorials\n"
)


def _plural(count: int) -> str:
    return "s" if count > 1 else ""


def _overall_assessment(summary: Summary) -> str:
    if summary.total == 0:
        return (
            "**Great news!** No accessibility issues were detected in your project. "
            "Keep up the excellent work in maintaining accessible code!"
        )
    if summary.critical > 0:
        return (
            f"**Attention Required:** Your project has {summary.critical} critical "
            f"accessibility issue{_plural(summary.critical)} that need immediate attention. "
            "These issues can prevent users with disabilities from accessing your content."
        )
    if summary.high > 0:
        return (
            f"**Good Progress:** While there are no critical issues, you have {summary.high} "
            f"high-priority item{_plural(summary.high)} that should be addressed soon "
            "to improve accessibility."
        )
    return (
        "**Looking Good:** Your project has only minor accessibility improvements to make. "
        "You're on the right track!"
    )


def priority_issues(issues: Sequence[Issue]) -> list[Issue]:
    """Up to three issues, critical ones first, then high."""
    critical = [i for i in issues if i.severity == Severity.CRITICAL][:MAX_PRIORITY_FIXES]
    high = [i for i in issues if i.severity == Severity.HIGH][:MAX_PRIORITY_FIXES]
    return (critical + high)[:MAX_PRIORITY_FIXES]


def generate_fallback_suggestions(issues: Sequence[Issue]) -> str:
    """Render the deterministic recommendation report for an issue list."""
    summary = summarize(issues)
    issue_types = set(distinct_issue_types(issues))

    parts: list[str] = ["## 📊 Accessibility Analysis Summary\n\n"]
    parts.append(_overall_assessment(summary) + "\n\n")

    parts.append("### 🎯 Top Priority Fixes\n\n")
    top = priority_issues(issues)
    if top:
        for idx, issue in enumerate(top, start=1):
            parts.append(f"**{idx}. {issue.type}** ({issue.severity.value})\n")
            parts.append(f"   - Found in: {issue.file}\n")
            parts.append(f"   - Fix: {issue.suggestion}\n\n")
    else:
        parts.append(
            "No critical or high-priority issues found. "
            "Focus on the medium and low-priority improvements below.\n\n"
        )

    parts.append("### ⚡ Quick Wins (Easy Fixes with Big Impact)\n\n")
    wins = [text for issue_type, text in QUICK_WINS.items() if issue_type in issue_types]
    if wins:
        parts.extend(win + "\n" for win in wins)
    else:
        parts.append("Great job! You've already addressed the most common quick-win items.\n")

    parts.append("\n### 🏗️ Long-term Recommendations\n\n")
    parts.append(LONG_TERM_RECOMMENDATIONS + "\n")

    parts.append("### 📚 Resources\n\n")
    parts.append(RESOURCES + "\n")

    parts.append("*Keep making your web more accessible for everyone! 🌟*")

    return "".join(parts)
