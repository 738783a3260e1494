"""
Scanner — Applies the rule catalog to source files line by line.

Output order is deterministic: file order as supplied, then ascending
line number, then catalog order. A file that cannot be decoded or
scanned contributes no issues and does not stop the run.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence

from accesswai.core.rule_catalog import RULE_CATALOG
from accesswai.errors import ScanEntryError
from accesswai.models.rule_models import LineContext, Rule
from accesswai.models.scan_models import Issue, ScanResult, SourceFile

logger = logging.getLogger("accesswai.scanner")


class Scanner:
    """
    Line-oriented accessibility scanner.

    Holds no state between runs; one instance may serve many requests.
    """

    def __init__(self, rules: Sequence[Rule] | None = None) -> None:
        self.rules: tuple[Rule, ...] = tuple(rules) if rules is not None else RULE_CATALOG

    def run(self, files: Iterable[SourceFile]) -> ScanResult:
        """
        Scan every file and collect issues plus run statistics.

        Args:
            files: Source files in the order their issues should appear.

        Returns:
            ScanResult with the ordered issue list.
        """
        start = time.monotonic()
        issues: list[Issue] = []
        skipped: list[str] = []
        scanned = 0

        for source in files:
            try:
                file_issues = self.scan_file(source)
            except ScanEntryError as e:
                logger.warning(f"Skipping {e.file_name}: {e.reason}")
                skipped.append(e.file_name)
                continue
            issues.extend(file_issues)
            scanned += 1

        elapsed = (time.monotonic() - start) * 1000

        return ScanResult(
            issues=issues,
            rules_executed=[rule.rule_id for rule in self.rules],
            files_scanned=scanned,
            files_skipped=skipped,
            scan_duration_ms=round(elapsed, 2),
        )

    def scan(self, files: Iterable[SourceFile]) -> list[Issue]:
        """Scan files and return only the ordered issue list."""
        return self.run(files).issues

    def scan_file(self, source: SourceFile) -> list[Issue]:
        """
        Scan a single file.

        Raises:
            ScanEntryError: the content could not be decoded or a rule
                failed on it. No issues from this file are kept.
        """
        lines = _read_lines(source)
        issues: list[Issue] = []

        try:
            for index, line in enumerate(lines):
                for rule in self.rules:
                    ctx = LineContext(line=line, index=index, window=rule.window_for(lines, index))
                    fields = rule.matcher(ctx)
                    if fields is None:
                        continue
                    description, suggestion = rule.render(fields)
                    issues.append(
                        Issue(
                            severity=rule.severity,
                            type=rule.type,
                            file=source.name,
                            line=ctx.line_number,
                            description=description,
                            suggestion=suggestion,
                            code=line.strip(),
                        )
                    )
        except Exception as e:
            # One broken file must not abort the whole run
            raise ScanEntryError(source.name, f"{type(e).__name__}: {e}") from e

        return issues


def _read_lines(source: SourceFile) -> list[str]:
    content = source.content
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ScanEntryError(source.name, f"not valid UTF-8 ({e.reason})") from e
    else:
        try:
            content.encode("utf-8")
        except UnicodeEncodeError as e:
            # lone surrogates from JSON escapes cannot be serialized back out
            raise ScanEntryError(source.name, f"not encodable as UTF-8 ({e.reason})") from e
    return content.split("\n")
