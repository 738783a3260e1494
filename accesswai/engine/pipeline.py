"""
Analysis Pipeline — Request-scoped orchestration of one analysis run.

Pipeline:
1. Validate input (supported files only, non-empty)
2. Scan files against the rule catalog
3. Summarize issues and compute the accessibility score
4. Generate suggestions (AI-backed or deterministic)
5. Assemble the AnalysisResult

Runs where no supported file could be read are rejected rather than
reported as issue-free.

Either a complete AnalysisResult is returned or InputError is raised.
Nothing is persisted here.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Sequence

from accesswai.config import settings
from accesswai.core.scanner import Scanner
from accesswai.core.scorer import calculate_score, summarize
from accesswai.engine.extractor import is_supported_file
from accesswai.errors import InputError
from accesswai.llm.gateway import TextGenerator
from accesswai.llm.suggestions import generate_suggestions
from accesswai.models.scan_models import AnalysisResult, SourceFile

logger = logging.getLogger("accesswai.pipeline")

DEFAULT_PROJECT_NAME = "Untitled Project"


def select_supported_files(files: Sequence[SourceFile]) -> list[SourceFile]:
    """
    Keep only supported web-source files, preserving order.

    Raises:
        InputError: no files were supplied, or none are supported.
    """
    if not files:
        raise InputError("Please upload a project file")

    supported = [f for f in files if is_supported_file(f.name)]
    if not supported:
        raise InputError(
            "No HTML/JSX/JS/TS/TSX files found. Please upload a web project."
        )
    return supported


async def analyze_project(
    files: Sequence[SourceFile],
    text_generator: TextGenerator | None = None,
    *,
    project_name: str | None = None,
    llm_timeout: float | None = None,
    scanner: Scanner | None = None,
) -> AnalysisResult:
    """
    Run the full analysis for one project.

    Args:
        files: Source files in the order issues should be reported.
        text_generator: AI capability; None selects the deterministic narrative.
        project_name: Display name; defaults to "Untitled Project".
        llm_timeout: Bound for the AI call; defaults to settings.llm_timeout.
        scanner: Scanner to use; defaults to one over the full catalog.

    Returns:
        Complete AnalysisResult.

    Raises:
        InputError: empty input, no supported files, or none readable.
    """
    run_id = str(uuid.uuid4())[:8]
    start_time = time.monotonic()

    supported = select_supported_files(files)
    logger.info(f"[{run_id}] Analyzing {len(supported)} of {len(files)} files")

    scan_result = (scanner or Scanner()).run(supported)
    if scan_result.files_skipped:
        logger.warning(
            f"[{run_id}] Skipped {len(scan_result.files_skipped)} unreadable files"
        )
    if scan_result.files_scanned == 0:
        raise InputError(
            "No readable HTML/JSX/JS/TS/TSX files found. Files must be UTF-8 text."
        )

    summary = summarize(scan_result.issues)
    score = calculate_score(summary)
    logger.info(
        f"[{run_id}] {summary.total} issues "
        f"(critical={summary.critical}, high={summary.high}, "
        f"medium={summary.medium}, low={summary.low}), score={score}"
    )

    timeout = llm_timeout if llm_timeout is not None else settings.llm_timeout
    suggestions = await generate_suggestions(scan_result.issues, text_generator, timeout)

    elapsed_ms = (time.monotonic() - start_time) * 1000
    logger.info(
        f"[{run_id}] Analysis complete in {elapsed_ms:.0f}ms — "
        f"suggestions={suggestions.strategy.value}"
    )

    return AnalysisResult(
        projectName=project_name or DEFAULT_PROJECT_NAME,
        filesAnalyzed=scan_result.files_scanned,
        issues=scan_result.issues,
        summary=summary,
        accessibilityScore=score,
        aiSuggestions=suggestions.text,
        suggestionStrategy=suggestions.strategy,
    )
