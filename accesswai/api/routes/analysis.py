"""
AccessWAI — analysis endpoints.

POST /analyze          → analyze files sent as JSON
POST /analysis/upload  → analyze a ZIP project upload
GET  /rules            → list the rule catalog
GET  /rules/{rule_id}  → one rule's metadata and message templates
POST /score            → explain the score for a severity summary
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from accesswai.api.dependencies import get_scanner, get_text_generator
from accesswai.core.rule_catalog import describe_rule, list_rules
from accesswai.core.scorer import compute_score_breakdown
from accesswai.engine.extractor import ZIP_CONTENT_TYPES, extract_source_files
from accesswai.engine.pipeline import analyze_project
from accesswai.errors import InputError, UnknownRuleError
from accesswai.models.scan_models import (
    AnalysisResult,
    AnalyzeRequest,
    RuleDetail,
    RuleInfo,
    Summary,
)
from accesswai.models.score_models import ScoreBreakdown

logger = logging.getLogger("accesswai.api")
router = APIRouter()


def _input_error(e: InputError) -> JSONResponse:
    logger.info(f"Rejected analysis input: {e}")
    return JSONResponse(status_code=400, content={"message": str(e)})


@router.get("/rules", response_model=list[RuleInfo])
async def rules():
    """List the registered accessibility rules in evaluation order."""
    return list_rules()


@router.get("/rules/{rule_id}", response_model=RuleDetail)
async def rule_detail(rule_id: str):
    """Metadata and message templates for a single rule."""
    try:
        return describe_rule(rule_id)
    except UnknownRuleError:
        return JSONResponse(status_code=404, content={"message": f"Unknown rule: {rule_id}"})


@router.post("/score", response_model=ScoreBreakdown)
async def score(summary: Summary):
    """Score a severity summary and show each severity's deduction."""
    return compute_score_breakdown(summary)


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(
    req: AnalyzeRequest,
    scanner=Depends(get_scanner),
    text_generator=Depends(get_text_generator),
):
    """Analyze source files supplied directly in the request body."""
    try:
        return await analyze_project(
            req.files,
            text_generator,
            project_name=req.projectName,
            scanner=scanner,
        )
    except InputError as e:
        return _input_error(e)
    except Exception:
        logger.exception("Unexpected analysis error")
        return JSONResponse(status_code=500, content={"message": "Error analyzing project"})


@router.post("/analysis/upload", response_model=AnalysisResult)
async def upload(
    project: UploadFile | None = File(default=None),
    projectName: str | None = Form(default=None),  # noqa: N803 — form field name
    scanner=Depends(get_scanner),
    text_generator=Depends(get_text_generator),
):
    """Extract a ZIP project and analyze its web source files."""
    if project is None:
        return JSONResponse(status_code=400, content={"message": "Please upload a project file"})
    if project.content_type not in ZIP_CONTENT_TYPES:
        return JSONResponse(status_code=400, content={"message": "Only ZIP files are allowed"})

    try:
        archive = await project.read()
        files = extract_source_files(archive)
        if not files:
            raise InputError(
                "No HTML/JSX/JS/TS/TSX files found in the ZIP. Please upload a web project."
            )
        return await analyze_project(
            files,
            text_generator,
            project_name=projectName,
            scanner=scanner,
        )
    except InputError as e:
        return _input_error(e)
    except Exception:
        logger.exception("Unexpected analysis error")
        return JSONResponse(status_code=500, content={"message": "Error analyzing project"})
    finally:
        await project.close()
