"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter

from accesswai.config import settings

router = APIRouter()

VERSION = "1.0.0"


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": VERSION,
        "llm_configured": settings.llm_configured,
    }
