"""
AccessWAI FastAPI Application.

Accessibility analysis service for web projects:
  POST /analyze          → scan JSON-supplied files, score, suggest
  POST /analysis/upload  → same, from a ZIP upload
  GET  /rules            → rule catalog
  GET  /health           → {"status": "ok"}
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from accesswai.api.routes.analysis import router as analysis_router
from accesswai.api.routes.health import VERSION, router as health_router
from accesswai.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("accesswai")

app = FastAPI(
    title="AccessWAI",
    description="Pattern-based accessibility analysis for web source files",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(analysis_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Validation Error on {request.url.path} | Errors: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"message": "Invalid request", "detail": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors without the raw input (may hold whole files)."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    logger.info(f"Starting AccessWAI on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
