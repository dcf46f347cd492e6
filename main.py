"""
FastAPI application and endpoints
"""
import os
import time
import asyncio
import logging
from typing import AsyncIterator, Optional

import httpx
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config import Settings, get_settings
from errors import MissingParameter, SolutionServiceError
from fetcher import fetch_solution
from identity_pool import load_identity_pool
from renderer import get_renderer
from ui import router as ui_router

load_dotenv()

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Solution Viewer API")

# Single-page front-end
app.include_router(ui_router)


class LookupResponse(BaseModel):
    """Highlighted solution markup"""
    markup: str


class ErrorResponse(BaseModel):
    error: str


async def get_upstream_client(settings: Settings = Depends(get_settings)) -> AsyncIterator[httpx.AsyncClient]:
    """Per-request HTTP client for upstream lookups"""
    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.upstream_timeout), follow_redirects=True) as client:
        yield client


@app.exception_handler(SolutionServiceError)
async def solution_service_exception_handler(request: Request, exc: SolutionServiceError):
    """Map service errors to {"error": message} responses"""
    logger.error(f"[API_ERROR] {request.url.path} -> {exc.status_code} {type(exc).__name__}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"[API_ERROR] Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


@app.get(
    "/lookup",
    response_model=LookupResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def lookup(
    questionId: Optional[str] = Query(None),
    quesId: Optional[str] = Query(None, include_in_schema=False),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_upstream_client),
):
    """
    Look up and highlight a solution

    Receives:
    - questionId: Upstream question identifier (quesId also accepted)

    Returns:
    - markup: Highlighted HTML for the solution code
    """
    question_id = questionId if questionId is not None else quesId
    logger.info(f"[API_RECEIVED] GET /lookup questionId={question_id!r}")

    if question_id is None or not question_id.strip():
        raise MissingParameter()

    started = time.time()
    renderer = get_renderer(settings)
    pool = await asyncio.to_thread(load_identity_pool, settings.identity_file)
    solution = await fetch_solution(
        question_id,
        pool,
        client,
        settings.upstream_base_url,
        max_attempts=settings.max_retries,
    )
    markup = renderer.render(solution)
    duration = time.time() - started

    logger.info(f"[API_RESPONSE] Question {question_id.strip()} served in {duration:.2f}s ({len(markup)} chars of markup)")
    return LookupResponse(markup=markup)


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {"status": "ok", "service": "Solution Viewer API"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
