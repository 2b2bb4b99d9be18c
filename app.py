from __future__ import annotations
import logging
from typing import List
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from config import CORS_ORIGINS, setup_logging
from candidates import load_candidates
from schemas import Candidate, ErrorOut, FilterCriteria, ProcessJobResponse
from matching.matcher import process_job

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the read-only candidate pool once per process."""
    app.state.candidates = load_candidates()
    logger.info(f"Candidate pool ready: {len(app.state.candidates)} candidates")
    yield
    logger.info("Application shutting down.")


app = FastAPI(title="JD Candidate Ranker", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=ErrorOut(error=str(exc.detail)).model_dump())


def _candidate_pool(request: Request):
    pool = getattr(request.app.state, "candidates", None)
    return pool if pool is not None else load_candidates()


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@app.post(
    "/api/process-job",
    response_model=ProcessJobResponse,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def process_job_route(request: Request):
    """Parse a job description and rank the candidate pool against it."""
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Job description is required")

    job_description = body.get("jobDescription")
    if not job_description or not isinstance(job_description, str):
        raise HTTPException(status_code=400, detail="Job description is required")

    try:
        filters = FilterCriteria.model_validate(body.get("filters") or {})
    except ValidationError as e:
        logger.warning(f"Rejected filters: {e}")
        raise HTTPException(status_code=400, detail="Invalid filters")

    try:
        return process_job(job_description, filters, _candidate_pool(request))
    except Exception:
        logger.exception("Error processing job")
        raise HTTPException(status_code=500, detail="Failed to process job description")


@app.get("/candidates", response_model=List[Candidate])
def list_candidates(request: Request):
    """Return the candidate pool."""
    return list(_candidate_pool(request))


@app.get("/health", response_model=dict)
def health(request: Request):
    return {"status": "ok", "candidates": len(_candidate_pool(request))}
