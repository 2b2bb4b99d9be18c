"""
Job description → ranked candidates pipeline.

Usage:
    from matching.matcher import process_job

    result = process_job("React developer, 3+ years. Location: Remote")
    for c in result.ranked_candidates:
        print(c.name, c.score)
"""
import logging
from typing import Iterable, Optional

from candidates import load_candidates
from parsers.jd_extract import parse_job_description
from schemas import Candidate, FilterCriteria, ProcessJobResponse
from .scorer import score_candidates

logger = logging.getLogger(__name__)


def process_job(
    job_description: str,
    filters: Optional[FilterCriteria] = None,
    candidates: Optional[Iterable[Candidate]] = None,
) -> ProcessJobResponse:
    """Parse the job description, then rank the candidate pool against it."""
    if filters is None:
        filters = FilterCriteria()
    if candidates is None:
        candidates = load_candidates()

    parsed = parse_job_description(job_description)
    logger.info(
        f"JD parsed: {len(parsed.extracted_skills)} skills, "
        f"min {parsed.min_experience} years, location {parsed.location!r}"
    )
    ranked = score_candidates(candidates, parsed, filters)
    return ProcessJobResponse(parsed_jd=parsed, ranked_candidates=ranked)
