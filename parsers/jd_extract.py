import logging
from typing import List, Optional

from schemas import ParsedRequirements
from .jd_patterns import (
    TECH_KEYWORDS, EXPERIENCE_PATTERNS, LOCATION_PATTERNS, SALARY_PATTERNS,
    GROUPED, THOUSANDS,
)

logger = logging.getLogger(__name__)


def extract_skills(text: str, catalog: List[str] = TECH_KEYWORDS) -> List[str]:
    """Return catalog entries found in the text, in catalog order."""
    lower_text = text.lower()
    return [k for k in catalog if k.lower() in lower_text]


def _to_int(digits: str) -> Optional[int]:
    """None when the digit run is too long for int() to convert."""
    try:
        return int(digits)
    except ValueError:
        logger.debug(f"Ignoring {len(digits)}-digit number")
        return None


def extract_min_experience(text: str) -> int:
    for p in EXPERIENCE_PATTERNS:
        m = p.search(text)
        if m:
            years = _to_int(m.group(1))
            if years is not None:
                return years
    return 0


def extract_location(text: str) -> str:
    for p in LOCATION_PATTERNS:
        m = p.search(text)
        if m:
            return m.group(1).strip()
    return ""


def extract_max_salary(text: str) -> int:
    """
    Salary ceiling from the first matching salary pattern.
    0 when nothing matches, which downstream reads as "no ceiling".
    """
    for p, kind in SALARY_PATTERNS:
        m = p.search(text)
        if not m:
            continue
        if kind == GROUPED:
            return int(m.group(1) + m.group(2) + m.group(3))
        if kind == THOUSANDS:
            return int(m.group(1)) * 1000
        amount = _to_int(m.group(1))
        if amount is not None:
            return amount
    return 0


def parse_job_description(text: str) -> ParsedRequirements:
    """
    Turn free-text job description into structured requirements.
    Extracts: skills (catalog keywords), minimum years of experience,
    location and salary ceiling. Every field falls back to its default
    when nothing is found.
    """
    parsed = ParsedRequirements(
        raw_text=text,
        extracted_skills=extract_skills(text),
        min_experience=extract_min_experience(text),
        location=extract_location(text),
        max_salary=extract_max_salary(text),
    )
    logger.debug(
        f"Parsed JD: skills={parsed.extracted_skills} min_exp={parsed.min_experience} "
        f"location={parsed.location!r} max_salary={parsed.max_salary}"
    )
    return parsed
