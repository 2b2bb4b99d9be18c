import json
import logging
from pathlib import Path
from typing import Optional, Tuple

from pydantic import ValidationError

from config import CANDIDATES_PATH
from schemas import Candidate

logger = logging.getLogger(__name__)


class CandidateSourceError(Exception):
    """Raised when a candidate file cannot be read or validated."""


# Salary expectations are in rupees (9600000 = 96 LPA)
MOCK_CANDIDATES: Tuple[Candidate, ...] = (
    Candidate(
        id="1",
        name="Sarah Johnson",
        skills=["React", "TypeScript", "Next.js", "Node.js", "GraphQL", "PostgreSQL"],
        experience=5,
        location="San Francisco",
        salary_expectation=9600000,
        resume_text=(
            "Senior Frontend Developer with 5 years of experience building scalable web applications "
            "using React, TypeScript, and Next.js. Strong background in Node.js backend development "
            "and GraphQL APIs."
        ),
    ),
    Candidate(
        id="2",
        name="Michael Chen",
        skills=["Python", "Django", "FastAPI", "PostgreSQL", "Docker", "AWS"],
        experience=7,
        location="New York",
        salary_expectation=12000000,
        resume_text=(
            "Backend engineer with 7 years of experience in Python development. Expert in Django and "
            "FastAPI frameworks, with extensive experience in cloud infrastructure and microservices "
            "architecture."
        ),
    ),
    Candidate(
        id="3",
        name="Emily Rodriguez",
        skills=["React", "JavaScript", "HTML", "CSS", "Figma", "Tailwind CSS"],
        experience=3,
        location="Austin",
        salary_expectation=6800000,
        resume_text=(
            "Frontend developer with 3 years of experience creating responsive and accessible web "
            "interfaces. Proficient in React and modern CSS frameworks, with a strong eye for design."
        ),
    ),
    Candidate(
        id="4",
        name="David Kumar",
        skills=["Node.js", "Express", "MongoDB", "React", "TypeScript", "Docker", "Kubernetes"],
        experience=6,
        location="Seattle",
        salary_expectation=10800000,
        resume_text=(
            "Full-stack engineer with 6 years of experience. Specialized in Node.js backend development "
            "and React frontend. Strong DevOps skills with Docker and Kubernetes orchestration."
        ),
    ),
    Candidate(
        id="5",
        name="Jessica Taylor",
        skills=["Java", "Spring Boot", "MySQL", "Microservices", "Kafka", "Redis"],
        experience=8,
        location="Boston",
        salary_expectation=12800000,
        resume_text=(
            "Senior Backend Developer with 8 years of Java experience. Expert in Spring Boot and "
            "microservices architecture. Proven track record of building high-performance, scalable "
            "systems."
        ),
    ),
)


def load_candidates(path: Optional[str] = None) -> Tuple[Candidate, ...]:
    """
    Load the candidate pool.

    Args:
        path: JSON file holding an array of candidate objects. Falls back to
            CANDIDATES_PATH, then to the built-in fixture.

    Returns:
        Tuple of immutable Candidate records
    """
    path = path or CANDIDATES_PATH
    if not path:
        return MOCK_CANDIDATES

    file_path = Path(path)
    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CandidateSourceError(f"Cannot read candidates from {file_path}: {e}") from e

    if not isinstance(data, list):
        raise CandidateSourceError(f"{file_path} must contain a JSON array of candidates")

    try:
        pool = tuple(Candidate.model_validate(item) for item in data)
    except ValidationError as e:
        raise CandidateSourceError(f"Invalid candidate record in {file_path}: {e}") from e

    logger.info(f"Loaded {len(pool)} candidates from {file_path}")
    return pool
