from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Union

# Money amounts stay integers on the wire when given as integers
Number = Union[int, float]


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Candidate record from the read-only pool
class Candidate(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    name: str
    skills: List[str] = []
    experience: int = Field(0, ge=0)
    location: str = ""
    salary_expectation: Number = Field(0, ge=0)
    resume_text: str = ""


# Structured requirements pulled out of a job description
class ParsedRequirements(CamelModel):
    raw_text: str
    extracted_skills: List[str] = []
    min_experience: int = 0
    location: str = ""
    max_salary: Number = 0  # 0 means unbounded


# Caller-supplied hard filters
class FilterCriteria(CamelModel):
    min_experience: Number = 0
    location: str = ""
    max_salary: Number = 0


class MatchDetails(CamelModel):
    matched_skills: List[str] = []
    missing_skills: List[str] = []


# Candidate plus its match score
class ScoredCandidate(Candidate):
    score: int = Field(..., ge=0, le=100)
    match_details: MatchDetails

    @classmethod
    def from_candidate(cls, candidate: Candidate, score: int, details: MatchDetails) -> "ScoredCandidate":
        return cls(**candidate.model_dump(), score=score, match_details=details)


class ProcessJobResponse(CamelModel):
    parsed_jd: ParsedRequirements = Field(..., alias="parsedJD")
    ranked_candidates: List[ScoredCandidate] = []


class ErrorOut(BaseModel):
    error: str
