"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path

import pytest

import candidates as candidates_module
from schemas import Candidate, FilterCriteria, ParsedRequirements


SAMPLE_JD = (
    "Looking for a React Developer with 3+ years experience in TypeScript and Next.js. "
    "Location: Remote"
)


@pytest.fixture(autouse=True)
def fixture_candidate_pool(monkeypatch):
    """Keep tests on the built-in pool whatever CANDIDATES_PATH says."""
    monkeypatch.setattr(candidates_module, "CANDIDATES_PATH", None)


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD


@pytest.fixture
def pool():
    return candidates_module.MOCK_CANDIDATES


@pytest.fixture
def no_filters() -> FilterCriteria:
    return FilterCriteria()


@pytest.fixture
def react_jd() -> ParsedRequirements:
    """Requirements equivalent to parsing SAMPLE_JD."""
    return ParsedRequirements(
        raw_text=SAMPLE_JD,
        extracted_skills=["React", "TypeScript", "Next.js"],
        min_experience=3,
        location="Remote",
    )


@pytest.fixture
def make_candidate():
    """Factory for one-off candidates."""
    def _make(**overrides) -> Candidate:
        data = {
            "id": "x",
            "name": "Test Candidate",
            "skills": [],
            "experience": 0,
            "location": "Nowhere",
            "salary_expectation": 0,
            "resume_text": "",
        }
        data.update(overrides)
        return Candidate(**data)
    return _make


@pytest.fixture
def candidates_file(tmp_path) -> Path:
    """A two-candidate JSON pool using the wire (camelCase) field names."""
    path = tmp_path / "candidates.json"
    path.write_text(json.dumps([
        {
            "id": "a1",
            "name": "Ana Lima",
            "skills": ["Python", "Kafka"],
            "experience": 4,
            "location": "Lisbon",
            "salaryExpectation": 5000000,
            "resumeText": "Data engineer.",
        },
        {
            "id": "b2",
            "name": "Ben Okafor",
            "skills": ["Go", "Docker"],
            "experience": 9,
            "location": "Lagos",
            "salaryExpectation": 7000000,
            "resumeText": "Platform engineer.",
        },
    ]), encoding="utf-8")
    return path
