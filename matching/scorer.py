import math
import logging
from typing import Iterable, List, Tuple

from schemas import Candidate, FilterCriteria, MatchDetails, ParsedRequirements, ScoredCandidate
from .config import WEIGHTS, MAX_SCORE, REMOTE_TOKEN, REMOTE_LOCATION_BYPASS

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def passes_filters(candidate: Candidate, filters: FilterCriteria) -> bool:
    """Hard constraints; a candidate failing any of them is not scored at all."""
    if candidate.experience < filters.min_experience:
        return False

    if filters.location and filters.location.strip():
        cand_loc = candidate.location.lower()
        filter_loc = filters.location.lower()
        bypass = REMOTE_LOCATION_BYPASS and REMOTE_TOKEN in filter_loc
        if filter_loc not in cand_loc and not bypass:
            return False

    if filters.max_salary > 0 and candidate.salary_expectation > filters.max_salary:
        return False

    return True


def skill_overlap(c_skills: List[str], jd_skills: List[str]) -> Tuple[List[str], List[str]]:
    """
    Split JD skills into (matched, missing) against the candidate's skills.
    Matched entries keep the candidate's casing, missing ones the JD's.
    """
    by_lower = {}
    for s in c_skills:
        by_lower.setdefault(s.lower(), s)

    matched, missing = [], []
    for skill in jd_skills:
        original = by_lower.get(skill.lower())
        if original is not None:
            matched.append(original)
        else:
            missing.append(skill)
    return matched, missing


def score_candidate(candidate: Candidate, jd: ParsedRequirements) -> ScoredCandidate:
    matched, missing = skill_overlap(candidate.skills, jd.extracted_skills)

    total = len(jd.extracted_skills)
    skill_ratio = len(matched) / total if total else 0.0
    skill_score = skill_ratio * WEIGHTS["skills"]

    # Capped so over-qualified candidates don't exceed full credit
    if jd.min_experience > 0:
        exp_ratio = min(candidate.experience / jd.min_experience, 1.0)
    else:
        exp_ratio = 1.0
    exp_score = exp_ratio * WEIGHTS["experience"]

    score = max(0, min(MAX_SCORE, round_half_up(skill_score + exp_score)))
    logger.debug(
        f"{candidate.name}: skills {len(matched)}/{total} = {skill_score:.2f}, "
        f"experience = {exp_score:.2f}, total = {score}"
    )
    return ScoredCandidate.from_candidate(
        candidate,
        score=score,
        details=MatchDetails(matched_skills=matched, missing_skills=missing),
    )


def score_candidates(
    candidates: Iterable[Candidate],
    jd: ParsedRequirements,
    filters: FilterCriteria,
) -> List[ScoredCandidate]:
    """Filter, score and rank candidates, best first. Ties keep input order."""
    candidates = list(candidates)
    survivors = [c for c in candidates if passes_filters(c, filters)]
    scored = [score_candidate(c, jd) for c in survivors]
    scored.sort(key=lambda x: x.score, reverse=True)
    logger.info(f"Ranked {len(scored)} of {len(candidates)} candidates")
    return scored
