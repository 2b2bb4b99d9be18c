"""
Tests for candidate filtering, scoring and ranking.
"""

import pytest

import matching.scorer as scorer
from matching.scorer import passes_filters, round_half_up, score_candidate, score_candidates, skill_overlap
from schemas import FilterCriteria, ParsedRequirements


def names(ranked):
    return [c.name for c in ranked]


class TestPassesFilters:

    def test_experience_at_minimum_passes(self, make_candidate):
        c = make_candidate(experience=5)
        assert passes_filters(c, FilterCriteria(min_experience=5))
        assert not passes_filters(c, FilterCriteria(min_experience=6))

    def test_location_case_insensitive_substring(self, make_candidate):
        c = make_candidate(location="San Francisco")
        assert passes_filters(c, FilterCriteria(location="san"))
        assert passes_filters(c, FilterCriteria(location="FRANCISCO"))
        assert not passes_filters(c, FilterCriteria(location="Boston"))

    def test_blank_location_is_ignored(self, make_candidate):
        c = make_candidate(location="Austin")
        assert passes_filters(c, FilterCriteria(location="   "))

    def test_remote_filter_admits_everyone(self, make_candidate):
        c = make_candidate(location="Seattle")
        assert passes_filters(c, FilterCriteria(location="Remote"))
        assert passes_filters(c, FilterCriteria(location="remotework"))

    def test_remote_bypass_can_be_disabled(self, make_candidate, monkeypatch):
        monkeypatch.setattr(scorer, "REMOTE_LOCATION_BYPASS", False)
        assert not passes_filters(make_candidate(location="Seattle"), FilterCriteria(location="remote"))
        assert passes_filters(make_candidate(location="Remote (US)"), FilterCriteria(location="remote"))

    def test_salary_ceiling(self, make_candidate):
        c = make_candidate(salary_expectation=100)
        assert passes_filters(c, FilterCriteria(max_salary=100))
        assert not passes_filters(c, FilterCriteria(max_salary=99))

    def test_fractional_minimum_experience(self, make_candidate):
        filters = FilterCriteria(min_experience=5.5)
        assert not passes_filters(make_candidate(experience=5), filters)
        assert passes_filters(make_candidate(experience=6), filters)

    def test_zero_salary_means_unbounded(self, make_candidate):
        assert passes_filters(make_candidate(salary_expectation=10 ** 9), FilterCriteria(max_salary=0))


class TestSkillOverlap:

    def test_partition_and_casing(self):
        matched, missing = skill_overlap(["react", "TYPESCRIPT", "Go"], ["React", "TypeScript", "Next.js"])
        assert matched == ["react", "TYPESCRIPT"]
        assert missing == ["Next.js"]

    def test_first_candidate_spelling_wins(self):
        matched, _ = skill_overlap(["AWS", "aws"], ["AWS"])
        assert matched == ["AWS"]

    def test_no_jd_skills(self):
        assert skill_overlap(["Python"], []) == ([], [])


class TestScoreCandidate:

    def test_full_match(self, make_candidate, react_jd):
        c = make_candidate(skills=["React", "TypeScript", "Next.js"], experience=3)
        assert score_candidate(c, react_jd).score == 100

    def test_no_skills_exact_experience_scores_40(self, make_candidate, react_jd):
        c = make_candidate(skills=["Java"], experience=3)
        scored = score_candidate(c, react_jd)
        assert scored.score == 40
        assert scored.match_details.matched_skills == []
        assert scored.match_details.missing_skills == ["React", "TypeScript", "Next.js"]

    def test_experience_is_capped(self, make_candidate, react_jd):
        c = make_candidate(skills=[], experience=30)
        assert score_candidate(c, react_jd).score == 40

    def test_partial_experience(self, make_candidate):
        jd = ParsedRequirements(raw_text="", extracted_skills=["Python", "SQL"], min_experience=6)
        c = make_candidate(skills=["python"], experience=3)
        # 1/2 * 60 + 3/6 * 40
        assert score_candidate(c, jd).score == 50

    def test_empty_extracted_skills_gives_zero_skill_score(self, make_candidate):
        jd = ParsedRequirements(raw_text="", extracted_skills=[], min_experience=0)
        assert score_candidate(make_candidate(skills=["React"]), jd).score == 40

    def test_rounds_half_up(self, make_candidate):
        jd = ParsedRequirements(raw_text="", extracted_skills=[], min_experience=16)
        # 1/16 * 40 = 2.5
        assert score_candidate(make_candidate(experience=1), jd).score == 3

    def test_fractional_skill_score(self, make_candidate):
        jd = ParsedRequirements(raw_text="", extracted_skills=["A", "B", "C", "D", "E", "F", "G"])
        # 60/7 + 40 = 48.57
        assert score_candidate(make_candidate(skills=["a"]), jd).score == 49

    def test_keeps_candidate_fields(self, make_candidate, react_jd):
        c = make_candidate(id="42", name="Kim", location="Oslo", salary_expectation=123)
        scored = score_candidate(c, react_jd)
        assert (scored.id, scored.name, scored.location, scored.salary_expectation) == ("42", "Kim", "Oslo", 123)


class TestRoundHalfUp:

    @pytest.mark.parametrize("value,expected", [(0.5, 1), (2.5, 3), (2.49, 2), (99.5, 100), (0.0, 0)])
    def test_values(self, value, expected):
        assert round_half_up(value) == expected


class TestScoreCandidates:

    def test_fixture_ranking(self, pool, react_jd, no_filters):
        ranked = score_candidates(pool, react_jd, no_filters)
        assert names(ranked) == [
            "Sarah Johnson", "David Kumar", "Emily Rodriguez", "Michael Chen", "Jessica Taylor",
        ]
        assert [c.score for c in ranked] == [100, 80, 60, 40, 40]

    def test_min_experience_filter(self, pool, react_jd):
        ranked = score_candidates(pool, react_jd, FilterCriteria(min_experience=6))
        assert "Sarah Johnson" not in names(ranked)
        assert "Michael Chen" in names(ranked)
        assert all(c.experience >= 6 for c in ranked)

    def test_remote_location_filter_keeps_everyone(self, pool, react_jd):
        ranked = score_candidates(pool, react_jd, FilterCriteria(location="remotework"))
        assert len(ranked) == len(pool)

    def test_location_filter(self, pool, react_jd):
        ranked = score_candidates(pool, react_jd, FilterCriteria(location="new york"))
        assert names(ranked) == ["Michael Chen"]

    def test_salary_filter(self, pool, react_jd):
        ranked = score_candidates(pool, react_jd, FilterCriteria(max_salary=10000000))
        assert set(names(ranked)) == {"Sarah Johnson", "Emily Rodriguez"}

    def test_nobody_survives(self, pool, react_jd):
        assert score_candidates(pool, react_jd, FilterCriteria(min_experience=50)) == []

    def test_ties_keep_input_order(self, make_candidate, react_jd, no_filters):
        pool = [make_candidate(id=str(i), name=f"c{i}", experience=3) for i in range(5)]
        ranked = score_candidates(pool, react_jd, no_filters)
        assert names(ranked) == ["c0", "c1", "c2", "c3", "c4"]

    def test_invariants(self, pool, no_filters):
        jd = ParsedRequirements(
            raw_text="", extracted_skills=["React", "Python", "Docker", "Kafka"], min_experience=7,
        )
        ranked = score_candidates(pool, jd, no_filters)
        for c in ranked:
            d = c.match_details
            assert len(d.matched_skills) + len(d.missing_skills) == len(jd.extracted_skills)
            assert {s.lower() for s in d.matched_skills} | {s.lower() for s in d.missing_skills} == \
                {s.lower() for s in jd.extracted_skills}
            assert isinstance(c.score, int) and 0 <= c.score <= 100
        assert all(a.score >= b.score for a, b in zip(ranked, ranked[1:]))
