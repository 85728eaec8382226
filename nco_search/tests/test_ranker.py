"""
Tests for nco_search/engine/ranker.py
"""

import pytest
from pydantic import ValidationError

from nco_search.catalog import SearchFilters, load_catalog
from nco_search.engine.ranker import (
    DEFAULT_CONFIDENCE_SCALE,
    Ranker,
    apply_filters,
    to_confidence,
)
from nco_search.tests.conftest import make_record

_QUERIES = [
    "software developer",
    "machine operator",
    "teacher",
    "customer service",
    "cook food restaurant",
    "construction worker",
    "farm crops",
]


def _codes(results):
    return [r.occupation.code for r in results]


# ---------------------------------------------------------------------------
# to_confidence / apply_filters
# ---------------------------------------------------------------------------

class TestToConfidence:
    def test_default_scale_is_fifteen(self):
        assert DEFAULT_CONFIDENCE_SCALE == 15.0

    def test_linear_below_scale(self):
        assert to_confidence(7.5, 15.0) == pytest.approx(0.5)

    def test_capped_at_one(self):
        assert to_confidence(40.0, 15.0) == 1.0

    def test_never_negative(self):
        assert to_confidence(-3.0, 15.0) == 0.0


class TestApplyFilters:
    def test_no_filters_keeps_everything(self, catalog):
        assert apply_filters(catalog, SearchFilters()) == list(catalog)

    def test_empty_string_is_no_constraint(self, catalog):
        assert apply_filters(catalog, SearchFilters(division="", sector="")) == list(catalog)

    def test_division(self, catalog):
        kept = apply_filters(catalog, SearchFilters(division="2"))
        assert {o.code for o in kept} == {"25210201", "22110101", "23210101"}

    def test_skill_level(self, catalog):
        kept = apply_filters(catalog, SearchFilters(skill_level=1))
        assert _codes_of(kept) == ["93210101"]

    def test_sector(self, catalog):
        kept = apply_filters(catalog, SearchFilters(sector="Manufacturing"))
        assert _codes_of(kept) == ["75320101", "81210101"]

    def test_filters_combine(self, catalog):
        kept = apply_filters(catalog, SearchFilters(division="2", sector="Healthcare"))
        assert _codes_of(kept) == ["22110101"]

    def test_invalid_skill_level_rejected(self):
        with pytest.raises(ValidationError):
            SearchFilters(skill_level=7)


def _codes_of(occupations):
    return [o.code for o in occupations]


# ---------------------------------------------------------------------------
# Ranker.rank
# ---------------------------------------------------------------------------

class TestRankBasics:
    def test_software_developer_ranks_first(self, catalog):
        results = Ranker(catalog).rank("software developer")
        assert results[0].occupation.title == "Software Developer"
        assert {"title", "keywords"} <= set(results[0].matched_fields)

    def test_relevance_and_confidence_agree(self, catalog):
        for r in Ranker(catalog).rank("machine operator"):
            assert r.confidence == pytest.approx(min(r.relevance_score / 15.0, 1.0))

    def test_unmatched_query_is_empty(self, catalog):
        assert Ranker(catalog).rank("zzqxnonsense") == []

    def test_empty_catalog_is_empty(self):
        assert Ranker([]).rank("anything") == []

    def test_fully_filtered_catalog_is_empty(self, catalog):
        assert Ranker(catalog).rank("software", SearchFilters(division="6")) == []

    @pytest.mark.parametrize("top_n", [0, -1])
    def test_non_positive_top_n_raises(self, catalog, top_n):
        with pytest.raises(ValueError):
            Ranker(catalog).rank("cook", top_n=top_n)

    def test_top_n_truncates(self, catalog):
        ranker = Ranker(catalog)
        full = ranker.rank("machine operator", top_n=10)
        assert len(full) > 1
        assert _codes(ranker.rank("machine operator", top_n=1)) == _codes(full)[:1]

    def test_non_positive_scale_rejected(self, catalog):
        with pytest.raises(ValueError):
            Ranker(catalog, confidence_scale=0)

    def test_custom_scale_changes_confidence_only(self, catalog):
        default = Ranker(catalog).rank("cook")
        tight   = Ranker(catalog, confidence_scale=1.0).rank("cook")
        assert _codes(default) == _codes(tight)
        assert all(r.confidence == 1.0 for r in tight)


class TestRankOrdering:
    def test_ties_keep_catalog_order(self, tiny_catalog):
        assert _codes(Ranker(tiny_catalog).rank("farm")) == ["A", "B"]

    def test_ties_truncate_in_catalog_order(self, tiny_catalog):
        assert _codes(Ranker(tiny_catalog).rank("farm", top_n=1)) == ["A"]

    @pytest.mark.parametrize("query", _QUERIES)
    def test_scores_non_increasing(self, catalog, query):
        scores = [r.relevance_score for r in Ranker(catalog).rank(query)]
        assert scores == sorted(scores, reverse=True)

    @pytest.mark.parametrize("query", _QUERIES)
    def test_no_zero_or_negative_scores(self, catalog, query):
        assert all(r.relevance_score > 0 for r in Ranker(catalog).rank(query))

    @pytest.mark.parametrize("query", _QUERIES)
    def test_confidence_within_bounds(self, catalog, query):
        assert all(0.0 <= r.confidence <= 1.0 for r in Ranker(catalog).rank(query))

    @pytest.mark.parametrize("query", _QUERIES)
    def test_deterministic(self, catalog, query):
        ranker = Ranker(catalog)
        first, second = ranker.rank(query), ranker.rank(query)
        assert _codes(first) == _codes(second)
        assert [r.relevance_score for r in first] == [r.relevance_score for r in second]

    def test_negative_scores_are_dropped(self):
        catalog = load_catalog([
            make_record(
                code="X", title="Alpha", keywords=(), tasks=(),
                description="work work work work work work work work "
                            "beta gamma delta epsilon zeta theta iota kappa lambda sigma",
            ),
            make_record(code="Y", title="Work Helper", description="Helps out",
                        keywords=("helper",), tasks=("Assist staff",)),
        ])
        assert _codes(Ranker(catalog).rank("work")) == ["Y"]


class TestRankFilters:
    @pytest.mark.parametrize("filters", [
        SearchFilters(division="8"),
        SearchFilters(skill_level=2),
        SearchFilters(sector="Manufacturing"),
    ])
    @pytest.mark.parametrize("query", ["machine operator", "customer service", "worker"])
    def test_filter_never_widens_results(self, catalog, filters, query):
        ranker   = Ranker(catalog)
        base     = ranker.rank(query)
        narrowed = ranker.rank(query, filters)
        assert len(narrowed) <= len(base)
        assert set(_codes(narrowed)) <= set(_codes(base))

    def test_filtered_results_satisfy_filter(self, catalog):
        for r in Ranker(catalog).rank("worker", SearchFilters(skill_level=2)):
            assert r.occupation.skill_level == 2

    def test_min_confidence_drops_weak_results(self, catalog):
        ranker = Ranker(catalog)
        assert ranker.rank("software developer", SearchFilters(min_confidence=0.99)) == []
        kept = ranker.rank("machine operator", SearchFilters(min_confidence=0.2))
        assert kept
        assert all(r.confidence >= 0.2 for r in kept)

    def test_min_confidence_applies_before_truncation(self, tiny_catalog):
        # all three score the same on "worker"; the threshold keeps all of them
        ranker = Ranker(tiny_catalog)
        results = ranker.rank("worker", SearchFilters(min_confidence=0.1), top_n=2)
        assert _codes(results) == ["A", "B"]
