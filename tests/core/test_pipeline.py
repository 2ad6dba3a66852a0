"""Tests for the default preprocess, refine and highlight stages."""

from collections import Counter

from narrow.core.config import EngineConfig
from narrow.core.pipeline import (
    PipelineConfig,
    first_match_highlight,
    keep_order,
    sort_candidates,
    substring_refine,
)
from narrow.domain.candidate import PRIMARY, Candidate, HighlightSpan
from tests.helpers import displays, make_candidates


class TestPreprocess:
    """Tests for preprocess stages."""

    def test_sorts_by_length_then_text(self):
        """Shorter candidates first, ties broken alphabetically."""
        result = sort_candidates(make_candidates("bb", "a", "ccc", "z"))
        assert displays(result) == ["a", "z", "bb", "ccc"]

    def test_sort_does_not_touch_input(self):
        """The caller's list keeps its order."""
        candidates = make_candidates("bb", "a")
        sort_candidates(candidates)
        assert displays(candidates) == ["bb", "a"]

    def test_sort_is_stable_for_identical_display(self):
        """Equal display texts keep their input order."""
        first = Candidate("same", full="first")
        second = Candidate("same", full="second")
        result = sort_candidates([first, second])
        assert [candidate.full_form for candidate in result] == ["first", "second"]

    def test_keep_order_returns_copy(self):
        candidates = make_candidates("b", "a")
        result = keep_order(candidates)
        assert displays(result) == ["b", "a"]
        assert result is not candidates


class TestRefine:
    """Tests for the substring refine stage."""

    def test_keeps_substring_matches_in_order(self):
        result = substring_refine("a", make_candidates("banana", "apple", "kiwi"))
        assert displays(result) == ["banana", "apple"]

    def test_empty_query_keeps_everything_in_new_list(self):
        candidates = make_candidates("b", "a")
        result = substring_refine("", candidates)
        assert displays(result) == ["b", "a"]
        assert result is not candidates

    def test_query_is_literal_text(self):
        """Pattern characters match only themselves."""
        result = substring_refine("a.c", make_candidates("abc", "a.c", "xa.cx"))
        assert displays(result) == ["a.c", "xa.cx"]

    def test_case_sensitive_by_default(self):
        result = substring_refine("app", make_candidates("Apple", "apple"))
        assert displays(result) == ["apple"]

    def test_ignore_case(self):
        result = substring_refine("APP", make_candidates("Apple", "kiwi"), ignore_case=True)
        assert displays(result) == ["Apple"]

    def test_only_display_text_is_matched(self):
        candidate = Candidate("kiwi", display_prefix="fruit/", right_margin="green")
        assert substring_refine("fruit", [candidate]) == []
        assert substring_refine("green", [candidate]) == []

    def test_empty_query_after_preprocess_keeps_multiset(self):
        """Refining with an empty query never drops or duplicates candidates."""
        preprocessed = sort_candidates(make_candidates("pear", "fig", "pear", "plum", "a"))
        refined = substring_refine("", preprocessed)
        assert Counter(displays(refined)) == Counter(displays(preprocessed))


class TestHighlight:
    """Tests for the first-match highlight stage."""

    def test_marks_first_occurrence(self):
        (result,) = first_match_highlight("an", make_candidates("banana"))
        assert result.highlights == (HighlightSpan(1, 3, PRIMARY),)

    def test_non_matches_are_unmarked(self):
        (result,) = first_match_highlight("zz", make_candidates("banana"))
        assert result.highlights == ()

    def test_empty_query_marks_nothing(self):
        (result,) = first_match_highlight("", make_candidates("banana"))
        assert result.highlights == ()

    def test_metadata_survives(self):
        candidate = Candidate("apple", full="/f/apple", display_prefix="> ", display_suffix="!", right_margin="5")
        (result,) = first_match_highlight("pp", [candidate])
        assert result.full_form == "/f/apple"
        assert (result.display_prefix, result.display_suffix, result.right_margin) == ("> ", "!", "5")
        assert candidate.highlights == ()

    def test_ignore_case(self):
        (result,) = first_match_highlight("PL", make_candidates("apple"), ignore_case=True)
        assert result.highlights == (HighlightSpan(2, 4, PRIMARY),)


class TestPipelineConfig:
    """Tests for building and replacing pipeline stages."""

    def test_ignore_case_refine_and_highlight_agree(self):
        """Every candidate kept by an ignore-case refine gets a highlight."""
        pipeline = PipelineConfig.from_engine_config(EngineConfig(ignore_case=True))
        candidates = make_candidates("STRASSE", "Straße", "KIWI", "kiwi")
        for query in ("straße", "STRASSE", "Kiwi", "ß"):
            refined = pipeline.refine(query, candidates)
            highlighted = pipeline.highlight(query, refined)
            assert all(candidate.highlights for candidate in highlighted), query

        assert displays(pipeline.refine("straße", candidates)) == ["Straße"]

    def test_sorting_disabled_keeps_order(self):
        pipeline = PipelineConfig.from_engine_config(EngineConfig(sort_enabled=False))
        assert displays(pipeline.preprocess(make_candidates("bb", "a"))) == ["bb", "a"]

    def test_ignore_case_is_bound_into_refine(self):
        pipeline = PipelineConfig.from_engine_config(EngineConfig(ignore_case=True))
        assert displays(pipeline.refine("A", make_candidates("apple", "kiwi"))) == ["apple"]

    def test_replace_swaps_only_given_stage(self):
        def reverse(candidates):
            return list(reversed(candidates))

        pipeline = PipelineConfig().replace(preprocess=reverse)
        assert pipeline.preprocess is reverse
        assert pipeline.refine is substring_refine
        assert pipeline.highlight is first_match_highlight
