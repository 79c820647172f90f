"""Tests for suggestion ranking."""

from pantrypilot.core.models import Suggestion
from pantrypilot.core.ranking import SuggestionRanker


def _suggestion(recipe_id: str, priority: int, score: float) -> Suggestion:
    return Suggestion(
        id=f"suggestion-{recipe_id}",
        recipe_id=recipe_id,
        recipe_title=recipe_id.title(),
        priority=priority,
        match_score=score,
        reason="Good match for your preferences",
    )


def _pool() -> list[Suggestion]:
    return [
        _suggestion("a", 50, 0.5),
        _suggestion("b", 120, 0.9),
        _suggestion("c", 80, 0.3),
        _suggestion("d", 80, 0.31),
        _suggestion("e", 80, 0.7),
        _suggestion("f", 10, 0.4),
        _suggestion("g", 200, 0.1),
        _suggestion("h", 5, 0.35),
    ]


def test_rank_filters_sorts_and_truncates() -> None:
    ranked = SuggestionRanker().rank(_pool())
    assert [s.recipe_id for s in ranked] == ["b", "d", "e", "a", "f"]


def test_ranked_output_properties() -> None:
    for limit in range(0, 8):
        ranked = SuggestionRanker().rank(_pool(), limit=limit)
        assert len(ranked) <= limit
        assert all(s.match_score > 0.3 for s in ranked)
        priorities = [s.priority for s in ranked]
        assert priorities == sorted(priorities, reverse=True)


def test_ties_keep_input_order() -> None:
    pool = [_suggestion("x", 10, 0.5), _suggestion("y", 10, 0.5), _suggestion("z", 10, 0.5)]
    assert [s.recipe_id for s in SuggestionRanker().rank(pool)] == ["x", "y", "z"]


def test_dismissed_ids_filter_the_shortlist() -> None:
    ranked = SuggestionRanker().rank(_pool(), dismissed_ids={"suggestion-b"})
    assert [s.recipe_id for s in ranked] == ["d", "e", "a", "f"]


def test_dismissed_outside_shortlist_has_no_effect() -> None:
    ranked = SuggestionRanker().rank(_pool(), dismissed_ids={"suggestion-h", "suggestion-zz"})
    assert [s.recipe_id for s in ranked] == ["b", "d", "e", "a", "f"]


def test_dismissal_does_not_backfill_from_larger_pool() -> None:
    pool = [_suggestion(f"s{i}", 100 - i, 0.5) for i in range(7)]
    ranked = SuggestionRanker().rank(pool, dismissed_ids={"suggestion-s0"})
    assert [s.recipe_id for s in ranked] == ["s1", "s2", "s3", "s4"]


def test_empty_and_non_positive_limit() -> None:
    ranker = SuggestionRanker()
    assert ranker.rank([]) == []
    assert ranker.rank(_pool(), limit=0) == []
    assert ranker.rank(_pool(), limit=-1) == []


def test_custom_min_score_and_max_results() -> None:
    ranker = SuggestionRanker(min_score=0.6, max_results=1)
    assert [s.recipe_id for s in ranker.rank(_pool())] == ["b"]
