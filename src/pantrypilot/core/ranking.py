"""Ranking of scored suggestions into a bounded shortlist."""

from __future__ import annotations

import logging
from typing import AbstractSet, Iterable, Optional

from pantrypilot.core.models import Suggestion

logger = logging.getLogger(__name__)


class SuggestionRanker:
    """
    Filter weak suggestions, order by priority, truncate to the top N, then
    drop dismissed ids from that shortlist.

    Dismissal state is owned by the caller and passed in per call.
    """

    def __init__(self, min_score: float = 0.3, max_results: int = 5) -> None:
        self.min_score = min_score
        self.max_results = max_results

    def rank(
        self,
        suggestions: Iterable[Suggestion],
        limit: Optional[int] = None,
        dismissed_ids: Optional[AbstractSet[str]] = None,
    ) -> list[Suggestion]:
        limit = self.max_results if limit is None else limit
        if limit <= 0:
            return []

        candidates = [s for s in suggestions if s.match_score > self.min_score]
        # sorted() is stable: equal priorities keep recipe-list order.
        ordered = sorted(candidates, key=lambda s: s.priority, reverse=True)
        ranked = ordered[:limit]
        # Dismissals filter the shortlist; they do not pull in lower-ranked recipes.
        if dismissed_ids:
            ranked = [s for s in ranked if s.id not in dismissed_ids]
        logger.debug(
            "Ranked %d of %d candidates above min_score=%s",
            len(ranked),
            len(candidates),
            self.min_score,
        )
        return ranked
