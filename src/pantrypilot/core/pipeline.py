"""Engine orchestration: wires stages together with dependency injection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from typing import AbstractSet, Optional, Sequence

from pantrypilot.core.compliance import KeywordComplianceFilter
from pantrypilot.core.config import EngineConfig
from pantrypilot.core.expiration import ExpirationClassifier
from pantrypilot.core.interfaces import ComplianceChecker, IngredientLookup, IngredientMatcher
from pantrypilot.core.matching import SubstringIngredientMatcher
from pantrypilot.core.models import (
    CoverageResult,
    ExpirationReport,
    Notification,
    PerishableItem,
    Recipe,
    Suggestion,
    UserPreferences,
)
from pantrypilot.core.notifications import NotificationComposer
from pantrypilot.core.ranking import SuggestionRanker
from pantrypilot.core.scoring import SuggestionScorer
from pantrypilot.core.skill import SkillFitScorer

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    today: date
    report: ExpirationReport
    suggestions: list[Suggestion] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)
    coverage: dict[str, CoverageResult] = field(default_factory=dict)


class SuggestionEngine:
    """
    Orchestrates: classify -> match/comply/skill -> score -> rank, and
    classify -> compose notifications.

    All stages are injected, so implementations can be swapped at runtime.
    Stages default to ones built from the shared EngineConfig, which names
    both the bucket tiers and the suggestion urgency tiers.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        classifier: Optional[ExpirationClassifier] = None,
        matcher: Optional[IngredientMatcher] = None,
        compliance: Optional[ComplianceChecker] = None,
        skill_scorer: Optional[SkillFitScorer] = None,
        scorer: Optional[SuggestionScorer] = None,
        ranker: Optional[SuggestionRanker] = None,
        composer: Optional[NotificationComposer] = None,
        lookup: Optional[IngredientLookup] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.classifier = classifier or ExpirationClassifier(self.config.thresholds)
        self.matcher = matcher or SubstringIngredientMatcher(self.config.fuzzy_match_threshold)
        self.compliance = compliance or KeywordComplianceFilter()
        self.skill_scorer = skill_scorer or SkillFitScorer()
        self.scorer = scorer or SuggestionScorer(
            self.matcher,
            self.compliance,
            self.skill_scorer,
            tiers=self.config.suggestion_thresholds,
            horizon_days=self.config.suggestion_horizon_days,
        )
        self.ranker = ranker or SuggestionRanker(
            min_score=self.config.min_match_score,
            max_results=self.config.max_suggestions,
        )
        self.composer = composer or NotificationComposer(self.classifier)
        self.lookup = lookup

    def resolve_recipes(self, recipes: Sequence[Recipe]) -> list[Recipe]:
        """Fill unresolved ingredient lists from the lookup; explicit lists are kept."""
        resolved: list[Recipe] = []
        for recipe in recipes:
            if recipe.required_ingredient_names is None and self.lookup is not None:
                names = self.lookup.ingredients_for_recipe(recipe.id)
                recipe = replace(recipe, required_ingredient_names=tuple(names))
            elif recipe.required_ingredient_names is None:
                logger.debug("Recipe %s has no ingredient list and no lookup", recipe.id)
            resolved.append(recipe)
        return resolved

    def classify(
        self, items: Sequence[PerishableItem], today: Optional[date] = None
    ) -> ExpirationReport:
        return self.classifier.classify(items, today or date.today())

    def suggest(
        self,
        pantry: Sequence[PerishableItem],
        recipes: Sequence[Recipe],
        preferences: Optional[UserPreferences] = None,
        today: Optional[date] = None,
        dismissed_ids: Optional[AbstractSet[str]] = None,
        limit: Optional[int] = None,
    ) -> list[Suggestion]:
        today = today or date.today()
        return self._suggest(pantry, recipes, preferences, today, dismissed_ids, limit)

    def notify(
        self,
        ingredients: Sequence[PerishableItem],
        leftovers: Sequence[PerishableItem] = (),
        today: Optional[date] = None,
    ) -> list[Notification]:
        return self.composer.compose_all(ingredients, leftovers, today or date.today())

    def coverage(
        self,
        recipes: Sequence[Recipe],
        pantry: Sequence[PerishableItem],
    ) -> dict[str, CoverageResult]:
        pantry_names = [item.name for item in pantry]
        return {
            recipe.id: self.matcher.coverage(
                recipe.id, recipe.required_ingredient_names or (), pantry_names
            )
            for recipe in self.resolve_recipes(recipes)
        }

    def evaluate(
        self,
        pantry: Sequence[PerishableItem],
        recipes: Sequence[Recipe],
        preferences: Optional[UserPreferences] = None,
        leftovers: Sequence[PerishableItem] = (),
        today: Optional[date] = None,
        dismissed_ids: Optional[AbstractSet[str]] = None,
        limit: Optional[int] = None,
    ) -> EvaluationResult:
        """Run every output off a single `today` snapshot."""
        today = today or date.today()
        report = self.classify(pantry, today)
        resolved = self.resolve_recipes(recipes)
        return EvaluationResult(
            today=today,
            report=report,
            suggestions=self._suggest(pantry, resolved, preferences, today, dismissed_ids, limit),
            notifications=self.notify(pantry, leftovers, today),
            coverage=self.coverage(resolved, pantry),
        )

    def _suggest(
        self,
        pantry: Sequence[PerishableItem],
        recipes: Sequence[Recipe],
        preferences: Optional[UserPreferences],
        today: date,
        dismissed_ids: Optional[AbstractSet[str]],
        limit: Optional[int],
    ) -> list[Suggestion]:
        # Pantry order, so the first matched names in a reason follow the caller's list.
        classified = (self.classifier.classify_item(item, today) for item in pantry)
        expiring = [entry for entry in classified if entry is not None]
        if not expiring:
            return []
        pantry_names = [item.name for item in pantry]
        scored = self.scorer.score_all(
            self.resolve_recipes(recipes), expiring, pantry_names, preferences
        )
        return self.ranker.rank(scored, limit=limit, dismissed_ids=dismissed_ids)
