"""Suggestion scoring: urgency, compliance, skill fit, and availability."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from pantrypilot.core.compliance import KeywordComplianceFilter
from pantrypilot.core.config import DEFAULT_SUGGESTION_THRESHOLDS, ExpirationThresholds
from pantrypilot.core.interfaces import ComplianceChecker, IngredientMatcher
from pantrypilot.core.matching import SubstringIngredientMatcher, round_half_up
from pantrypilot.core.models import (
    ClassifiedItem,
    ExpirationBucket,
    Recipe,
    Suggestion,
    UserPreferences,
)
from pantrypilot.core.skill import SkillFitScorer

logger = logging.getLogger(__name__)

# urgency tier -> (match_score increment, priority increment)
URGENCY_WEIGHTS: dict[ExpirationBucket, tuple[float, int]] = {
    ExpirationBucket.CRITICAL: (0.4, 100),
    ExpirationBucket.WARNING: (0.3, 75),
    ExpirationBucket.UPCOMING: (0.2, 50),
}

NON_COMPLIANT_SCORE_FACTOR = 0.3
NON_COMPLIANT_PRIORITY_PENALTY = 50
COMPLIANT_SCORE_BONUS = 0.1
COMPLIANT_PRIORITY_BONUS = 10
SKILL_PRIORITY_FACTOR = 20
AVAILABILITY_SCORE_WEIGHT = 0.2
AVAILABILITY_PRIORITY_WEIGHT = 30
UNKNOWN_AVAILABILITY = 0.5


def build_reason(matched_names: Sequence[str]) -> str:
    if not matched_names:
        return "Good match for your preferences"
    urgent = list(matched_names[:2])
    verb = "expires" if len(urgent) == 1 else "expire"
    return f"Uses {', '.join(urgent)} which {verb} soon"


class SuggestionScorer:
    """
    Combine expiration urgency, dietary compliance, skill fit, and ingredient
    availability into a priority and a bounded match score per recipe.

    Each matched item is weighted by its day count against the suggestion
    tiers. Items already expired or past horizon_days never count. Deterministic
    for identical inputs; holds no per-call state.
    """

    def __init__(
        self,
        matcher: Optional[IngredientMatcher] = None,
        compliance: Optional[ComplianceChecker] = None,
        skill_scorer: Optional[SkillFitScorer] = None,
        tiers: Optional[ExpirationThresholds] = None,
        horizon_days: Optional[int] = None,
    ) -> None:
        self.matcher = matcher or SubstringIngredientMatcher()
        self.compliance = compliance or KeywordComplianceFilter()
        self.skill_scorer = skill_scorer or SkillFitScorer()
        self.tiers = tiers or DEFAULT_SUGGESTION_THRESHOLDS
        self.horizon_days = max(
            self.tiers.upcoming_days,
            horizon_days if horizon_days is not None else self.tiers.upcoming_days,
        )

    def urgency_tier(self, days_left: int) -> Optional[ExpirationBucket]:
        """Tier an item counts under when scoring, or None if it never counts."""
        if days_left < 0 or days_left > self.horizon_days:
            return None
        if days_left <= self.tiers.critical_days:
            return ExpirationBucket.CRITICAL
        if days_left <= self.tiers.warning_days:
            return ExpirationBucket.WARNING
        return ExpirationBucket.UPCOMING

    def score_recipe(
        self,
        recipe: Recipe,
        expiring: Sequence[ClassifiedItem],
        pantry_names: Sequence[str],
        preferences: Optional[UserPreferences] = None,
    ) -> Suggestion:
        required = list(recipe.required_ingredient_names or ())
        match_score = 0.0
        priority = 0.0
        matched: list[str] = []

        for entry in expiring:
            tier = self.urgency_tier(entry.days_left)
            if tier is None:
                continue
            weights = URGENCY_WEIGHTS[tier]
            if any(self.matcher.is_available(name, [entry.item.name]) for name in required):
                matched.append(entry.item.name)
                match_score += weights[0]
                priority += weights[1]

        if preferences is not None:
            if self.compliance.check(recipe, preferences).is_compliant:
                match_score += COMPLIANT_SCORE_BONUS
                priority += COMPLIANT_PRIORITY_BONUS
            else:
                match_score *= NON_COMPLIANT_SCORE_FACTOR
                priority -= NON_COMPLIANT_PRIORITY_PENALTY

            skill_adjustment = self.skill_scorer.adjustment(
                recipe.difficulty, preferences.cooking_skill_level
            )
            match_score += skill_adjustment
            priority += skill_adjustment * SKILL_PRIORITY_FACTOR

        availability = self.matcher.availability(required, pantry_names)
        if availability is None:
            availability = UNKNOWN_AVAILABILITY
        match_score += availability * AVAILABILITY_SCORE_WEIGHT
        priority += availability * AVAILABILITY_PRIORITY_WEIGHT

        match_score = max(0.0, min(1.0, match_score))
        difficulty = recipe.difficulty
        return Suggestion(
            id=f"suggestion-{recipe.id}",
            recipe_id=recipe.id,
            recipe_title=recipe.title,
            priority=round_half_up(priority),
            match_score=round(match_score, 4),
            reason=build_reason(matched),
            matched_expiring_ingredient_names=tuple(matched),
            estimated_prep_minutes=int(recipe.prep_time or 0) + int(recipe.cook_time or 0),
            difficulty=str(getattr(difficulty, "value", difficulty) or ""),
        )

    def score_all(
        self,
        recipes: Sequence[Recipe],
        expiring: Sequence[ClassifiedItem],
        pantry_names: Sequence[str],
        preferences: Optional[UserPreferences] = None,
    ) -> list[Suggestion]:
        """Score every recipe in catalog order; nothing expiring means nothing to suggest."""
        urgent = [entry for entry in expiring if self.urgency_tier(entry.days_left) is not None]
        if not urgent:
            logger.debug("No expiring items, skipping suggestion scoring")
            return []
        suggestions = [
            self.score_recipe(recipe, urgent, pantry_names, preferences) for recipe in recipes
        ]
        logger.debug("Scored %d recipes against %d expiring items", len(suggestions), len(urgent))
        return suggestions
