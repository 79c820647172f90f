"""Pantry-to-recipe ingredient matching and coverage."""

from __future__ import annotations

import math
from typing import Iterable, Optional

from rapidfuzz import fuzz

from pantrypilot.core.models import CoverageResult


def _normalize_name(value: str) -> str:
    return " ".join((value or "").lower().strip().split())


def ingredient_matches(pantry_name: str, required_name: str) -> bool:
    """
    Case-insensitive substring containment in either direction.

    "Apples" covers "apple" and "apple" covers "Green Apples". Blank names
    never match anything.
    """
    pantry = _normalize_name(pantry_name)
    required = _normalize_name(required_name)
    if not pantry or not required:
        return False
    return pantry in required or required in pantry


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class SubstringIngredientMatcher:
    """
    Substring-containment matcher with an optional fuzzy fallback.

    With fuzzy_threshold unset, matching is strict containment only. When set,
    names that fail containment may still match if their rapidfuzz WRatio
    reaches the threshold (useful for typos like "parmesean").
    """

    def __init__(self, fuzzy_threshold: Optional[int] = None) -> None:
        self.fuzzy_threshold = fuzzy_threshold

    def matches(self, pantry_name: str, required_name: str) -> bool:
        if ingredient_matches(pantry_name, required_name):
            return True
        if self.fuzzy_threshold is None:
            return False
        pantry = _normalize_name(pantry_name)
        required = _normalize_name(required_name)
        if not pantry or not required:
            return False
        return fuzz.WRatio(pantry, required) >= self.fuzzy_threshold

    def is_available(self, required_name: str, pantry_names: Iterable[str]) -> bool:
        return any(self.matches(pantry_name, required_name) for pantry_name in pantry_names)

    def coverage(
        self,
        recipe_id: str,
        required_names: Iterable[str],
        pantry_names: Iterable[str],
    ) -> CoverageResult:
        required = list(required_names)
        pantry = list(pantry_names)

        available: list[str] = []
        missing: list[str] = []
        for name in required:
            if self.is_available(name, pantry):
                available.append(name)
            else:
                missing.append(name)

        # No known ingredients must not read as a perfect match.
        percentage = round_half_up(100 * len(available) / len(required)) if required else 0
        return CoverageResult(
            recipe_id=recipe_id,
            match_percentage=percentage,
            available=tuple(available),
            missing=tuple(missing),
        )

    def availability(
        self, required_names: Iterable[str], pantry_names: Iterable[str]
    ) -> Optional[float]:
        """Fraction of required names present in the pantry; None for an empty list."""
        required = list(required_names)
        if not required:
            return None
        pantry = list(pantry_names)
        available = sum(1 for name in required if self.is_available(name, pantry))
        return available / len(required)
