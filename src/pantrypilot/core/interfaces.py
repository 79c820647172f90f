"""Protocol definitions for the swappable engine stages."""

from typing import Iterable, Optional, Protocol, runtime_checkable

from pantrypilot.core.models import ComplianceResult, CoverageResult, Recipe, UserPreferences


@runtime_checkable
class IngredientLookup(Protocol):
    """
    IngredientLookup protocol: resolves a recipe's required ingredient names.

    Implementations are backed by whatever holds the recipe ingredient rows
    (a database query, an in-memory registry, a fixture file).
    """

    def ingredients_for_recipe(self, recipe_id: str) -> list[str]:
        """
        Return the required ingredient names for a recipe, in recipe order.

        Args:
            recipe_id: The recipe's identifier

        Returns:
            Ingredient names; an empty list if the recipe is unknown
        """
        ...


@runtime_checkable
class IngredientMatcher(Protocol):
    """IngredientMatcher protocol: decide whether pantry names cover recipe names."""

    def is_available(self, required_name: str, pantry_names: Iterable[str]) -> bool:
        """
        Return True if any pantry name covers the required ingredient.

        Args:
            required_name: Ingredient name as listed by the recipe
            pantry_names: Names of the items the user currently holds
        """
        ...

    def coverage(
        self,
        recipe_id: str,
        required_names: Iterable[str],
        pantry_names: Iterable[str],
    ) -> CoverageResult:
        """
        Aggregate availability into a match percentage and a missing list.

        Args:
            recipe_id: Recipe the coverage is computed for
            required_names: The recipe's required ingredient names
            pantry_names: Names of the items the user currently holds

        Returns:
            CoverageResult with match_percentage, available and missing names
        """
        ...

    def availability(
        self, required_names: Iterable[str], pantry_names: Iterable[str]
    ) -> Optional[float]:
        """
        Fraction of required names present in the pantry.

        Returns:
            A value in [0, 1], or None when no required names are known
        """
        ...


@runtime_checkable
class ComplianceChecker(Protocol):
    """ComplianceChecker protocol: test a recipe against dietary restrictions and allergies."""

    def check(self, recipe: Recipe, preferences: UserPreferences) -> ComplianceResult:
        """
        Check the recipe against the user's restrictions and allergies.

        Args:
            recipe: Recipe under evaluation
            preferences: The user's stated preferences

        Returns:
            ComplianceResult with is_compliant and the reasons for any failure
        """
        ...
