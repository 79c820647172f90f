"""In-memory recipe ingredient registry implementing IngredientLookup."""

from typing import Iterable, Optional

from pantrypilot.core.models import RecipeIngredient


class StaticIngredientLookup:
    """
    Registry of required ingredient names keyed by recipe id.

    Keyed by id rather than title, so renaming a recipe never loses its
    ingredients.
    """

    def __init__(self) -> None:
        self._ingredients: dict[str, tuple[str, ...]] = {}

    @classmethod
    def from_rows(cls, rows: Iterable[RecipeIngredient]) -> "StaticIngredientLookup":
        """
        Build a registry from recipe ingredient rows, keeping row order per recipe.

        Args:
            rows: RecipeIngredient records, in any recipe order
        """
        grouped: dict[str, list[str]] = {}
        for row in rows:
            name = (row.ingredient_name or "").strip()
            if not name:
                continue
            grouped.setdefault(row.recipe_id, []).append(name)
        lookup = cls()
        for recipe_id, names in grouped.items():
            lookup.register(recipe_id, names)
        return lookup

    def register(self, recipe_id: str, names: Iterable[str]) -> None:
        """
        Register the ingredient names for a recipe.

        Args:
            recipe_id: The recipe's identifier
            names: Required ingredient names in recipe order

        Raises:
            ValueError: If the recipe is already registered
        """
        if recipe_id in self._ingredients:
            raise ValueError(f"Ingredients for recipe_id='{recipe_id}' are already registered")
        self._ingredients[recipe_id] = tuple(names)

    def get(self, recipe_id: str) -> Optional[tuple[str, ...]]:
        """Return the registered names, or None if the recipe is unknown."""
        return self._ingredients.get(recipe_id)

    def ingredients_for_recipe(self, recipe_id: str) -> list[str]:
        return list(self._ingredients.get(recipe_id, ()))

    def list_all(self) -> dict[str, tuple[str, ...]]:
        return dict(self._ingredients)
