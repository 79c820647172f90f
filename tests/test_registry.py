"""Tests for the in-memory ingredient lookup."""

import pytest

from pantrypilot.core.interfaces import IngredientLookup
from pantrypilot.core.models import RecipeIngredient
from pantrypilot.core.registry import StaticIngredientLookup


def test_register_and_lookup() -> None:
    lookup = StaticIngredientLookup()
    lookup.register("r1", ["spaghetti", "eggs"])
    assert isinstance(lookup, IngredientLookup)
    assert lookup.ingredients_for_recipe("r1") == ["spaghetti", "eggs"]
    assert lookup.get("r1") == ("spaghetti", "eggs")
    assert lookup.list_all() == {"r1": ("spaghetti", "eggs")}


def test_unknown_recipe_yields_empty_list() -> None:
    lookup = StaticIngredientLookup()
    assert lookup.ingredients_for_recipe("missing") == []
    assert lookup.get("missing") is None


def test_duplicate_registration_rejected() -> None:
    lookup = StaticIngredientLookup()
    lookup.register("r1", ["flour"])
    with pytest.raises(ValueError):
        lookup.register("r1", ["milk"])


def test_from_rows_groups_in_row_order() -> None:
    rows = [
        RecipeIngredient(recipe_id="r1", ingredient_name="flour"),
        RecipeIngredient(recipe_id="r2", ingredient_name="salmon fillets"),
        RecipeIngredient(recipe_id="r1", ingredient_name="milk"),
        RecipeIngredient(recipe_id="r1", ingredient_name="  "),
    ]
    lookup = StaticIngredientLookup.from_rows(rows)
    assert lookup.ingredients_for_recipe("r1") == ["flour", "milk"]
    assert lookup.ingredients_for_recipe("r2") == ["salmon fillets"]
