"""Keyword-based dietary compliance checks.

Best-effort textual heuristic over a recipe's title and description. It is
not an ingredient-level allergen guarantee.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from pantrypilot.core.models import ComplianceResult, Recipe, UserPreferences

logger = logging.getLogger(__name__)

VEGETARIAN_KEYWORDS = ["meat", "chicken", "beef", "pork", "fish", "salmon"]

DEFAULT_RESTRICTION_KEYWORDS: dict[str, list[str]] = {
    "vegetarian": VEGETARIAN_KEYWORDS,
    "vegan": VEGETARIAN_KEYWORDS + ["dairy", "egg", "milk", "butter", "cheese"],
    "gluten-free": ["wheat", "flour", "pasta", "bread"],
}


def _normalize_text(value: str) -> str:
    return " ".join((value or "").lower().strip().split())


def _load_yaml(path: Path | None, resource_name: str) -> dict[str, Any]:
    if not path:
        return {}
    file_path = path / resource_name
    if not file_path.exists():
        return {}
    with file_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a mapping at the top level", file_path)
        return {}
    return data


def recipe_text(recipe: Recipe) -> str:
    return f"{recipe.title} {recipe.description}".lower()


class KeywordComplianceFilter:
    """
    Deterministic keyword compliance filter.

    A recipe fails if its text contains any keyword of any active restriction,
    or any allergy term verbatim. Restrictions without a keyword list are
    ignored rather than failing the recipe. dietary_keywords.yaml under
    templates_path may add or replace restriction entries.
    """

    def __init__(self, templates_path: str | Path | None = None) -> None:
        self.templates_path = Path(templates_path) if templates_path else None
        self.restriction_keywords = self._load_restriction_keywords()

    def _load_restriction_keywords(self) -> dict[str, list[str]]:
        table = {name: list(keywords) for name, keywords in DEFAULT_RESTRICTION_KEYWORDS.items()}
        data = _load_yaml(self.templates_path, "dietary_keywords.yaml")
        overrides = data.get("restrictions", {}) or {}
        if not isinstance(overrides, dict):
            logger.warning("Ignoring malformed 'restrictions' entry in dietary_keywords.yaml")
            return table
        for name, keywords in overrides.items():
            if not name or not isinstance(keywords, list):
                continue
            table[_normalize_text(str(name))] = [
                _normalize_text(k) for k in keywords if isinstance(k, str) and k.strip()
            ]
        return table

    def check(self, recipe: Recipe, preferences: UserPreferences) -> ComplianceResult:
        reasons: list[str] = []
        text = recipe_text(recipe)

        for restriction in sorted(preferences.dietary_restrictions or ()):
            name = _normalize_text(restriction)
            keywords = self.restriction_keywords.get(name)
            if not keywords:
                logger.debug("No keyword list for restriction %r, skipping", restriction)
                continue
            matched = next((k for k in keywords if k and k in text), None)
            if matched:
                reasons.append(f"restriction:{name}:{matched}")

        for allergy in sorted(preferences.allergies or ()):
            term = (allergy or "").strip().lower()
            if term and term in text:
                reasons.append(f"allergy:{term}")

        return ComplianceResult(is_compliant=not reasons, reasons=reasons)

    def is_compliant(self, recipe: Recipe, preferences: UserPreferences) -> bool:
        return self.check(recipe, preferences).is_compliant
