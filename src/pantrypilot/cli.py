"""CLI helpers for pantrypilot."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from dateutil import parser as date_parser

from pantrypilot.core.config import load_config
from pantrypilot.core.models import (
    ItemKind,
    PerishableItem,
    Recipe,
    RecipeIngredient,
    UserPreferences,
)
from pantrypilot.core.pipeline import SuggestionEngine
from pantrypilot.core.registry import StaticIngredientLookup

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pantrypilot")
    parser.add_argument("--log-level", default="WARNING")
    subparsers = parser.add_subparsers(dest="command", required=True)

    suggest_cmd = subparsers.add_parser("suggest", help="Rank recipes that use expiring items")
    suggest_cmd.add_argument("file", help="Pantry JSONL")
    suggest_cmd.add_argument("--recipes", required=True)
    suggest_cmd.add_argument("--recipe-ingredients")
    suggest_cmd.add_argument("--preferences")
    suggest_cmd.add_argument("--today")
    suggest_cmd.add_argument("--config")
    suggest_cmd.add_argument("--dismissed", nargs="*", default=[])
    suggest_cmd.add_argument("--limit", type=int)
    suggest_cmd.add_argument("--out", required=True)

    notify_cmd = subparsers.add_parser("notify", help="Compose expiration notifications")
    notify_cmd.add_argument("--ingredients", required=True)
    notify_cmd.add_argument("--leftovers")
    notify_cmd.add_argument("--today")
    notify_cmd.add_argument("--config")
    notify_cmd.add_argument("--out", required=True)

    coverage_cmd = subparsers.add_parser("coverage", help="Per-recipe pantry coverage")
    coverage_cmd.add_argument("file", help="Pantry JSONL")
    coverage_cmd.add_argument("--recipes", required=True)
    coverage_cmd.add_argument("--recipe-ingredients")
    coverage_cmd.add_argument("--out", required=True)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "suggest":
        engine = SuggestionEngine(
            config=load_config(args.config),
            lookup=_lookup_from_file(args.recipe_ingredients),
        )
        pantry = [parse_perishable_item(obj) for obj in _read_jsonl(args.file)]
        recipes = [parse_recipe(obj) for obj in _read_jsonl(args.recipes)]
        preferences = _read_preferences(args.preferences)
        suggestions = engine.suggest(
            pantry,
            recipes,
            preferences=preferences,
            today=_parse_date(args.today) or date.today(),
            dismissed_ids=set(args.dismissed or []),
            limit=args.limit,
        )
        _write_jsonl(args.out, [dataclass_to_dict(s) for s in suggestions])
        return 0

    if args.command == "notify":
        engine = SuggestionEngine(config=load_config(args.config))
        ingredients = [parse_perishable_item(obj) for obj in _read_jsonl(args.ingredients)]
        leftovers = (
            [
                parse_perishable_item(obj, kind=ItemKind.LEFTOVER)
                for obj in _read_jsonl(args.leftovers)
            ]
            if args.leftovers
            else []
        )
        notifications = engine.notify(
            ingredients, leftovers, today=_parse_date(args.today) or date.today()
        )
        _write_jsonl(args.out, [dataclass_to_dict(n) for n in notifications])
        return 0

    if args.command == "coverage":
        engine = SuggestionEngine(lookup=_lookup_from_file(args.recipe_ingredients))
        pantry = [parse_perishable_item(obj) for obj in _read_jsonl(args.file)]
        recipes = [parse_recipe(obj) for obj in _read_jsonl(args.recipes)]
        coverage = engine.coverage(recipes, pantry)
        records = [
            {**dataclass_to_dict(result), "can_cook": result.can_cook}
            for result in coverage.values()
        ]
        _write_jsonl(args.out, records)
        return 0

    return 1


def _lookup_from_file(path: str | None) -> StaticIngredientLookup | None:
    if not path:
        return None
    return StaticIngredientLookup.from_rows(
        parse_recipe_ingredient(obj) for obj in _read_jsonl(path)
    )


def _read_preferences(path: str | None) -> UserPreferences | None:
    if not path:
        return None
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        return None
    return parse_preferences(data)


def _read_jsonl(path: str) -> list[dict[str, Any]]:
    records: list[dict[str, Any]] = []
    with Path(path).open("r", encoding="utf-8") as handle:
        for line in handle:
            line = line.strip()
            if not line:
                continue
            records.append(json.loads(line))
    return records


def _write_jsonl(path: str | Path, records: list[dict[str, Any]]) -> None:
    path = Path(path)
    with path.open("w", encoding="utf-8") as handle:
        for record in records:
            handle.write(json.dumps(record, ensure_ascii=False) + "\n")


def dataclass_to_dict(obj: Any) -> Any:
    if obj is None:
        return None
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        data = asdict(obj)
        return {key: dataclass_to_dict(value) for key, value in data.items()}
    if isinstance(obj, (set, frozenset)):
        return sorted(dataclass_to_dict(value) for value in obj)
    if isinstance(obj, (list, tuple)):
        return [dataclass_to_dict(value) for value in obj]
    if isinstance(obj, dict):
        return {key: dataclass_to_dict(value) for key, value in obj.items()}
    return obj


def parse_perishable_item(
    data: dict[str, Any], kind: ItemKind = ItemKind.INGREDIENT
) -> PerishableItem:
    threshold = data.get("low_stock_threshold")
    return PerishableItem(
        id=str(data.get("id", "")),
        name=data.get("name", ""),
        quantity=float(data.get("quantity", 1.0)),
        unit=data.get("unit", ""),
        category=data.get("category", ""),
        expiration_date=_parse_date(data.get("expiration_date")),
        kind=kind,
        low_stock_threshold=float(threshold) if threshold is not None else None,
    )


def parse_recipe(data: dict[str, Any]) -> Recipe:
    names = data.get("required_ingredient_names")
    return Recipe(
        id=str(data.get("id", "")),
        title=data.get("title", ""),
        description=data.get("description", "") or "",
        prep_time=int(data.get("prep_time", 0) or 0),
        cook_time=int(data.get("cook_time", 0) or 0),
        servings=int(data.get("servings", 1) or 1),
        difficulty=data.get("difficulty", "Medium"),
        cuisine_type=data.get("cuisine_type"),
        required_ingredient_names=tuple(str(n) for n in names) if names is not None else None,
    )


def parse_recipe_ingredient(data: dict[str, Any]) -> RecipeIngredient:
    return RecipeIngredient(
        recipe_id=str(data.get("recipe_id", "")),
        ingredient_name=data.get("ingredient_name", ""),
        quantity=float(data.get("quantity", 0.0) or 0.0),
        unit=data.get("unit", ""),
        notes=data.get("notes"),
    )


def parse_preferences(data: dict[str, Any]) -> UserPreferences:
    return UserPreferences(
        dietary_restrictions=frozenset(data.get("dietary_restrictions", []) or []),
        allergies=frozenset(data.get("allergies", []) or []),
        cooking_skill_level=data.get("cooking_skill_level", "Beginner"),
    )


def _parse_date(value: Any) -> Optional[date]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date_parser.isoparse(str(value)).date()
    except (ValueError, TypeError, OverflowError):
        logger.warning("Unparseable date %r, treating as undated", value)
        return None


if __name__ == "__main__":
    raise SystemExit(main())
