"""Tests for core data models."""

from datetime import date

import pytest

from pantrypilot.core.models import (
    ClassifiedItem,
    CoverageResult,
    Difficulty,
    ExpirationBucket,
    ExpirationReport,
    ItemKind,
    PerishableItem,
    Recipe,
    Severity,
    SkillLevel,
)


def test_perishable_item_immutable() -> None:
    item = PerishableItem(id="i1", name="Milk", expiration_date=date(2026, 3, 1))
    with pytest.raises(Exception):  # FrozenInstanceError
        item.name = "Changed"


def test_recipe_defaults_leave_ingredients_unresolved() -> None:
    recipe = Recipe(id="r1", title="Pancakes")
    assert recipe.required_ingredient_names is None
    assert recipe.difficulty == Difficulty.MEDIUM


def test_enum_values() -> None:
    assert ItemKind.LEFTOVER.value == "leftover"
    assert [b.value for b in ExpirationBucket] == [
        "expired",
        "critical",
        "warning",
        "upcoming",
        "fresh",
    ]
    assert {s.value for s in Severity} == {"expired", "critical", "warning"}
    assert SkillLevel.EXPERT.value == "Expert"


def test_report_expiring_orders_tiers() -> None:
    def entry(item_id: str, bucket: ExpirationBucket, days: int) -> ClassifiedItem:
        return ClassifiedItem(PerishableItem(id=item_id, name=item_id), bucket, days)

    report = ExpirationReport(
        expired=(entry("e", ExpirationBucket.EXPIRED, -1),),
        critical=(entry("c", ExpirationBucket.CRITICAL, 1),),
        warning=(entry("w", ExpirationBucket.WARNING, 5),),
        upcoming=(entry("u", ExpirationBucket.UPCOMING, 10),),
    )
    assert [e.item.id for e in report.expiring()] == ["c", "w", "u"]
    assert [e.item.id for e in report.expiring(include_upcoming=False)] == ["c", "w"]
    assert [e.item.id for e in report.expiring(include_expired=True)] == ["e", "c", "w", "u"]
    assert report.bucket_of("w") == ExpirationBucket.WARNING
    assert report.bucket_of("missing") is None
    assert report.total_expiring == 3


def test_coverage_can_cook() -> None:
    assert CoverageResult("r1", 100, available=("eggs",)).can_cook
    assert not CoverageResult("r1", 50, available=("eggs",), missing=("milk",)).can_cook
    assert not CoverageResult("r1", 0).can_cook
