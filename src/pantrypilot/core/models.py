"""Core immutable data models for pantry items, recipes, and engine outputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Union


class ItemKind(str, Enum):
    """Whether a perishable item came from the pantry or is a leftover."""

    INGREDIENT = "ingredient"
    LEFTOVER = "leftover"


class ExpirationBucket(str, Enum):
    """Discrete expiration urgency tier."""

    EXPIRED = "expired"
    CRITICAL = "critical"
    WARNING = "warning"
    UPCOMING = "upcoming"
    FRESH = "fresh"


class Severity(str, Enum):
    """Notification severity; only the three urgent buckets ever notify."""

    EXPIRED = "expired"
    CRITICAL = "critical"
    WARNING = "warning"


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class SkillLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


@dataclass(frozen=True)
class PerishableItem:
    """
    Immutable snapshot of a pantry ingredient or a leftover.

    Supplied by the caller; the engine never mutates or persists it.
    """

    id: str
    """Caller-side identifier, echoed back in notifications."""

    name: str
    """Display name as entered by the user (original casing preserved)."""

    quantity: float = 1.0
    unit: str = ""
    category: str = ""

    expiration_date: Optional[date] = None
    """Items without a date are never classified as expiring."""

    kind: ItemKind = ItemKind.INGREDIENT

    low_stock_threshold: Optional[float] = None
    """Per-item low-stock override; falls back to the detector default."""


@dataclass(frozen=True)
class Recipe:
    """
    Immutable recipe record.

    required_ingredient_names is None until resolved through an
    IngredientLookup; an empty tuple means resolved with nothing known.
    """

    id: str
    title: str
    description: str = ""
    prep_time: int = 0
    cook_time: int = 0
    servings: int = 1
    difficulty: Union[Difficulty, str] = Difficulty.MEDIUM
    cuisine_type: Optional[str] = None
    required_ingredient_names: Optional[tuple[str, ...]] = None


@dataclass(frozen=True)
class RecipeIngredient:
    """A single ingredient row belonging to a recipe."""

    recipe_id: str
    ingredient_name: str
    quantity: float = 0.0
    unit: str = ""
    notes: Optional[str] = None


@dataclass(frozen=True)
class UserPreferences:
    dietary_restrictions: frozenset[str] = field(default_factory=frozenset)
    allergies: frozenset[str] = field(default_factory=frozenset)
    cooking_skill_level: Union[SkillLevel, str] = SkillLevel.BEGINNER


@dataclass(frozen=True)
class ClassifiedItem:
    """A perishable item tagged with its bucket and day count."""

    item: PerishableItem
    bucket: ExpirationBucket
    days_left: int


@dataclass(frozen=True)
class ExpirationReport:
    """
    Output of the ExpirationClassifier.

    Each bucket is ordered soonest-first; undated items appear nowhere.
    """

    expired: tuple[ClassifiedItem, ...] = ()
    critical: tuple[ClassifiedItem, ...] = ()
    warning: tuple[ClassifiedItem, ...] = ()
    upcoming: tuple[ClassifiedItem, ...] = ()
    fresh: tuple[ClassifiedItem, ...] = ()

    def bucket(self, bucket: ExpirationBucket) -> tuple[ClassifiedItem, ...]:
        return getattr(self, bucket.value)

    def expiring(
        self, include_upcoming: bool = True, include_expired: bool = False
    ) -> list[ClassifiedItem]:
        """Return urgent items, most urgent tier first."""
        entries: list[ClassifiedItem] = []
        if include_expired:
            entries.extend(self.expired)
        entries.extend(self.critical)
        entries.extend(self.warning)
        if include_upcoming:
            entries.extend(self.upcoming)
        return entries

    def bucket_of(self, item_id: str) -> Optional[ExpirationBucket]:
        for bucket in ExpirationBucket:
            for entry in self.bucket(bucket):
                if entry.item.id == item_id:
                    return bucket
        return None

    @property
    def total_expiring(self) -> int:
        return len(self.expired) + len(self.critical) + len(self.warning)


@dataclass(frozen=True)
class CoverageResult:
    """How much of a recipe the current pantry can satisfy."""

    recipe_id: str
    match_percentage: int
    available: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()

    @property
    def can_cook(self) -> bool:
        return bool(self.available) and not self.missing


@dataclass
class ComplianceResult:
    """Output of a dietary compliance check."""

    is_compliant: bool
    reasons: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Suggestion:
    """
    Derived, ephemeral "cook this soon" suggestion.

    Recomputed on every evaluation and never persisted by the engine.
    """

    id: str
    """Stable per recipe ("suggestion-<recipe_id>") so callers can key dismissals."""

    recipe_id: str
    recipe_title: str
    priority: int
    """Unbounded ordering key; higher means more urgent."""

    match_score: float
    """Heuristic quality in [0, 1], used as a minimum-quality filter."""

    reason: str
    matched_expiring_ingredient_names: tuple[str, ...] = ()
    estimated_prep_minutes: int = 0
    difficulty: str = ""


@dataclass(frozen=True)
class Notification:
    """One user-facing expiration alert for a single item."""

    item_id: str
    item_name: str
    item_kind: ItemKind
    severity: Severity
    message: str
    days_left: int


@dataclass(frozen=True)
class StockReport:
    out_of_stock: tuple[PerishableItem, ...] = ()
    low_stock: tuple[PerishableItem, ...] = ()

    @property
    def total(self) -> int:
        return len(self.out_of_stock) + len(self.low_stock)
