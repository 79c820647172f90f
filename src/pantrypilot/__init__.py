"""pantrypilot: proactive "cook this before it spoils" suggestion and recipe-matching engine."""

__version__ = "0.1.0"

# Core exports
from pantrypilot.core.models import (
    PerishableItem,
    Recipe,
    RecipeIngredient,
    UserPreferences,
    ItemKind,
    ExpirationBucket,
    Severity,
    Difficulty,
    SkillLevel,
    ClassifiedItem,
    ExpirationReport,
    CoverageResult,
    ComplianceResult,
    Suggestion,
    Notification,
    StockReport,
)
from pantrypilot.core.interfaces import (
    IngredientLookup,
    IngredientMatcher,
    ComplianceChecker,
)
from pantrypilot.core.config import EngineConfig, ExpirationThresholds, load_config
from pantrypilot.core.expiration import (
    ExpirationClassifier,
    days_until_expiration,
    format_expiration_text,
)
from pantrypilot.core.matching import SubstringIngredientMatcher, ingredient_matches
from pantrypilot.core.compliance import KeywordComplianceFilter
from pantrypilot.core.skill import SkillFitScorer
from pantrypilot.core.scoring import SuggestionScorer
from pantrypilot.core.ranking import SuggestionRanker
from pantrypilot.core.notifications import NotificationComposer, compose_suggestion_message
from pantrypilot.core.stock import LowStockDetector
from pantrypilot.core.registry import StaticIngredientLookup
from pantrypilot.core.pipeline import SuggestionEngine, EvaluationResult

__all__ = [
    "PerishableItem",
    "Recipe",
    "RecipeIngredient",
    "UserPreferences",
    "ItemKind",
    "ExpirationBucket",
    "Severity",
    "Difficulty",
    "SkillLevel",
    "ClassifiedItem",
    "ExpirationReport",
    "CoverageResult",
    "ComplianceResult",
    "Suggestion",
    "Notification",
    "StockReport",
    "IngredientLookup",
    "IngredientMatcher",
    "ComplianceChecker",
    "EngineConfig",
    "ExpirationThresholds",
    "load_config",
    "ExpirationClassifier",
    "days_until_expiration",
    "format_expiration_text",
    "SubstringIngredientMatcher",
    "ingredient_matches",
    "KeywordComplianceFilter",
    "SkillFitScorer",
    "SuggestionScorer",
    "SuggestionRanker",
    "NotificationComposer",
    "compose_suggestion_message",
    "LowStockDetector",
    "StaticIngredientLookup",
    "SuggestionEngine",
    "EvaluationResult",
]
