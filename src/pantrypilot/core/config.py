"""Engine configuration: named expiration tiers shared by every stage."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExpirationThresholds:
    """
    Named day-count tiers.

    The same type describes the classifier's buckets and the scorer's
    urgency tiers, so both are validated and loaded the same way.
    """

    critical_days: int = 3
    warning_days: int = 7
    upcoming_days: int = 14

    def __post_init__(self) -> None:
        if not 0 <= self.critical_days <= self.warning_days <= self.upcoming_days:
            raise ValueError(
                "Thresholds must satisfy 0 <= critical_days <= warning_days <= upcoming_days, "
                f"got {self.critical_days}/{self.warning_days}/{self.upcoming_days}"
            )


DEFAULT_SUGGESTION_THRESHOLDS = ExpirationThresholds(
    critical_days=1, warning_days=3, upcoming_days=7
)


def _thresholds_from(raw: Any, key: str, defaults: ExpirationThresholds) -> ExpirationThresholds:
    raw = raw or {}
    if not isinstance(raw, dict):
        raise ValueError(f"'{key}' must be a mapping")
    return ExpirationThresholds(
        critical_days=int(raw.get("critical_days", defaults.critical_days)),
        warning_days=int(raw.get("warning_days", defaults.warning_days)),
        upcoming_days=int(raw.get("upcoming_days", defaults.upcoming_days)),
    )


@dataclass(frozen=True)
class EngineConfig:
    thresholds: ExpirationThresholds = field(default_factory=ExpirationThresholds)
    """Bucket tiers for the expiration report and notifications."""

    suggestion_thresholds: ExpirationThresholds = field(
        default_factory=lambda: DEFAULT_SUGGESTION_THRESHOLDS
    )
    """Urgency tiers weighting expiring items in suggestion scoring."""

    min_match_score: float = 0.3
    """Suggestions scoring at or below this are dropped."""

    max_suggestions: int = 5

    include_upcoming_in_suggestions: bool = False
    """Whether items past the suggestion tiers but within thresholds.upcoming_days count."""

    fuzzy_match_threshold: Optional[int] = None
    """rapidfuzz WRatio cut-off for the matcher fallback; None disables it."""

    @property
    def suggestion_horizon_days(self) -> int:
        """Last day count that may still drive a suggestion."""
        if self.include_upcoming_in_suggestions:
            return max(self.thresholds.upcoming_days, self.suggestion_thresholds.upcoming_days)
        return self.suggestion_thresholds.upcoming_days

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> "EngineConfig":
        data = data or {}
        try:
            thresholds = _thresholds_from(
                data.get("thresholds"), "thresholds", ExpirationThresholds()
            )
            suggestion_thresholds = _thresholds_from(
                data.get("suggestion_thresholds"),
                "suggestion_thresholds",
                DEFAULT_SUGGESTION_THRESHOLDS,
            )
            fuzzy = data.get("fuzzy_match_threshold")
            config = cls(
                thresholds=thresholds,
                suggestion_thresholds=suggestion_thresholds,
                min_match_score=float(data.get("min_match_score", 0.3)),
                max_suggestions=int(data.get("max_suggestions", 5)),
                include_upcoming_in_suggestions=bool(
                    data.get("include_upcoming_in_suggestions", False)
                ),
                fuzzy_match_threshold=int(fuzzy) if fuzzy is not None else None,
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid engine config: {exc}") from exc

        known = {
            "thresholds",
            "suggestion_thresholds",
            "min_match_score",
            "max_suggestions",
            "include_upcoming_in_suggestions",
            "fuzzy_match_threshold",
        }
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug("Ignoring unknown config keys: %s", ", ".join(unknown))
        return config


def load_config(path: str | Path | None) -> EngineConfig:
    """
    Load an EngineConfig from a YAML file.

    A missing path or an empty document yields the defaults.
    """
    if not path:
        return EngineConfig()
    file_path = Path(path)
    if not file_path.exists():
        logger.debug("Config file %s not found, using defaults", file_path)
        return EngineConfig()
    with file_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {file_path} must contain a mapping")
    return EngineConfig.from_mapping(data)
