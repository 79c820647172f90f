"""Expiration bucketing for pantry items and leftovers."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable

from pantrypilot.core.config import ExpirationThresholds
from pantrypilot.core.models import (
    ClassifiedItem,
    ExpirationBucket,
    ExpirationReport,
    PerishableItem,
)

logger = logging.getLogger(__name__)


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def days_until_expiration(expiration_date: date | datetime, today: date | datetime) -> int:
    """
    Whole days from today's midnight to the expiration date's midnight.

    Both sides are truncated to midnight first, so the difference is an exact
    day count: 0 means "today", 1 "tomorrow", negative means expired.
    """
    return (_as_date(expiration_date) - _as_date(today)).days


def format_expiration_text(days: int) -> str:
    """Human-readable phrasing for a day count (e.g. 'Expires tomorrow')."""
    if days < 0:
        abs_days = abs(days)
        return f"Expired {abs_days} day{'s' if abs_days != 1 else ''} ago"
    if days == 0:
        return "Expires today"
    if days == 1:
        return "Expires tomorrow"
    return f"Expires in {days} days"


class ExpirationClassifier:
    """
    Pure classifier bucketing items by days until expiration.

    - days < 0: expired
    - 0..critical_days: critical
    - ..warning_days: warning
    - ..upcoming_days: upcoming
    - beyond: fresh
    """

    def __init__(self, thresholds: ExpirationThresholds | None = None) -> None:
        self.thresholds = thresholds or ExpirationThresholds()

    def bucket_for(self, days_left: int) -> ExpirationBucket:
        if days_left < 0:
            return ExpirationBucket.EXPIRED
        if days_left <= self.thresholds.critical_days:
            return ExpirationBucket.CRITICAL
        if days_left <= self.thresholds.warning_days:
            return ExpirationBucket.WARNING
        if days_left <= self.thresholds.upcoming_days:
            return ExpirationBucket.UPCOMING
        return ExpirationBucket.FRESH

    def classify_item(self, item: PerishableItem, today: date) -> ClassifiedItem | None:
        """Classify a single item; None when it carries no expiration date."""
        if item.expiration_date is None:
            return None
        days_left = days_until_expiration(item.expiration_date, today)
        return ClassifiedItem(item=item, bucket=self.bucket_for(days_left), days_left=days_left)

    def classify(self, items: Iterable[PerishableItem], today: date) -> ExpirationReport:
        groups: dict[ExpirationBucket, list[ClassifiedItem]] = {b: [] for b in ExpirationBucket}
        undated = 0
        for item in items:
            classified = self.classify_item(item, today)
            if classified is None:
                undated += 1
                continue
            groups[classified.bucket].append(classified)

        # list.sort is stable: equal dates keep insertion order.
        for entries in groups.values():
            entries.sort(key=lambda entry: entry.days_left)

        report = ExpirationReport(
            expired=tuple(groups[ExpirationBucket.EXPIRED]),
            critical=tuple(groups[ExpirationBucket.CRITICAL]),
            warning=tuple(groups[ExpirationBucket.WARNING]),
            upcoming=tuple(groups[ExpirationBucket.UPCOMING]),
            fresh=tuple(groups[ExpirationBucket.FRESH]),
        )
        logger.debug(
            "Classified items: expired=%d critical=%d warning=%d upcoming=%d fresh=%d undated=%d",
            len(report.expired),
            len(report.critical),
            len(report.warning),
            len(report.upcoming),
            len(report.fresh),
            undated,
        )
        return report
