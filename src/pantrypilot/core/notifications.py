"""Composition of user-facing expiration and suggestion messages."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from pantrypilot.core.expiration import ExpirationClassifier, format_expiration_text
from pantrypilot.core.models import (
    ExpirationBucket,
    ItemKind,
    Notification,
    PerishableItem,
    Severity,
    Suggestion,
)

logger = logging.getLogger(__name__)

NOTIFYING_BUCKETS = {
    ExpirationBucket.EXPIRED: Severity.EXPIRED,
    ExpirationBucket.CRITICAL: Severity.CRITICAL,
    ExpirationBucket.WARNING: Severity.WARNING,
}


def compose_message(name: str, days_left: int, severity: Severity) -> str:
    phrase = format_expiration_text(days_left)
    phrase = phrase[0].lower() + phrase[1:]
    if severity == Severity.EXPIRED:
        return f"{name} {phrase}"
    return f"{name} {phrase} ({severity.value})"


def compose_suggestion_message(suggestion: Suggestion) -> str:
    """Push-style text nudging the user to cook a suggested recipe."""
    minutes = suggestion.estimated_prep_minutes
    matched = suggestion.matched_expiring_ingredient_names
    if matched:
        names = ", ".join(matched[:2])
        verb = "expires" if len(matched) == 1 else "expire"
        return (
            f'Cook "{suggestion.recipe_title}" today! Your {names} {verb} soon. '
            f"Ready in {minutes} min."
        )
    return f'Try "{suggestion.recipe_title}" - perfect for your pantry! Ready in {minutes} min.'


class NotificationComposer:
    """One notification per expired, critical, or warning item; nothing for upcoming or fresh."""

    def __init__(self, classifier: Optional[ExpirationClassifier] = None) -> None:
        self.classifier = classifier or ExpirationClassifier()

    def compose(
        self,
        items: Iterable[PerishableItem],
        today: date,
        kind: ItemKind = ItemKind.INGREDIENT,
    ) -> list[Notification]:
        notifications: list[Notification] = []
        for item in items:
            classified = self.classifier.classify_item(item, today)
            if classified is None:
                continue
            severity = NOTIFYING_BUCKETS.get(classified.bucket)
            if severity is None:
                continue
            notifications.append(
                Notification(
                    item_id=item.id,
                    item_name=item.name,
                    item_kind=kind,
                    severity=severity,
                    message=compose_message(item.name, classified.days_left, severity),
                    days_left=classified.days_left,
                )
            )
        return notifications

    def compose_all(
        self,
        ingredients: Iterable[PerishableItem],
        leftovers: Iterable[PerishableItem],
        today: date,
    ) -> list[Notification]:
        """Ingredient pass then leftover pass; the two are never deduplicated."""
        notifications = self.compose(ingredients, today, ItemKind.INGREDIENT)
        notifications.extend(self.compose(leftovers, today, ItemKind.LEFTOVER))
        logger.debug("Composed %d notifications", len(notifications))
        return notifications
