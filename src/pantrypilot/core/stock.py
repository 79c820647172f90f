"""Low-stock detection for pantry items."""

from __future__ import annotations

from typing import Iterable

from pantrypilot.core.models import PerishableItem, StockReport


class LowStockDetector:
    """Split items into out-of-stock and running-low, preserving input order."""

    def __init__(self, default_threshold: float = 1.0) -> None:
        self.default_threshold = default_threshold

    def detect(self, items: Iterable[PerishableItem]) -> StockReport:
        out_of_stock: list[PerishableItem] = []
        low_stock: list[PerishableItem] = []
        for item in items:
            threshold = (
                item.low_stock_threshold
                if item.low_stock_threshold is not None
                else self.default_threshold
            )
            if item.quantity <= 0:
                out_of_stock.append(item)
            elif item.quantity <= threshold:
                low_stock.append(item)
        return StockReport(out_of_stock=tuple(out_of_stock), low_stock=tuple(low_stock))
