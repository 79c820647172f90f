"""Tests for low-stock detection."""

from pantrypilot.core.models import PerishableItem
from pantrypilot.core.stock import LowStockDetector


def test_detect_splits_out_and_low() -> None:
    items = [
        PerishableItem(id="1", name="Rice", quantity=0),
        PerishableItem(id="2", name="Eggs", quantity=1),
        PerishableItem(id="3", name="Flour", quantity=3),
        PerishableItem(id="4", name="Butter", quantity=2, low_stock_threshold=2),
        PerishableItem(id="5", name="Oil", quantity=-1),
    ]
    report = LowStockDetector().detect(items)
    assert [i.name for i in report.out_of_stock] == ["Rice", "Oil"]
    assert [i.name for i in report.low_stock] == ["Eggs", "Butter"]
    assert report.total == 4


def test_custom_default_threshold() -> None:
    items = [PerishableItem(id="1", name="Flour", quantity=3)]
    assert LowStockDetector(default_threshold=5).detect(items).low_stock == tuple(items)
    assert LowStockDetector().detect([]).total == 0
