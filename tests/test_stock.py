from __future__ import annotations

import pytest

from hosteldada.domain.models import SaleRecord, StockItem
from hosteldada.repository.seed_repository import SeedRepository
from hosteldada.services.stock_service import (
    OutOfStockError,
    StockRanker,
    StockValidationError,
)


def _build_ranker() -> StockRanker:
    return StockRanker(SeedRepository().list_stock())


def test_rank_orders_seed_stock_by_expiry() -> None:
    ranked = _build_ranker().rank()

    assert [item.name for item in ranked] == ["Lays", "Kurkure", "Oreo"]
    expiries = [item.expiry for item in ranked]
    assert expiries == sorted(expiries)


def test_rank_keeps_insertion_order_for_equal_expiry() -> None:
    ranker = StockRanker(
        [
            StockItem("Bhujia", 3, 10, "2025-07-01"),
            StockItem("Chips", 3, 10, "2025-07-01"),
            StockItem("Apple", 3, 10, "2025-07-01"),
        ]
    )

    assert [item.name for item in ranker.rank()] == ["Bhujia", "Chips", "Apple"]


def test_purchase_decrements_quantity_and_records_profit() -> None:
    ranker = _build_ranker()

    record = ranker.purchase("Kurkure", 3)

    assert record == SaleRecord(name="Kurkure", profit=45)
    assert ranker.get_item("Kurkure").quantity == 7
    assert ranker.sales_history == [SaleRecord(name="Kurkure", profit=45)]


def test_purchase_more_than_available_leaves_stock_unchanged() -> None:
    ranker = _build_ranker()

    with pytest.raises(OutOfStockError):
        ranker.purchase("Lays", 10)

    assert ranker.get_item("Lays").quantity == 5
    assert ranker.sales_history == []


def test_purchase_entire_stock_reaches_zero() -> None:
    ranker = _build_ranker()

    ranker.purchase("Lays", 5)

    assert ranker.get_item("Lays").quantity == 0
    with pytest.raises(OutOfStockError):
        ranker.purchase("Lays", 1)


def test_purchase_unknown_item_raises() -> None:
    with pytest.raises(OutOfStockError):
        _build_ranker().purchase("Maggi", 1)


@pytest.mark.parametrize("quantity", [0, -2])
def test_purchase_non_positive_quantity_raises(quantity: int) -> None:
    ranker = _build_ranker()

    with pytest.raises(StockValidationError):
        ranker.purchase("Oreo", quantity)

    assert ranker.get_item("Oreo").quantity == 8


def test_profit_report_sorted_descending_with_total() -> None:
    ranker = _build_ranker()
    ranker.purchase("Kurkure", 1)
    ranker.purchase("Oreo", 2)
    ranker.purchase("Lays", 1)

    report = ranker.profit_report()

    assert [record.profit for record in report.records] == [50, 20, 15]
    assert report.total_profit == 85


def test_profit_report_empty_history() -> None:
    report = _build_ranker().profit_report()

    assert report.records == []
    assert report.total_profit == 0


def test_low_stock_lists_items_at_or_below_threshold() -> None:
    ranker = _build_ranker()
    assert [item.name for item in ranker.low_stock(5)] == ["Lays"]

    ranker.purchase("Oreo", 4)

    assert [item.name for item in ranker.low_stock(5)] == ["Oreo", "Lays"]


def test_low_stock_lists_scarcest_first() -> None:
    ranker = StockRanker(
        [
            StockItem("Bourbon", 4, 20, "2025-07-01"),
            StockItem("Maggi", 1, 15, "2025-12-01"),
            StockItem("Parle", 1, 10, "2025-09-01"),
        ]
    )

    assert [item.name for item in ranker.low_stock(5)] == ["Parle", "Maggi", "Bourbon"]


def test_search_matches_prefix_case_insensitively() -> None:
    ranker = _build_ranker()

    assert [item.name for item in ranker.search("ku")] == ["Kurkure"]
    assert [item.name for item in ranker.search("OR")] == ["Oreo"]
    assert ranker.search("zz") == []
    assert len(ranker.search("  ")) == 3


def test_duplicate_stock_names_rejected() -> None:
    with pytest.raises(StockValidationError):
        StockRanker(
            [
                StockItem("Lays", 1, 20, "2025-08-10"),
                StockItem("Lays", 2, 20, "2025-08-11"),
            ]
        )
