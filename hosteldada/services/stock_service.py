"""Snack cart stock ranking, purchases and profit tracking."""

from __future__ import annotations

import heapq
from typing import Iterable

from hosteldada.domain.constraints import validate_positive_quantity
from hosteldada.domain.models import ProfitReport, SaleRecord, StockItem
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)


class StockValidationError(Exception):
    """Raised when purchase inputs are invalid."""


class OutOfStockError(Exception):
    """Raised when an item is unknown or cannot cover the requested quantity."""


class StockRanker:
    """Keeps snack stock ordered by expiry and records every sale.

    Items are keyed by name; the insertion order of the seed table breaks
    ties between equal expiry dates.
    """

    def __init__(self, items: Iterable[StockItem]) -> None:
        self._items: dict[str, StockItem] = {}
        for item in items:
            if item.name in self._items:
                raise StockValidationError(f"duplicate stock item '{item.name}'")
            if item.quantity < 0:
                raise StockValidationError(f"stock item '{item.name}' has negative quantity")
            self._items[item.name] = item
        self._sales: list[SaleRecord] = []

    def get_item(self, name: str) -> StockItem | None:
        return self._items.get(name)

    @property
    def sales_history(self) -> list[SaleRecord]:
        return list(self._sales)

    def rank(self) -> list[StockItem]:
        """Return items with the earliest expiry first."""
        heap: list[tuple[str, int, StockItem]] = []
        for sequence, item in enumerate(self._items.values()):
            heapq.heappush(heap, (item.expiry, sequence, item))
        ranked: list[StockItem] = []
        while heap:
            _, _, item = heapq.heappop(heap)
            ranked.append(item)
        return ranked

    def purchase(self, name: str, quantity: int) -> SaleRecord:
        try:
            validate_positive_quantity(quantity)
        except ValueError as exc:
            raise StockValidationError(str(exc)) from exc

        item = self._items.get(name)
        if item is None:
            logger.info("Purchase rejected | item=%s | reason=unknown_item", name)
            raise OutOfStockError(f"'{name}' is not stocked")
        if quantity > item.quantity:
            logger.info(
                "Purchase rejected | item=%s | requested=%s | available=%s",
                name,
                quantity,
                item.quantity,
            )
            raise OutOfStockError(
                f"only {item.quantity} x {name} left, cannot sell {quantity}"
            )

        item.quantity -= quantity
        record = SaleRecord(name=name, profit=quantity * item.price)
        self._sales.append(record)
        logger.info(
            "Purchase completed | item=%s | quantity=%s | profit=%s | remaining=%s",
            name,
            quantity,
            record.profit,
            item.quantity,
        )
        return record

    def profit_report(self) -> ProfitReport:
        # sorted() is stable, so equal profits keep their sale order
        records = sorted(self._sales, key=lambda record: record.profit, reverse=True)
        return ProfitReport(
            records=records,
            total_profit=sum(record.profit for record in records),
        )

    def low_stock(self, threshold: int = 5) -> list[StockItem]:
        if threshold < 0:
            raise StockValidationError("low stock threshold must be >= 0")
        # Scarcest first; equal quantities keep expiry order.
        ranked = self.rank()
        low = [
            (item.quantity, position, item)
            for position, item in enumerate(ranked)
            if item.quantity <= threshold
        ]
        return [item for _, _, item in sorted(low)]

    def search(self, prefix: str) -> list[StockItem]:
        needle = prefix.strip().lower()
        if not needle:
            return self.rank()
        return [item for item in self.rank() if item.name.lower().startswith(needle)]
