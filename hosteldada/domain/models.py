"""Domain models for the hostel toolkit modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class StockItem:
    name: str
    quantity: int
    price: int
    expiry: str


@dataclass(frozen=True)
class SaleRecord:
    name: str
    profit: int


@dataclass(frozen=True)
class ProfitReport:
    records: list[SaleRecord]
    total_profit: int


@dataclass(frozen=True)
class Student:
    name: str
    preferences: tuple[str, ...] = ()


@dataclass(frozen=True)
class AssignmentResult:
    assignments: dict[str, str]
    unassigned_students: list[str]
    strategy: str


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    weight: float


@dataclass(frozen=True)
class Route:
    source: str
    destination: str
    nodes: list[str]
    distance: float

    @property
    def reachable(self) -> bool:
        return bool(self.nodes)


@dataclass(frozen=True)
class Interval:
    start: int
    end: int

    def overlaps(self, other: Interval) -> bool:
        return not (self.end <= other.start or self.start >= other.end)


@dataclass(frozen=True)
class QueueWindow:
    start_time: int
    end_time: int
    count: int


@dataclass(frozen=True)
class QueueReport:
    window_size: int
    windows: list[QueueWindow] = field(default_factory=list)
    best_entry_time: Optional[int] = None
    minimum_count: Optional[int] = None


@dataclass(frozen=True)
class Task:
    description: str
    urgency: int


@dataclass(frozen=True)
class Dish:
    name: str
    rating: int
