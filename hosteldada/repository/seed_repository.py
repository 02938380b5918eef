"""Repository layer responsible for the in-memory seed tables."""

from __future__ import annotations

from hosteldada.domain.models import Dish, Edge, Interval, StockItem, Student
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)


_STOCK_ROWS: tuple[tuple[str, int, int, str], ...] = (
    ("Kurkure", 10, 15, "2025-09-01"),
    ("Lays", 5, 20, "2025-08-10"),
    ("Oreo", 8, 25, "2025-10-05"),
)

_STUDENT_ROWS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Alice", ("A1",)),
    ("Bob", ("A2",)),
    ("Charlie", ("A1", "A2")),
    ("Daisy", ("A2",)),
)

_ROOM_IDS: tuple[str, ...] = ("A1", "A2")

_CAMPUS_EDGES: tuple[tuple[str, str, int], ...] = (
    ("Gate", "Mess", 2),
    ("Gate", "Laundry", 4),
    ("Mess", "Laundry", 1),
)

_LAUNDRY_SLOTS: tuple[tuple[int, int], ...] = ((9, 10), (10, 11), (11, 12))

_MESS_ENTRY_TIMES: tuple[int, ...] = (1, 2, 2, 3, 4, 4, 5)

_DISH_ROWS: tuple[tuple[str, int], ...] = (
    ("Paneer", 5),
    ("Dal", 3),
    ("Rice", 4),
    ("Aloo", 2),
    ("Chole", 4),
)

_WEEK_PLAN: tuple[tuple[str, str], ...] = (
    ("Mon", "Paneer"),
    ("Tue", "Dal"),
    ("Wed", "Rice"),
    ("Thu", "Aloo"),
    ("Fri", "Chole"),
)

DEFAULT_PATH_SOURCE = "Gate"
DEFAULT_PATH_DESTINATION = "Laundry"


class SeedRepository:
    """Hands out fresh copies of every seed table.

    Each call builds new objects, so a module session can mutate its state
    without leaking into another session.
    """

    def list_stock(self) -> list[StockItem]:
        return [
            StockItem(name=name, quantity=quantity, price=price, expiry=expiry)
            for name, quantity, price, expiry in _STOCK_ROWS
        ]

    def list_students(self) -> list[Student]:
        return [
            Student(name=name, preferences=preferences)
            for name, preferences in _STUDENT_ROWS
        ]

    def list_rooms(self) -> list[str]:
        return list(_ROOM_IDS)

    def list_campus_edges(self) -> list[Edge]:
        return [
            Edge(source=source, target=target, weight=weight)
            for source, target, weight in _CAMPUS_EDGES
        ]

    def list_laundry_slots(self) -> list[Interval]:
        return [Interval(start=start, end=end) for start, end in _LAUNDRY_SLOTS]

    def list_mess_entry_times(self) -> list[int]:
        return list(_MESS_ENTRY_TIMES)

    def list_dishes(self) -> list[Dish]:
        return [Dish(name=name, rating=rating) for name, rating in _DISH_ROWS]

    def get_week_plan(self) -> dict[str, str]:
        return dict(_WEEK_PLAN)

    def log_seed_summary(self) -> None:
        logger.info(
            (
                "Seed tables loaded | stock=%s | students=%s | rooms=%s | edges=%s | "
                "slots=%s | entry_times=%s | dishes=%s"
            ),
            len(_STOCK_ROWS),
            len(_STUDENT_ROWS),
            len(_ROOM_IDS),
            len(_CAMPUS_EDGES),
            len(_LAUNDRY_SLOTS),
            len(_MESS_ENTRY_TIMES),
            len(_DISH_ROWS),
        )
