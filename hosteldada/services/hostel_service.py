"""Session orchestration: one state object per toolkit module."""

from __future__ import annotations

from threading import RLock
from typing import Optional

from hosteldada.domain.models import (
    AssignmentResult,
    Dish,
    Interval,
    ProfitReport,
    QueueReport,
    Route,
    SaleRecord,
    StockItem,
    Task,
)
from hosteldada.domain.constraints import validate_window_size
from hosteldada.repository.seed_repository import (
    DEFAULT_PATH_DESTINATION,
    DEFAULT_PATH_SOURCE,
    SeedRepository,
)
from hosteldada.services.booking_service import IntervalBooker
from hosteldada.services.matching_service import BipartiteAssigner
from hosteldada.services.mess_service import DishRanker
from hosteldada.services.path_service import PathFinder
from hosteldada.services.queue_service import QueueValidationError, WindowCounter
from hosteldada.services.stock_service import StockRanker
from hosteldada.services.task_service import TaskPrioritizer
from hosteldada.utils.config import Settings, get_settings
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)


class HostelWorkflowService:
    """Owns the per-session module state built from fresh seed tables.

    Nothing here is process-global: two services never share stock, bookings
    or tasks.
    """

    def __init__(
        self,
        repository: Optional[SeedRepository] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._repository = repository or SeedRepository()
        self._lock = RLock()
        try:
            validate_window_size(self._settings.queue_window_size)
        except ValueError as exc:
            raise QueueValidationError(
                f"HOSTEL_QUEUE_WINDOW is invalid: {exc}"
            ) from exc

        self.stock = StockRanker(self._repository.list_stock())
        self.matching = BipartiteAssigner(
            students=self._repository.list_students(),
            rooms=self._repository.list_rooms(),
            settings=self._settings,
        )
        self.mess = DishRanker(
            dishes=self._repository.list_dishes(),
            week_plan=self._repository.get_week_plan(),
        )
        self.laundry = IntervalBooker(self._repository.list_laundry_slots())
        self.tasks = TaskPrioritizer()
        self.paths = PathFinder.from_edges(self._repository.list_campus_edges())
        self.queue = WindowCounter(
            entry_times=self._repository.list_mess_entry_times(),
            window=self._settings.queue_window_size,
        )
        self._repository.log_seed_summary()

    @property
    def settings(self) -> Settings:
        return self._settings

    # --- SnackCart ---

    def list_stock(self) -> list[StockItem]:
        with self._lock:
            return self.stock.rank()

    def purchase_snack(self, name: str, quantity: int) -> SaleRecord:
        with self._lock:
            return self.stock.purchase(name, quantity)

    def profit_report(self) -> ProfitReport:
        with self._lock:
            return self.stock.profit_report()

    def low_stock(self, threshold: Optional[int] = None) -> list[StockItem]:
        with self._lock:
            return self.stock.low_stock(
                threshold if threshold is not None else self._settings.low_stock_threshold
            )

    def search_snacks(self, prefix: str) -> list[StockItem]:
        with self._lock:
            return self.stock.search(prefix)

    # --- RoomieMatcher ---

    def assign_rooms(self, strategy: Optional[str] = None) -> AssignmentResult:
        return self.matching.run(strategy=strategy)

    # --- MessyMess ---

    def top_dishes(self, k: Optional[int] = None) -> list[Dish]:
        return self.mess.top_dishes(k if k is not None else self._settings.top_dishes_limit)

    def week_plan(self) -> list[tuple[str, str]]:
        return self.mess.week_plan()

    # --- LaundryLoad ---

    def list_laundry_slots(self) -> list[Interval]:
        with self._lock:
            return self.laundry.list_slots()

    def book_laundry_slot(self, start: int, end: int) -> Interval:
        with self._lock:
            return self.laundry.book(start, end)

    # --- HostelFixer ---

    def add_task(self, description: str, urgency: int) -> Task:
        with self._lock:
            return self.tasks.insert(description, urgency)

    def list_tasks(self) -> list[Task]:
        with self._lock:
            return self.tasks.list_by_urgency()

    def shortest_route(
        self,
        source: str = DEFAULT_PATH_SOURCE,
        destination: str = DEFAULT_PATH_DESTINATION,
    ) -> Route:
        return self.paths.shortest_route(source, destination)

    # --- FoodFight ---

    def queue_report(self) -> QueueReport:
        return self.queue.report()
