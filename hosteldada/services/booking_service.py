"""Laundry slot booking with overlap detection."""

from __future__ import annotations

from typing import Iterable

from hosteldada.domain.constraints import validate_interval_bounds
from hosteldada.domain.models import Interval
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)


class BookingValidationError(Exception):
    """Raised when a requested slot is malformed."""


class SlotConflictError(Exception):
    """Raised when a requested slot overlaps an existing booking."""

    def __init__(self, requested: Interval, existing: Interval) -> None:
        super().__init__(
            f"slot {requested.start}-{requested.end} clashes with "
            f"{existing.start}-{existing.end}"
        )
        self.requested = requested
        self.existing = existing


class IntervalBooker:
    """Half-open hour intervals, kept in booking order."""

    def __init__(self, slots: Iterable[Interval] = ()) -> None:
        self._slots: list[Interval] = []
        for slot in slots:
            self.book(slot.start, slot.end)

    def find_conflict(self, start: int, end: int) -> Interval | None:
        requested = Interval(start=start, end=end)
        for slot in self._slots:
            if requested.overlaps(slot):
                return slot
        return None

    def book(self, start: int, end: int) -> Interval:
        try:
            validate_interval_bounds(start, end)
        except ValueError as exc:
            raise BookingValidationError(str(exc)) from exc

        requested = Interval(start=start, end=end)
        conflict = self.find_conflict(start, end)
        if conflict is not None:
            logger.info(
                "Booking rejected | requested=%s-%s | existing=%s-%s",
                start,
                end,
                conflict.start,
                conflict.end,
            )
            raise SlotConflictError(requested=requested, existing=conflict)

        self._slots.append(requested)
        logger.info("Booking accepted | slot=%s-%s | total_slots=%s", start, end, len(self._slots))
        return requested

    def list_slots(self) -> list[Interval]:
        return list(self._slots)
