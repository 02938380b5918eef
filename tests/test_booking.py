from __future__ import annotations

import pytest

from hosteldada.domain.models import Interval
from hosteldada.repository.seed_repository import SeedRepository
from hosteldada.services.booking_service import (
    BookingValidationError,
    IntervalBooker,
    SlotConflictError,
)


def _build_booker() -> IntervalBooker:
    return IntervalBooker(SeedRepository().list_laundry_slots())


def test_seed_slots_listed_in_insertion_order() -> None:
    assert _build_booker().list_slots() == [
        Interval(9, 10),
        Interval(10, 11),
        Interval(11, 12),
    ]


def test_identical_slot_conflicts() -> None:
    booker = _build_booker()

    with pytest.raises(SlotConflictError) as excinfo:
        booker.book(10, 11)

    assert excinfo.value.existing == Interval(10, 11)
    assert len(booker.list_slots()) == 3


@pytest.mark.parametrize("start,end", [(9, 12), (8, 10), (11, 13), (9, 11)])
def test_overlapping_slots_conflict(start: int, end: int) -> None:
    booker = _build_booker()

    with pytest.raises(SlotConflictError):
        booker.book(start, end)

    assert len(booker.list_slots()) == 3


def test_disjoint_slot_is_booked_and_retrievable() -> None:
    booker = _build_booker()

    booked = booker.book(12, 13)

    assert booked == Interval(12, 13)
    assert booker.list_slots()[-1] == Interval(12, 13)


def test_adjacent_slots_do_not_overlap() -> None:
    booker = _build_booker()

    booker.book(8, 9)
    booker.book(12, 14)

    assert booker.list_slots() == [
        Interval(9, 10),
        Interval(10, 11),
        Interval(11, 12),
        Interval(8, 9),
        Interval(12, 14),
    ]


@pytest.mark.parametrize("start,end", [(13, 12), (14, 14), (-1, 3), (23, 25)])
def test_malformed_slot_rejected(start: int, end: int) -> None:
    booker = _build_booker()

    with pytest.raises(BookingValidationError):
        booker.book(start, end)

    assert len(booker.list_slots()) == 3


def test_find_conflict_returns_none_for_free_slot() -> None:
    assert _build_booker().find_conflict(15, 16) is None
