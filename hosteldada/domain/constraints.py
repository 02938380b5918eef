"""Domain-level validation rules shared by services and presentation layers."""

from __future__ import annotations

from typing import Sequence

from hosteldada.domain.models import Edge


MIN_HOUR = 0
MAX_HOUR = 24


def validate_interval_bounds(start: int, end: int) -> None:
    if not MIN_HOUR <= start <= MAX_HOUR or not MIN_HOUR <= end <= MAX_HOUR:
        raise ValueError(f"hours must be between {MIN_HOUR} and {MAX_HOUR}")
    if start >= end:
        raise ValueError("start hour must be less than end hour")


def validate_edge_weights(edges: Sequence[Edge]) -> None:
    for edge in edges:
        if edge.weight < 0:
            raise ValueError(
                f"edge {edge.source}-{edge.target} has negative weight {edge.weight}"
            )


def validate_window_size(window: int) -> None:
    if window <= 0:
        raise ValueError("window size must be > 0")


def validate_non_decreasing(values: Sequence[int]) -> None:
    for previous, current in zip(values, values[1:]):
        if current < previous:
            raise ValueError("entry times must be non-decreasing")


def validate_positive_quantity(quantity: int) -> None:
    if quantity <= 0:
        raise ValueError("quantity must be > 0")
