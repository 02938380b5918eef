"""Tests for the shared domain validation rules."""

from __future__ import annotations

import pytest

from hosteldada.domain.constraints import (
    validate_edge_weights,
    validate_interval_bounds,
    validate_non_decreasing,
    validate_positive_quantity,
    validate_window_size,
)
from hosteldada.domain.models import Edge


# --- interval bounds ---

def test_valid_interval_passes() -> None:
    validate_interval_bounds(9, 10)


def test_full_day_interval_passes() -> None:
    """Both boundary hours are accepted."""
    validate_interval_bounds(0, 24)


def test_interval_start_after_end_raises() -> None:
    with pytest.raises(ValueError):
        validate_interval_bounds(12, 11)


def test_empty_interval_raises() -> None:
    with pytest.raises(ValueError):
        validate_interval_bounds(11, 11)


def test_interval_hour_above_day_raises() -> None:
    with pytest.raises(ValueError):
        validate_interval_bounds(20, 25)


# --- edge weights ---

def test_zero_weight_edge_passes() -> None:
    validate_edge_weights([Edge("Gate", "Mess", 0)])


def test_negative_weight_edge_raises() -> None:
    with pytest.raises(ValueError):
        validate_edge_weights([Edge("Gate", "Mess", 2), Edge("Mess", "Laundry", -1)])


# --- windows and sequences ---

def test_window_size_zero_raises() -> None:
    with pytest.raises(ValueError):
        validate_window_size(0)


def test_non_decreasing_with_repeats_passes() -> None:
    validate_non_decreasing([1, 2, 2, 3])


def test_empty_sequence_passes() -> None:
    validate_non_decreasing([])


def test_decreasing_sequence_raises() -> None:
    with pytest.raises(ValueError):
        validate_non_decreasing([1, 3, 2])


# --- quantity ---

def test_zero_quantity_raises() -> None:
    with pytest.raises(ValueError):
        validate_positive_quantity(0)
