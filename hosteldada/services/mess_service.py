"""Mess menu ranking and the weekly dish planner."""

from __future__ import annotations

import heapq
from typing import Iterable, Mapping

from hosteldada.domain.models import Dish


class DishRanker:
    def __init__(self, dishes: Iterable[Dish], week_plan: Mapping[str, str]) -> None:
        self._dishes = list(dishes)
        self._week_plan = dict(week_plan)

    def top_dishes(self, k: int = 3) -> list[Dish]:
        """Best rated dishes first; equal ratings fall back to name, descending."""
        if k <= 0:
            raise ValueError("k must be > 0")
        return heapq.nlargest(k, self._dishes, key=lambda dish: (dish.rating, dish.name))

    def week_plan(self) -> list[tuple[str, str]]:
        return sorted(self._week_plan.items())
