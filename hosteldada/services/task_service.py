"""Maintenance task queue ordered by urgency."""

from __future__ import annotations

import heapq
from itertools import count

from hosteldada.domain.models import Task
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)


class TaskValidationError(Exception):
    """Raised when a task description is invalid."""


class TaskPrioritizer:
    """Min-heap of tasks; lower urgency values surface first, ties keep insertion order."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Task]] = []
        self._sequence = count()

    def __len__(self) -> int:
        return len(self._heap)

    def insert(self, description: str, urgency: int) -> Task:
        description = description.strip()
        if not description:
            raise TaskValidationError("task description must be non-empty")
        task = Task(description=description, urgency=urgency)
        heapq.heappush(self._heap, (urgency, next(self._sequence), task))
        logger.info("Task queued | description=%s | urgency=%s", description, urgency)
        return task

    def list_by_urgency(self) -> list[Task]:
        # Pop from a copy so the queue itself stays intact.
        pending = list(self._heap)
        ordered: list[Task] = []
        while pending:
            _, _, task = heapq.heappop(pending)
            ordered.append(task)
        return ordered
