"""Mess queue prediction over fixed-size windows of entry times."""

from __future__ import annotations

from typing import Sequence

from hosteldada.domain.constraints import validate_non_decreasing, validate_window_size
from hosteldada.domain.models import QueueReport, QueueWindow
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)


class QueueValidationError(Exception):
    """Raised when entry times or the window size are invalid."""


def count_windows(times: Sequence[int], window: int) -> QueueReport:
    """Count samples in every run of `window` consecutive entries.

    Windows are index based, so every count equals `window`; the report is a
    fixed-size batch summary and the best entry time is the start of the first
    window holding the minimum count.
    """
    try:
        validate_window_size(window)
        validate_non_decreasing(times)
    except ValueError as exc:
        raise QueueValidationError(str(exc)) from exc

    if len(times) < window:
        logger.info("Queue report empty | samples=%s | window=%s", len(times), window)
        return QueueReport(window_size=window)

    prefix = [0] * (len(times) + 1)
    for index in range(len(times)):
        prefix[index + 1] = prefix[index] + 1

    windows: list[QueueWindow] = []
    best_entry_time = times[0]
    minimum_count = len(times)
    for index in range(len(times) - window + 1):
        count = prefix[index + window] - prefix[index]
        windows.append(
            QueueWindow(
                start_time=times[index],
                end_time=times[index + window - 1],
                count=count,
            )
        )
        if count < minimum_count:
            minimum_count = count
            best_entry_time = times[index]

    return QueueReport(
        window_size=window,
        windows=windows,
        best_entry_time=best_entry_time,
        minimum_count=minimum_count,
    )


class WindowCounter:
    def __init__(self, entry_times: Sequence[int], window: int) -> None:
        self._entry_times = list(entry_times)
        self._window = window

    @property
    def entry_times(self) -> list[int]:
        return list(self._entry_times)

    def report(self) -> QueueReport:
        return count_windows(self._entry_times, self._window)
