"""Environment-driven application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_version: str
    log_level: str
    admin_token: str | None
    low_stock_threshold: int
    queue_window_size: int
    top_dishes_limit: int
    matching_strategy: str
    solver_max_time_seconds: int
    solver_workers: int
    solver_random_seed: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings once per process; tests derive variants via replace()."""
    return Settings(
        app_name=os.getenv("HOSTEL_APP_NAME", "Hostel Dada"),
        app_version=os.getenv("HOSTEL_APP_VERSION", "1.0.0"),
        log_level=os.getenv("HOSTEL_LOG_LEVEL", "WARNING"),
        admin_token=os.getenv("HOSTEL_ADMIN_TOKEN") or None,
        low_stock_threshold=_env_int("HOSTEL_LOW_STOCK_THRESHOLD", 5),
        queue_window_size=_env_int("HOSTEL_QUEUE_WINDOW", 2),
        top_dishes_limit=_env_int("HOSTEL_TOP_DISHES", 3),
        matching_strategy=os.getenv("HOSTEL_MATCHING_STRATEGY", "greedy"),
        solver_max_time_seconds=_env_int("HOSTEL_SOLVER_MAX_TIME_SECONDS", 5),
        solver_workers=_env_int("HOSTEL_SOLVER_WORKERS", 1),
        solver_random_seed=_env_int("HOSTEL_SOLVER_RANDOM_SEED", 42),
    )
