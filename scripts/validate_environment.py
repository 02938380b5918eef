#!/usr/bin/env python3
"""Validate local Hostel Dada environment readiness."""

from __future__ import annotations

import importlib
import math
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from hosteldada.services.hostel_service import HostelWorkflowService

SEPARATOR_LINE = "=" * 44


def _print_result(name: str, success: bool, detail: str = "") -> tuple[bool, str]:
    if success:
        return True, f"[PASS] {name}{detail}"
    return False, f"[FAIL] {name}: {detail}"


def _check_packages() -> tuple[bool, str]:
    package_specs = [
        ("fastapi", "fastapi"),
        ("uvicorn", "uvicorn"),
        ("pydantic", "pydantic"),
        ("ortools", "ortools"),
        ("httpx", "httpx"),
        ("pytest", "pytest"),
    ]
    import_errors: list[str] = []
    for module_name, dist_name in package_specs:
        try:
            importlib.import_module(module_name)
            version(dist_name)
        except (ImportError, PackageNotFoundError) as exc:
            import_errors.append(f"{module_name} ({exc})")
    if import_errors:
        return _print_result(
            "Required packages",
            False,
            "missing/unimportable -> " + "; ".join(import_errors),
        )
    return _print_result("Required packages: all importable", True)


def _check_modules(service: HostelWorkflowService) -> list[tuple[bool, str]]:
    checks: list[tuple[bool, str]] = []

    ranked = [item.name for item in service.list_stock()]
    checks.append(
        _print_result("SnackCart ranking", ranked == ["Lays", "Kurkure", "Oreo"], f": {ranked}")
    )

    assignment = service.assign_rooms(strategy="greedy")
    checks.append(
        _print_result(
            "RoomieMatcher greedy",
            assignment.assignments == {"A1": "Alice", "A2": "Bob"},
            f": {assignment.assignments}",
        )
    )

    top = [dish.name for dish in service.top_dishes(3)]
    checks.append(_print_result("MessyMess ranking", top == ["Paneer", "Rice", "Chole"], f": {top}"))

    conflict = service.laundry.find_conflict(10, 11)
    checks.append(_print_result("LaundryLoad overlap check", conflict is not None))

    route = service.shortest_route()
    checks.append(
        _print_result(
            "HostelFixer shortest path",
            not math.isinf(route.distance) and route.distance == 3,
            f": {route.distance} via {route.nodes}",
        )
    )

    report = service.queue_report()
    checks.append(
        _print_result(
            "FoodFight queue report",
            report.minimum_count == report.window_size,
            f": best entry {report.best_entry_time}",
        )
    )
    return checks


def main() -> int:
    results: list[str] = []
    all_passed = True

    # CHECK 1: Python version >= 3.10
    if sys.version_info >= (3, 10):
        ok, line = _print_result("Python " + sys.version.split()[0], True)
    else:
        ok, line = _print_result(
            "Python version >= 3.10",
            False,
            f"found {sys.version.split()[0]}",
        )
    results.append(line)
    all_passed = all_passed and ok

    # CHECK 2: Required packages importable with versions
    ok, line = _check_packages()
    results.append(line)
    all_passed = all_passed and ok

    # CHECK 3: Every module answers on fresh seed data
    for ok, line in _check_modules(HostelWorkflowService()):
        results.append(line)
        all_passed = all_passed and ok

    print(SEPARATOR_LINE)
    print(" Hostel Dada Environment Validation")
    print(SEPARATOR_LINE)
    for line in results:
        print(f" {line}")
    print(SEPARATOR_LINE)
    if all_passed:
        print(" All checks passed. Environment is ready.")
        print(SEPARATOR_LINE)
        return 0
    print(" One or more checks failed.")
    print(SEPARATOR_LINE)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
