"""Student to room assignment: first-come greedy matching with an opt-in CP-SAT mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence

from ortools.sat.python import cp_model

from hosteldada.domain.models import AssignmentResult, Student
from hosteldada.utils.config import Settings, get_settings
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)

GREEDY_STRATEGY = "greedy"
MAXIMUM_STRATEGY = "maximum"
SUPPORTED_STRATEGIES = (GREEDY_STRATEGY, MAXIMUM_STRATEGY)


class AssignmentValidationError(Exception):
    """Raised when assignment inputs are invalid."""


@dataclass(frozen=True)
class BuildArtifacts:
    model: Any
    variables: dict[tuple[str, str], Any]


def _validate_inputs(
    students: Sequence[str],
    strategy: str,
) -> None:
    if strategy not in SUPPORTED_STRATEGIES:
        raise AssignmentValidationError(
            f"strategy must be one of {', '.join(SUPPORTED_STRATEGIES)}"
        )
    if len(set(students)) != len(students):
        raise AssignmentValidationError("student names must be unique")


def greedy_assign(
    *,
    students: Sequence[str],
    rooms: Iterable[str],
    preferences: Mapping[str, Sequence[str]],
) -> AssignmentResult:
    """Give each student, in order, the first free room on its list.

    Earlier decisions are never revisited, so this does not always find a
    maximum matching.
    """
    available_rooms = set(rooms)
    assignments: dict[str, str] = {}
    unassigned: list[str] = []

    for student in students:
        for room in preferences.get(student, ()):
            if room in available_rooms and room not in assignments:
                assignments[room] = student
                break
        else:
            unassigned.append(student)

    return AssignmentResult(
        assignments=assignments,
        unassigned_students=unassigned,
        strategy=GREEDY_STRATEGY,
    )


def build_model(
    *,
    students: Sequence[str],
    rooms: Iterable[str],
    preferences: Mapping[str, Sequence[str]],
) -> BuildArtifacts:
    """Build a CP-SAT model that maximizes the number of matched students."""
    model = cp_model.CpModel()
    room_set = set(rooms)
    variables: dict[tuple[str, str], cp_model.IntVar] = {}
    objective_terms = []

    # Primary weight dominates every tie-break term, so the match count is
    # maximized first; then earlier students, then earlier preferences win.
    max_preferences = max((len(preferences.get(s, ())) for s in students), default=0)
    tie_break_span = (len(students) + 1) * (max_preferences + 1)
    primary_weight = tie_break_span * (len(students) + 1)

    for student_index, student in enumerate(students):
        for rank, room in enumerate(preferences.get(student, ())):
            if room not in room_set or (student, room) in variables:
                continue
            var = model.NewBoolVar(f"x_{student}_{room}")
            variables[(student, room)] = var
            tie_break = (len(students) - student_index) * (max_preferences + 1) + (
                max_preferences - rank
            )
            objective_terms.append((primary_weight + tie_break) * var)

    for student in students:
        student_vars = [var for (name, _), var in variables.items() if name == student]
        if student_vars:
            model.Add(sum(student_vars) <= 1)

    for room in room_set:
        room_vars = [var for (_, room_id), var in variables.items() if room_id == room]
        if room_vars:
            model.Add(sum(room_vars) <= 1)

    if objective_terms:
        model.Maximize(sum(objective_terms))
    else:
        model.Maximize(0)

    return BuildArtifacts(model=model, variables=variables)


def solve_model(
    *,
    artifacts: BuildArtifacts,
    students: Sequence[str],
    settings: Settings,
) -> AssignmentResult:
    """Solve the CP-SAT model and return the matching it found."""
    if not artifacts.variables:
        return AssignmentResult(
            assignments={},
            unassigned_students=list(students),
            strategy=MAXIMUM_STRATEGY,
        )

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = float(settings.solver_max_time_seconds)
    solver.parameters.num_search_workers = settings.solver_workers
    solver.parameters.random_seed = settings.solver_random_seed

    status = solver.Solve(artifacts.model)
    status_name = solver.StatusName(status)
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        logger.warning("Assignment solve failed | status=%s", status_name)
        return AssignmentResult(
            assignments={},
            unassigned_students=list(students),
            strategy=MAXIMUM_STRATEGY,
        )

    matched: dict[str, str] = {}
    for (student, room), var in artifacts.variables.items():
        if solver.Value(var) == 1:
            matched[student] = room

    assignments: dict[str, str] = {}
    unassigned: list[str] = []
    for student in students:
        room = matched.get(student)
        if room is None:
            unassigned.append(student)
        else:
            assignments[room] = student

    logger.info(
        "Assignment solve completed | status=%s | matched=%s | unassigned=%s",
        status_name,
        len(assignments),
        len(unassigned),
    )
    return AssignmentResult(
        assignments=assignments,
        unassigned_students=unassigned,
        strategy=MAXIMUM_STRATEGY,
    )


class BipartiteAssigner:
    """Assigns students to rooms; every run starts from an empty room map."""

    def __init__(
        self,
        students: Iterable[Student],
        rooms: Iterable[str],
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._students = list(students)
        self._rooms = list(rooms)

    @property
    def rooms(self) -> list[str]:
        return list(self._rooms)

    def run(self, strategy: Optional[str] = None) -> AssignmentResult:
        return self.assign(
            students=[student.name for student in self._students],
            rooms=self._rooms,
            preferences={
                student.name: list(student.preferences) for student in self._students
            },
            strategy=strategy or self._settings.matching_strategy,
        )

    def assign(
        self,
        *,
        students: Sequence[str],
        rooms: Iterable[str],
        preferences: Mapping[str, Sequence[str]],
        strategy: str = GREEDY_STRATEGY,
    ) -> AssignmentResult:
        _validate_inputs(students=students, strategy=strategy)
        rooms = list(rooms)

        if strategy == GREEDY_STRATEGY:
            result = greedy_assign(students=students, rooms=rooms, preferences=preferences)
        else:
            artifacts = build_model(students=students, rooms=rooms, preferences=preferences)
            result = solve_model(
                artifacts=artifacts,
                students=students,
                settings=self._settings,
            )

        logger.info(
            "Room assignment completed | strategy=%s | assignments=%s | unassigned=%s",
            result.strategy,
            result.assignments,
            result.unassigned_students,
        )
        return result
