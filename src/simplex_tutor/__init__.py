"""Tableau simplex with step playback, sensitivity analysis and the 2-variable graphical method."""

from .problem import Constraint, LinearProgrammingProblem, ValidationError
from .standard_form import StandardForm, to_standard_form
from .simplex import (
    MAX_ITERATIONS,
    SimplexSolution,
    SimplexStep,
    SolveStatus,
    StepAction,
    Tableau,
    solve,
)
from .sensitivity import SensitivityResult, analyze
from .graphical import GraphicalSolution, Point, ConstraintLine, solve_graphically

__all__ = [
    "Constraint",
    "LinearProgrammingProblem",
    "ValidationError",
    "StandardForm",
    "to_standard_form",
    "MAX_ITERATIONS",
    "SimplexSolution",
    "SimplexStep",
    "SolveStatus",
    "StepAction",
    "Tableau",
    "solve",
    "SensitivityResult",
    "analyze",
    "GraphicalSolution",
    "Point",
    "ConstraintLine",
    "solve_graphically",
]
