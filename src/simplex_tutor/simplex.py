from __future__ import annotations

"""
Simplex (Tableau) solver for problems with "<=" constraints and a feasible origin.
- Supports max/min by converting to max internally.
- Records every tableau and every pivot decision for step-by-step playback.
- Detects optimal and unbounded cases; stops after `max_iterations` pivots.

Tableau layout per row: [var1, var2, ..., varN, RHS], objective row last.
The objective row holds the negated (maximize) costs, so a negative entry
marks a column that can still improve the objective.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Tuple, Optional, Dict

import numpy as np

from .problem import LinearProgrammingProblem
from .standard_form import StandardForm, to_standard_form

MAX_ITERATIONS = 50
OPTIMALITY_TOL = 1e-10


class StepAction(str, Enum):
    CONVERT = "convert-to-standard-form"
    INITIAL_TABLEAU = "initial-tableau"
    SELECT_ENTERING = "select-entering-variable"
    SELECT_LEAVING = "select-leaving-variable"
    PIVOT = "pivot"
    OPTIMAL = "optimal"
    UNBOUNDED = "unbounded"
    NON_CONVERGENT = "non-convergent"


class SolveStatus(str, Enum):
    OPTIMAL = "optimal"
    UNBOUNDED = "unbounded"
    NON_CONVERGENT = "non_convergent"


def _frozen(mat: np.ndarray) -> np.ndarray:
    mat = np.array(mat, dtype=float)
    mat.setflags(write=False)
    return mat


@dataclass(frozen=True, eq=False)
class Tableau:
    matrix: np.ndarray            # (m+1) x (N+1), read-only
    columns: Tuple[str, ...]      # names of the N variable columns
    basic: Tuple[str, ...]        # one per constraint row
    nonbasic: Tuple[str, ...]
    iteration: int = 0
    is_optimal: bool = False
    is_unbounded: bool = False
    pivot_row: Optional[int] = None
    pivot_column: Optional[int] = None
    entering: Optional[str] = None
    leaving: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "matrix", _frozen(self.matrix))
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "basic", tuple(self.basic))
        object.__setattr__(self, "nonbasic", tuple(self.nonbasic))
        if len(self.basic) != self.m:
            raise ValueError("one basic variable per constraint row is required")

    @property
    def m(self) -> int:
        return self.matrix.shape[0] - 1

    @property
    def num_vars(self) -> int:
        return self.matrix.shape[1] - 1

    @property
    def objective_row(self) -> np.ndarray:
        return self.matrix[-1]

    @property
    def rhs(self) -> np.ndarray:
        return self.matrix[:, -1]

    @property
    def value(self) -> float:
        """Objective value of the current basic solution (internal maximize sense)."""
        return float(self.matrix[-1, -1])

    def column_of(self, name: str) -> int:
        return self.columns.index(name)

    def ratios(self, col: int) -> List[Optional[float]]:
        """Ratio-test column: rhs/entry where the entry is positive, else None."""
        out: List[Optional[float]] = []
        for i in range(self.m):
            aij = self.matrix[i, col]
            out.append(float(self.matrix[i, -1] / aij) if aij > 0 else None)
        return out

    def choose_entering(self, tol: float = OPTIMALITY_TOL) -> Optional[int]:
        """Most negative objective-row entry among non-basic columns (lowest index on ties)."""
        obj_row = self.objective_row
        best_j = None
        best_val = -tol
        for j in sorted(self.column_of(name) for name in self.nonbasic):
            if obj_row[j] < best_val:
                best_val = obj_row[j]
                best_j = j
        return best_j

    def choose_leaving(self, enter_j: int) -> Optional[int]:
        """Minimum-ratio test (lowest row on ties); None means unbounded."""
        best_i = None
        best_ratio = None
        for i, ratio in enumerate(self.ratios(enter_j)):
            if ratio is None:
                continue
            if best_ratio is None or ratio < best_ratio:
                best_ratio = ratio
                best_i = i
        return best_i

    def pivot(self, row: int, col: int) -> "Tableau":
        entering = self.columns[col]
        if entering not in self.nonbasic:
            raise ValueError(f"pivot column {entering} is already basic")
        T = np.array(self.matrix, dtype=float)
        piv = T[row, col]
        if piv == 0:
            raise RuntimeError("Zero pivot encountered")
        T[row, :] /= piv
        for i in range(self.m + 1):
            if i == row:
                continue
            coeff = T[i, col]
            if coeff != 0:
                T[i, :] -= coeff * T[row, :]

        leaving = self.basic[row]
        basic = list(self.basic)
        nonbasic = list(self.nonbasic)
        basic[row] = entering
        nonbasic[nonbasic.index(entering)] = leaving
        return Tableau(T, self.columns, basic, nonbasic, iteration=self.iteration + 1)

    def check_optimal(self, tol: float = OPTIMALITY_TOL) -> bool:
        return bool(np.all(self.objective_row[:-1] >= -tol))

    def basic_values(self) -> Dict[str, float]:
        return {name: float(self.matrix[i, -1]) for i, name in enumerate(self.basic)}


def initial_tableau(sf: StandardForm) -> Tableau:
    """[A | I | b] rows plus the negated objective row; the slacks start basic."""
    T = np.zeros((sf.m + 1, len(sf.var_names) + 1))
    T[:-1, :-1] = sf.A
    T[:-1, -1] = sf.b
    T[-1, :-1] = -sf.c
    return Tableau(T, sf.var_names, sf.slack_names, sf.original_names, iteration=0)


@dataclass(frozen=True)
class SimplexStep:
    iteration: int
    description: str
    action: StepAction
    detail: str
    tableau: Optional[Tableau] = None


@dataclass
class SimplexSolution:
    status: SolveStatus
    optimal_value: float
    solution: Dict[str, float]
    iterations: List[Tableau]
    steps: List[SimplexStep]
    maximize: bool = True
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def is_optimal(self) -> bool:
        return self.status == SolveStatus.OPTIMAL

    @property
    def is_unbounded(self) -> bool:
        return self.status == SolveStatus.UNBOUNDED

    @property
    def is_feasible(self) -> bool:
        # Only origin-feasible problems get past validation
        return True

    @property
    def pivots(self) -> int:
        return self.iterations[-1].iteration if self.iterations else 0

    @property
    def final_tableau(self) -> Tableau:
        return self.iterations[-1]

    @property
    def alternate_optima(self) -> List[str]:
        """Non-basic variables with zero reduced cost at the optimum."""
        if not self.is_optimal:
            return []
        tab = self.final_tableau
        return [
            name for name in tab.nonbasic
            if abs(tab.objective_row[tab.column_of(name)]) <= OPTIMALITY_TOL
        ]


def extract_solution(tableau: Tableau, original_names: List[str], maximize: bool) -> Tuple[float, Dict[str, float]]:
    values = {name: 0.0 for name in original_names}
    for name, val in tableau.basic_values().items():
        if name in values:
            values[name] = val
    z = tableau.value
    # If original was minimization, flip sign back
    if not maximize:
        z = -z
    return z, values


def solve(lp: LinearProgrammingProblem, max_iterations: int = MAX_ITERATIONS) -> SimplexSolution:
    lp.require_origin_feasible()
    if max_iterations < 0:
        raise ValueError("max_iterations must be non-negative")

    sf = to_standard_form(lp)
    steps: List[SimplexStep] = [SimplexStep(
        0,
        "Convert to standard form",
        StepAction.CONVERT,
        f"{'Maximization' if lp.maximize else 'Minimization converted to maximization'}; "
        f"slack variables {', '.join(sf.slack_names)} added.",
    )]
    history: List[Tableau] = []

    tab = initial_tableau(sf)
    arrival = (
        "Initial tableau",
        StepAction.INITIAL_TABLEAU,
        f"Slack variables form the initial basis: {', '.join(tab.basic)}.",
    )
    while True:
        enter_j = None if tab.check_optimal() else tab.choose_entering()
        leave_i = None
        if enter_j is None:
            tab = replace(tab, is_optimal=True)
        elif tab.iteration < max_iterations:
            leave_i = tab.choose_leaving(enter_j)
            if leave_i is None:
                tab = replace(tab, is_unbounded=True, pivot_column=enter_j, entering=tab.columns[enter_j])
            else:
                tab = replace(
                    tab,
                    pivot_row=leave_i,
                    pivot_column=enter_j,
                    entering=tab.columns[enter_j],
                    leaving=tab.basic[leave_i],
                )
        history.append(tab)
        title, action, detail = arrival
        steps.append(SimplexStep(tab.iteration, title, action, detail, tab))

        if tab.is_optimal:
            status = SolveStatus.OPTIMAL
            steps.append(SimplexStep(
                tab.iteration,
                "Optimal solution found",
                StepAction.OPTIMAL,
                "All objective-row coefficients are non-negative.",
            ))
            break
        if tab.iteration >= max_iterations:
            status = SolveStatus.NON_CONVERGENT
            steps.append(SimplexStep(
                tab.iteration,
                "Iteration limit reached",
                StepAction.NON_CONVERGENT,
                f"Stopped after {max_iterations} pivots without reaching an optimal or unbounded tableau.",
            ))
            break

        it = tab.iteration + 1
        steps.append(SimplexStep(
            it,
            "Select entering variable",
            StepAction.SELECT_ENTERING,
            f"Entering variable: {tab.entering} (column {enter_j + 1}), "
            f"most negative objective-row coefficient {tab.objective_row[enter_j]:g}.",
        ))
        if tab.is_unbounded:
            status = SolveStatus.UNBOUNDED
            steps.append(SimplexStep(
                it,
                "Problem is unbounded",
                StepAction.UNBOUNDED,
                f"No positive entry in column {tab.entering}; the objective can grow without limit.",
            ))
            break
        steps.append(SimplexStep(
            it,
            "Select leaving variable",
            StepAction.SELECT_LEAVING,
            f"Leaving variable: {tab.leaving} (row {leave_i + 1}), "
            f"minimum ratio {tab.ratios(enter_j)[leave_i]:g}.",
        ))
        arrival = (
            "Pivot",
            StepAction.PIVOT,
            f"Pivot on element ({leave_i + 1}, {enter_j + 1}): "
            f"{tab.leaving} leaves, {tab.entering} enters.",
        )
        tab = tab.pivot(leave_i, enter_j)

    z, values = extract_solution(tab, sf.original_names, lp.maximize)
    return SimplexSolution(
        status=status,
        optimal_value=z,
        solution=values,
        iterations=history,
        steps=steps,
        maximize=lp.maximize,
        details={"var_names": list(sf.var_names)},
    )
