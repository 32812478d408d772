from __future__ import annotations

"""
Graphical method for problems with exactly two decision variables.

Works on the raw problem (any of <=, >=, =), independently of the tableau
solver: candidate vertices are the origin, the axis intercepts and all pairwise
line intersections; the feasible ones form the region and the best one is the
optimum. Non-negativity of both variables is always assumed.
"""

import math
from dataclasses import dataclass, field
from itertools import combinations
from typing import List, Tuple, Optional, NamedTuple

from .problem import LinearProgrammingProblem, Constraint

PARALLEL_TOL = 1e-8
FEASIBILITY_TOL = 1e-8
DEDUP_TOL = 1e-6
PLOT_MARGIN = 1.1


class Point(NamedTuple):
    x: float
    y: float


class ConstraintLine(NamedTuple):
    """The boundary a*x + b*y = rhs of a constraint."""
    coefficients: Tuple[float, float]
    rhs: float

    @classmethod
    def of(cls, constraint: Constraint) -> "ConstraintLine":
        a, b = constraint.coefficients
        return cls((a, b), constraint.rhs)

    def intercepts(self) -> List[Point]:
        """y-axis intercept then x-axis intercept, where defined."""
        a, b = self.coefficients
        pts = []
        if b != 0:
            pts.append(Point(0.0, self.rhs / b))
        if a != 0:
            pts.append(Point(self.rhs / a, 0.0))
        return pts


@dataclass
class GraphicalSolution:
    applicable: bool
    constraint_lines: List[List[Point]] = field(default_factory=list)
    feasible_region: List[Point] = field(default_factory=list)
    optimal_point: Optional[Point] = None
    optimal_value: Optional[float] = None
    max_x: float = PLOT_MARGIN
    max_y: float = PLOT_MARGIN

    @property
    def is_feasible(self) -> bool:
        return bool(self.feasible_region)


def intersection(l1: ConstraintLine, l2: ConstraintLine) -> Optional[Point]:
    a1, b1 = l1.coefficients
    a2, b2 = l2.coefficients
    det = a1 * b2 - a2 * b1
    if abs(det) < PARALLEL_TOL:
        return None
    x = (l1.rhs * b2 - l2.rhs * b1) / det
    y = (a1 * l2.rhs - a2 * l1.rhs) / det
    return Point(x, y)


def candidate_vertices(lines: List[ConstraintLine]) -> List[Point]:
    pts = [Point(0.0, 0.0)]
    for line in lines:
        a, b = line.coefficients
        if a != 0:
            pts.append(Point(line.rhs / a, 0.0))
        if b != 0:
            pts.append(Point(0.0, line.rhs / b))
    for l1, l2 in combinations(lines, 2):
        p = intersection(l1, l2)
        if p is not None:
            pts.append(p)
    return pts


def is_feasible(p: Point, constraints: Tuple[Constraint, ...]) -> bool:
    return (
        all(c.is_satisfied(p, FEASIBILITY_TOL) for c in constraints)
        and p.x >= 0 and p.y >= 0
    )


def dedupe(points: List[Point]) -> List[Point]:
    uniq: List[Point] = []
    for p in points:
        if not any(abs(p.x - q.x) < DEDUP_TOL and abs(p.y - q.y) < DEDUP_TOL for q in uniq):
            uniq.append(p)
    return uniq


def sort_polygon(points: List[Point]) -> List[Point]:
    """Order points by angle around their centroid so they draw as a simple polygon."""
    if len(points) < 3:
        return list(points)
    cx = sum(p.x for p in points) / len(points)
    cy = sum(p.y for p in points) / len(points)
    return sorted(points, key=lambda p: math.atan2(p.y - cy, p.x - cx))


def find_optimum(points: List[Point], objective: Tuple[float, float], maximize: bool) -> Tuple[Optional[Point], Optional[float]]:
    c1, c2 = objective
    best = None
    best_val = None
    for p in points:
        val = c1 * p.x + c2 * p.y
        if best is None or (val > best_val if maximize else val < best_val):
            best, best_val = p, val
    return best, best_val


def solve_graphically(lp: LinearProgrammingProblem) -> GraphicalSolution:
    if lp.num_vars != 2:
        return GraphicalSolution(applicable=False)

    lines = [ConstraintLine.of(c) for c in lp.constraints]
    feasible = dedupe([p for p in candidate_vertices(lines) if is_feasible(p, lp.constraints)])
    optimal_point, optimal_value = find_optimum(feasible, lp.objective, lp.maximize)
    region = sort_polygon(feasible)
    constraint_lines = [line.intercepts() for line in lines]

    drawn = [p for pts in constraint_lines for p in pts] + region
    max_x = max([p.x for p in drawn] + [1.0]) * PLOT_MARGIN
    max_y = max([p.y for p in drawn] + [1.0]) * PLOT_MARGIN

    return GraphicalSolution(
        applicable=True,
        constraint_lines=constraint_lines,
        feasible_region=region,
        optimal_point=optimal_point,
        optimal_value=optimal_value,
        max_x=max_x,
        max_y=max_y,
    )
