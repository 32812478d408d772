from __future__ import annotations

"""
Post-optimal analysis read off the first and last tableau of a solve.

- Shadow prices: change of the reported optimum per unit increase of each RHS.
- Reduced costs: objective-row entries of the original variables.
- RHS ranges: how far each RHS may move before the optimal basis changes.
"""

import math
from dataclasses import dataclass
from typing import List

from .simplex import SimplexSolution

RANGE_TOL = 1e-10


@dataclass(frozen=True)
class ShadowPrice:
    constraint: str
    price: float


@dataclass(frozen=True)
class ReducedCost:
    variable: str
    cost: float


@dataclass(frozen=True)
class RhsRange:
    constraint: str
    rhs: float
    allowable_decrease: float
    allowable_increase: float

    @property
    def lower(self) -> float:
        return self.rhs - self.allowable_decrease

    @property
    def upper(self) -> float:
        return self.rhs + self.allowable_increase


@dataclass(frozen=True)
class SensitivityResult:
    shadow_prices: List[ShadowPrice]
    reduced_costs: List[ReducedCost]
    rhs_ranges: List[RhsRange]


def analyze(solution: SimplexSolution) -> SensitivityResult:
    first = solution.iterations[0]
    final = solution.iterations[-1]
    n = len(first.nonbasic)  # originals: the slacks start basic
    m = len(first.basic)
    obj_row = final.objective_row
    # Internal tableau always maximizes; flip back for minimization
    sign = 1.0 if solution.maximize else -1.0

    names = [first.basic[i] or f"s{i+1}" for i in range(m)]
    shadow_prices = [
        ShadowPrice(names[i], sign * float(obj_row[n + i])) for i in range(m)
    ]
    reduced_costs = [
        ReducedCost(first.nonbasic[j], float(obj_row[j])) for j in range(n)
    ]

    # Columns of B^-1 sit under the slack variables in the final tableau
    beta = final.rhs[:m]
    rhs_ranges = []
    for i in range(m):
        d = final.matrix[:m, n + i]
        decrease = increase = math.inf
        for r in range(m):
            if d[r] > RANGE_TOL:
                decrease = min(decrease, float(beta[r] / d[r]))
            elif d[r] < -RANGE_TOL:
                increase = min(increase, float(beta[r] / -d[r]))
        rhs_ranges.append(RhsRange(names[i], float(first.rhs[i]), decrease, increase))

    return SensitivityResult(shadow_prices, reduced_costs, rhs_ranges)
