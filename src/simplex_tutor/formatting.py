from __future__ import annotations

"""Text rendering of tableaux, step logs and results (integers or reduced fractions)."""

import math
from fractions import Fraction
from typing import List, Optional

from .simplex import SimplexSolution, SimplexStep, StepAction, Tableau
from .sensitivity import SensitivityResult

ZERO_TOL = 1e-9


def fmt_num(x: float, max_denominator: int = 1000) -> str:
    """Format a number as integer or reduced fraction without float artifacts."""
    if isinstance(x, float) and (math.isnan(x) or math.isinf(x)):
        return str(x)
    x = float(x)
    if abs(x) < ZERO_TOL:
        return "0"
    fr = Fraction.from_float(x).limit_denominator(max_denominator)
    if abs(float(fr) - x) > 1e-9 * max(1.0, abs(x)):
        # Not a tidy rational: fall back to a short decimal
        return f"{x:.6g}"
    if fr.denominator == 1:
        return str(fr.numerator)
    return f"{fr.numerator}/{fr.denominator}"


def format_tableau(tab: Tableau, header: str = "") -> str:
    """Render as: Z x1 x2 ... RHS BV Ratio, with the pivot element marked."""
    title = header or f"Iteration {tab.iteration}"
    enter_j = tab.pivot_column
    leave_i = tab.pivot_row
    headers = ["Z"] + list(tab.columns) + ["RHS", "BV", "Ratio"]
    ratios: List[Optional[float]] = tab.ratios(enter_j) if enter_j is not None else [None] * tab.m

    rows: List[List[str]] = []
    z_cells = ["Z"] + [fmt_num(v) for v in tab.objective_row[:-1]] + [fmt_num(tab.objective_row[-1]), "Z", ""]
    rows.append(z_cells)
    for i in range(tab.m):
        cells = [""]
        for j in range(tab.num_vars):
            val = fmt_num(tab.matrix[i, j])
            if i == leave_i and j == enter_j:
                val = f"[{val}]"
            cells.append(val)
        ratio = ratios[i]
        cells.extend([fmt_num(tab.matrix[i, -1]), tab.basic[i], fmt_num(ratio) if ratio is not None else ""])
        rows.append(cells)

    # compute column width from data
    colw = max(6, max(len(s) for s in headers + [c for r in rows for c in r]) + 2)
    lines = [title]
    lines.append(" ".join(f"{h:>{colw}}" for h in headers))
    lines.append("-" * (len(headers) * (colw + 1)))
    for r in rows:
        lines.append(" ".join(f"{c:>{colw}}" for c in r))
    if tab.entering is not None:
        note = f"Entering: {tab.entering}"
        if tab.leaving is not None:
            note += f"   Leaving: {tab.leaving}"
        lines.append(note)
    return "\n".join(lines)


def format_step(step: SimplexStep) -> str:
    text = f"[{step.iteration}] {step.description}: {step.detail}"
    if step.tableau is not None and step.action in (StepAction.INITIAL_TABLEAU, StepAction.PIVOT):
        text += "\n\n" + format_tableau(step.tableau)
    return text


def format_steps(steps: List[SimplexStep]) -> str:
    return "\n\n".join(format_step(s) for s in steps)


def format_solution(sol: SimplexSolution) -> str:
    lines = [f"Status: {sol.status.value}"]
    if sol.is_optimal:
        lines.append(f"Optimal value: {fmt_num(sol.optimal_value)}")
        lines.append("Solution: " + ", ".join(f"{k} = {fmt_num(v)}" for k, v in sol.solution.items()))
        if sol.alternate_optima:
            lines.append("Note: Infinite many optimal solutions (alternate optimal).")
            lines.append(f"Zero reduced-cost nonbasic vars: {sol.alternate_optima}")
    elif sol.is_unbounded:
        lines.append("The objective is unbounded on the feasible region.")
    else:
        lines.append(f"No optimum after {sol.pivots} pivots; last basic solution: "
                     + ", ".join(f"{k} = {fmt_num(v)}" for k, v in sol.solution.items()))
    lines.append(f"Iterations: {sol.pivots}")
    return "\n".join(lines)


def format_sensitivity(res: SensitivityResult) -> str:
    lines = ["Shadow prices:"]
    for sp, rr in zip(res.shadow_prices, res.rhs_ranges):
        lines.append(
            f"  {sp.constraint:>6}  {fmt_num(sp.price):>10}   "
            f"RHS {fmt_num(rr.rhs)} valid in [{fmt_num(rr.lower)}, {fmt_num(rr.upper)}]"
        )
    lines.append("Reduced costs:")
    for rc in res.reduced_costs:
        lines.append(f"  {rc.variable:>6}  {fmt_num(rc.cost):>10}")
    return "\n".join(lines)
