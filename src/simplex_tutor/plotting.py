from __future__ import annotations

"""Matplotlib figure for the graphical method (2 variables only)."""

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon

from .graphical import GraphicalSolution, solve_graphically
from .problem import LinearProgrammingProblem
from .formatting import fmt_num


def plot_graphical(lp: LinearProgrammingProblem, res: Optional[GraphicalSolution] = None):
    """Plot constraint lines, the feasible polygon and the optimal vertex.

    Returns the Figure, or None when the problem does not have two variables.
    """
    if res is None:
        res = solve_graphically(lp)
    if not res.applicable:
        return None

    x_name, y_name = lp.variables
    grid_x = np.linspace(0.0, res.max_x, 400)
    fig, ax = plt.subplots(figsize=(6, 6))

    # Plot constraints with distinct colors
    color_cycle = plt.rcParams.get('axes.prop_cycle', None)
    colors = color_cycle.by_key()['color'] if color_cycle else [f'C{i}' for i in range(10)]
    for i, c in enumerate(lp.constraints):
        a1, a2 = c.coefficients
        color = colors[i % len(colors)]
        label = f"Constraint {i+1}: {fmt_num(a1)}{x_name} + {fmt_num(a2)}{y_name} {c.sense} {fmt_num(c.rhs)}"
        if abs(a2) < 1e-12:
            if abs(a1) < 1e-12:
                continue
            ax.axvline(c.rhs / a1, color=color, alpha=0.7, label=label)
        else:
            ax.plot(grid_x, (c.rhs - a1 * grid_x) / a2, color=color, alpha=0.7, label=label)

    # Shade feasible region
    region = res.feasible_region
    if len(region) >= 3:
        ax.add_patch(Polygon([(p.x, p.y) for p in region], closed=True,
                             facecolor='#e8f7ff', edgecolor='#7fb8d8', alpha=0.8, label='feasible region'))
    if region:
        ax.scatter([p.x for p in region], [p.y for p in region], s=25, color='#444444', alpha=0.9, label='vertices')

    # Iso-profit line through the optimum
    if res.optimal_point is not None:
        xopt, yopt = res.optimal_point
        zopt = res.optimal_value
        c1, c2 = lp.objective
        if abs(c2) < 1e-12:
            if abs(c1) > 1e-12:
                ax.axvline(zopt / c1, color='red', linestyle='--', label='iso-profit')
        else:
            ax.plot(grid_x, (zopt - c1 * grid_x) / c2, 'r--', label='iso-profit (through optimum)')
        ax.plot([xopt], [yopt], 'ro', label=f"optimal ({fmt_num(xopt)}, {fmt_num(yopt)})")
        ax.annotate(f"Z* = {fmt_num(zopt)}", (xopt, yopt), textcoords="offset points", xytext=(8, 8))

    ax.set_xlim(0, res.max_x)
    ax.set_ylim(0, res.max_y)
    ax.set_xlabel(x_name)
    ax.set_ylabel(y_name)
    ax.set_title('Constraints, Feasible Region, Iso-profit')
    ax.legend(loc='best', fontsize=8)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return fig
