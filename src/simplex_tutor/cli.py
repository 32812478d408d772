from __future__ import annotations

"""
Command line entry point.

Expects a JSON file describing the LP:
{"c": [3, 5], "A": [[1, 0], [0, 2], [3, 2]], "b": [4, 12, 18],
 "senses": ["<=", "<=", "<="], "maximize": true, "variables": ["x1", "x2"]}
"""

import argparse
import json
import sys
from typing import List, Optional

from .problem import LinearProgrammingProblem, ValidationError
from .simplex import MAX_ITERATIONS, solve
from .sensitivity import analyze
from .graphical import solve_graphically
from .formatting import fmt_num, format_steps, format_solution, format_sensitivity


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="simplex-tutor",
        description="Tableau simplex for <= problems (shows every iteration), with sensitivity "
                    "analysis and the graphical method for 2 variables",
    )
    p.add_argument("json", help="Path to JSON file describing the LP")
    p.add_argument("--sense", choices=["max", "min"], default=None, help="Objective sense (default: use JSON or max)")
    p.add_argument("--min", action="store_true", help="Same as --sense min")
    p.add_argument("--max-iter", type=int, default=MAX_ITERATIONS,
                   help=f"Pivot limit before giving up (default: {MAX_ITERATIONS})")
    p.add_argument("--no-verbose", action="store_true", help="Hide iteration printouts")
    p.add_argument("--sensitivity", action="store_true", help="Print shadow prices and reduced costs")
    p.add_argument("--graph", action="store_true", help="Solve graphically and plot (2 variables only)")
    return p


def load_problem(path: str, sense: Optional[str] = None) -> LinearProgrammingProblem:
    with open(path, "r", encoding="utf-8") as f:
        cfg = json.load(f)
    # CLI (if provided) overrides JSON; else fallback to JSON -> max.
    maximize = None if sense is None else (sense == "max")
    return LinearProgrammingProblem.from_dict(cfg, maximize=maximize)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_iter < 0:
        parser.error("--max-iter must be non-negative")

    sense = "min" if args.min else args.sense
    try:
        lp = load_problem(args.json, sense)
    except OSError as e:
        parser.error(f"cannot read {args.json}: {e}")
    except json.JSONDecodeError as e:
        parser.error(f"invalid JSON: {e}")
    except ValidationError as e:
        parser.error(f"invalid LP: {e}")

    graphical = solve_graphically(lp) if args.graph else None
    sol = None
    try:
        sol = solve(lp, max_iterations=args.max_iter)
    except ValidationError as e:
        if graphical is None or not graphical.applicable:
            parser.error(f"invalid LP: {e}")
        print(f"Tableau method not applicable: {e}")

    if sol is not None:
        if not args.no_verbose:
            print(format_steps(sol.steps))
        print("\n=== Result ===")
        print(format_solution(sol))
        if args.sensitivity and sol.is_optimal:
            print("\n=== Sensitivity ===")
            print(format_sensitivity(analyze(sol)))

    if graphical is not None:
        print("\n=== Graphical method ===")
        if not graphical.applicable:
            print("Graph only supports 2 variables.")
        elif graphical.optimal_point is None:
            print("No feasible region.")
        else:
            x, y = graphical.optimal_point
            print(f"Optimal vertex: ({fmt_num(x)}, {fmt_num(y)})  Z = {fmt_num(graphical.optimal_value)}")
            print("Feasible region: " + " ".join(f"({fmt_num(p.x)}, {fmt_num(p.y)})" for p in graphical.feasible_region))
            show_graph(lp, graphical)
    return 0


def show_graph(lp: LinearProgrammingProblem, graphical) -> None:
    import matplotlib.pyplot as plt
    from .plotting import plot_graphical

    fig = plot_graphical(lp, graphical)
    if fig is not None:
        plt.show()


if __name__ == "__main__":
    sys.exit(main())
