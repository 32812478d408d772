import json

import streamlit as st

from simplex_tutor import LinearProgrammingProblem, ValidationError, analyze, solve, solve_graphically
from simplex_tutor.formatting import fmt_num, format_steps
from simplex_tutor.plotting import plot_graphical
from simplex_tutor.simplex import MAX_ITERATIONS

st.set_page_config(page_title="Simplex Visualizer", layout="wide")
st.title("Simplex (Tableau) — Solve & Visualize")

# Sidebar options
with st.sidebar:
    st.header("Options")
    is_min = st.checkbox("Minimize (default: Maximize)", value=False)
    max_iter = st.number_input("Pivot limit", min_value=0, max_value=1000, value=MAX_ITERATIONS, step=1)
    show_sensitivity = st.checkbox("Show sensitivity analysis", value=True)
    show_graph = st.checkbox("Show graph (2 variables only)", value=True)

# Default JSON template
default_json = {
    "c": [3, 5],
    "A": [[1, 0], [0, 2], [3, 2]],
    "b": [4, 12, 18],
    "senses": ["<=", "<=", "<="],
    "maximize": True,
    "variables": ["x1", "x2"],
}

st.subheader("Model JSON")
json_text = st.text_area("Edit LP JSON here", json.dumps(default_json, indent=2), height=260)

col_run, col_reset = st.columns([1, 1])
run = col_run.button("Solve")
if col_reset.button("Reset to template"):
    st.rerun()


def show_simplex(lp: LinearProgrammingProblem):
    try:
        sol = solve(lp, max_iterations=int(max_iter))
    except ValidationError as e:
        st.warning(f"Tableau method not applicable: {e}")
        return

    st.subheader("Iterations / Tableaux")
    st.code(format_steps(sol.steps))
    st.subheader("Result")
    st.json({
        "status": sol.status.value,
        "optimal_value": fmt_num(sol.optimal_value) if sol.is_optimal else None,
        "solution": {k: fmt_num(v) for k, v in sol.solution.items()},
        "iterations": sol.pivots,
    })
    if sol.alternate_optima:
        st.info("Infinite many optimal solutions along an edge (alternate optimal).")

    if show_sensitivity and sol.is_optimal:
        res = analyze(sol)
        st.subheader("Sensitivity")
        col_sp, col_rc = st.columns(2)
        col_sp.table([
            {"constraint": sp.constraint, "shadow price": fmt_num(sp.price),
             "RHS range": f"[{fmt_num(rr.lower)}, {fmt_num(rr.upper)}]"}
            for sp, rr in zip(res.shadow_prices, res.rhs_ranges)
        ])
        col_rc.table([{"variable": rc.variable, "reduced cost": fmt_num(rc.cost)} for rc in res.reduced_costs])


def show_graphical(lp: LinearProgrammingProblem):
    st.subheader("Graph")
    if not show_graph or lp.num_vars != 2:
        st.info("Graph available only for 2 variables.")
        return
    res = solve_graphically(lp)
    if res.optimal_point is None:
        st.info("No feasible region to plot.")
        return
    x, y = res.optimal_point
    st.write(f"Optimal vertex: {lp.variables[0]} = {fmt_num(x)}, {lp.variables[1]} = {fmt_num(y)}, "
             f"Z = {fmt_num(res.optimal_value)}")
    st.pyplot(plot_graphical(lp, res))


if run:
    # Parse JSON
    try:
        cfg = json.loads(json_text)
    except json.JSONDecodeError as e:
        st.error(f"Invalid JSON: {e}")
    else:
        try:
            lp = LinearProgrammingProblem.from_dict(cfg, maximize=False if is_min else None)
        except ValidationError as e:
            st.error(f"Invalid LP fields: {e}")
        else:
            show_simplex(lp)
            show_graphical(lp)
