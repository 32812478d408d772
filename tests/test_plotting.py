import matplotlib.pyplot as plt

from simplex_tutor import Constraint, LinearProgrammingProblem, solve_graphically
from simplex_tutor.plotting import plot_graphical


def test_plot_has_region_and_optimum(wyndor):
    fig = plot_graphical(wyndor)
    ax = fig.axes[0]
    labels = [t.get_text() for t in ax.get_legend().get_texts()]

    assert "feasible region" in labels
    assert any(label.startswith("optimal (2, 6)") for label in labels)
    assert ax.get_xlim() == (0.0, solve_graphically(wyndor).max_x)
    plt.close(fig)


def test_plot_vertical_constraint_and_objective():
    problem = LinearProgrammingProblem((1, 0), [Constraint((1, 0), "<=", 3), Constraint((0, 1), "<=", 2)])
    fig = plot_graphical(problem)
    assert fig is not None
    plt.close(fig)


def test_no_plot_for_three_variables():
    problem = LinearProgrammingProblem((1, 1, 1), [Constraint((1, 1, 1), "<=", 3)])
    assert plot_graphical(problem) is None
