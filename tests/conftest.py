import matplotlib

matplotlib.use("Agg")

import pytest

from simplex_tutor import LinearProgrammingProblem


@pytest.fixture
def wyndor():
    """maximize 3x1 + 5x2  s.t.  x1 <= 4, 2x2 <= 12, 3x1 + 2x2 <= 18."""
    return LinearProgrammingProblem.from_dict({
        "c": [3, 5],
        "A": [[1, 0], [0, 2], [3, 2]],
        "b": [4, 12, 18],
        "senses": ["<=", "<=", "<="],
        "maximize": True,
    })


@pytest.fixture
def diet():
    """minimize 5x + 3y  s.t.  2x + y >= 10, x + 2y >= 8, x + y <= 12 (origin infeasible)."""
    return LinearProgrammingProblem.from_dict({
        "c": [5, 3],
        "A": [[2, 1], [1, 2], [1, 1]],
        "b": [10, 8, 12],
        "senses": [">=", ">=", "<="],
        "maximize": False,
        "variables": ["x", "y"],
    })
