import math

from simplex_tutor import analyze, solve
from simplex_tutor.formatting import fmt_num, format_sensitivity, format_solution, format_steps, format_tableau


def test_fmt_num():
    assert fmt_num(2.0) == "2"
    assert fmt_num(1.5) == "3/2"
    assert fmt_num(-1 / 3) == "-1/3"
    assert fmt_num(1e-12) == "0"
    assert fmt_num(-1e-15) == "0"
    assert fmt_num(math.inf) == "inf"
    assert fmt_num(math.pi) == "3.14159"


def test_format_tableau_marks_pivot(wyndor):
    sol = solve(wyndor)
    text = format_tableau(sol.iterations[0])
    lines = text.splitlines()

    assert lines[0] == "Iteration 0"
    assert lines[1].split() == ["Z", "x1", "x2", "s1", "s2", "s3", "RHS", "BV", "Ratio"]
    assert "[2]" in text
    assert "Entering: x2   Leaving: s2" in text


def test_format_final_tableau_has_no_ratio_column_values(wyndor):
    final = solve(wyndor).iterations[-1]
    text = format_tableau(final, header="Final tableau")
    assert text.startswith("Final tableau")
    assert "Entering" not in text
    assert "36" in text


def test_format_steps_includes_every_tableau(wyndor):
    text = format_steps(solve(wyndor).steps)
    assert text.count("Iteration ") == 3
    assert "Optimal solution found" in text


def test_format_solution(wyndor):
    text = format_solution(solve(wyndor))
    assert "Status: optimal" in text
    assert "Optimal value: 36" in text
    assert "x1 = 2, x2 = 6" in text
    assert "Iterations: 2" in text


def test_format_unbounded_solution():
    from simplex_tutor import LinearProgrammingProblem
    lp = LinearProgrammingProblem.from_dict({"c": [1, 1], "A": [[1, 0]], "b": [5]})
    text = format_solution(solve(lp))
    assert "Status: unbounded" in text


def test_format_sensitivity(wyndor):
    text = format_sensitivity(analyze(solve(wyndor)))
    assert "Shadow prices:" in text
    assert "3/2" in text
    assert "[6, 18]" in text
    assert "inf" in text
