import math

import pytest

from simplex_tutor import LinearProgrammingProblem, analyze, solve


def perturbed(problem, row, eps):
    cfg = problem.to_dict()
    cfg["b"][row] += eps
    return LinearProgrammingProblem.from_dict(cfg)


def test_wyndor_shadow_prices_and_reduced_costs(wyndor):
    res = analyze(solve(wyndor))

    assert [sp.constraint for sp in res.shadow_prices] == ["s1", "s2", "s3"]
    assert [sp.price for sp in res.shadow_prices] == pytest.approx([0.0, 1.5, 1.0])
    assert [rc.variable for rc in res.reduced_costs] == ["x1", "x2"]
    assert [rc.cost for rc in res.reduced_costs] == pytest.approx([0.0, 0.0])


def test_wyndor_rhs_ranges(wyndor):
    ranges = analyze(solve(wyndor)).rhs_ranges

    assert ranges[0].rhs == 4.0
    assert ranges[0].lower == pytest.approx(2.0)
    assert math.isinf(ranges[0].upper)
    assert (ranges[1].lower, ranges[1].upper) == pytest.approx((6.0, 18.0))
    assert (ranges[2].lower, ranges[2].upper) == pytest.approx((12.0, 24.0))


@pytest.mark.parametrize("row", [0, 1, 2])
@pytest.mark.parametrize("eps", [0.5, -0.5])
def test_shadow_price_predicts_rhs_change(wyndor, row, eps):
    base = solve(wyndor)
    price = analyze(base).shadow_prices[row].price
    moved = solve(perturbed(wyndor, row, eps))
    assert moved.optimal_value - base.optimal_value == pytest.approx(price * eps, abs=1e-9)


def test_minimization_shadow_prices_follow_reported_value(wyndor):
    cfg = wyndor.to_dict()
    cfg["c"] = [-3, -5]
    problem = LinearProgrammingProblem.from_dict(cfg, maximize=False)
    base = solve(problem)
    res = analyze(base)

    assert base.optimal_value == pytest.approx(-36.0)
    assert [sp.price for sp in res.shadow_prices] == pytest.approx([0.0, -1.5, -1.0])

    cfg["b"][1] += 0.5
    moved = solve(LinearProgrammingProblem.from_dict(cfg, maximize=False))
    assert moved.optimal_value - base.optimal_value == pytest.approx(-0.75)


def test_non_basic_variable_has_positive_reduced_cost():
    problem = LinearProgrammingProblem.from_dict({"c": [1, 3], "A": [[1, 1]], "b": [4]})
    res = analyze(solve(problem))
    # x1 stays out of the basis; its cost must rise by 2 to compete
    assert [rc.cost for rc in res.reduced_costs] == pytest.approx([2.0, 0.0])
    assert [sp.price for sp in res.shadow_prices] == pytest.approx([3.0])


def test_analysis_does_not_touch_solution(wyndor):
    sol = solve(wyndor)
    before = [t.matrix.copy() for t in sol.iterations]
    steps = list(sol.steps)
    analyze(sol)
    assert sol.steps == steps
    for old, tab in zip(before, sol.iterations):
        assert (old == tab.matrix).all()


def test_result_lengths():
    problem = LinearProgrammingProblem.from_dict({
        "c": [2, 3, 4], "A": [[3, 2, 1], [2, 5, 3]], "b": [10, 15],
    })
    res = analyze(solve(problem))
    assert len(res.shadow_prices) == 2
    assert len(res.reduced_costs) == 3
    assert len(res.rhs_ranges) == 2
