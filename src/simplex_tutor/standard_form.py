from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from .problem import LinearProgrammingProblem, ValidationError


@dataclass(frozen=True, eq=False)
class StandardForm:
    """Maximize-only problem with one slack column per constraint.

    `c` and `A` are extended with the slack columns (zero cost, identity block),
    `b` is the untouched right-hand side.
    """
    c: np.ndarray
    A: np.ndarray
    b: np.ndarray
    var_names: List[str]
    original_names: List[str]
    slack_names: List[str]
    maximize: bool

    @property
    def n_original(self) -> int:
        return len(self.original_names)

    @property
    def m(self) -> int:
        return len(self.slack_names)


def convert(
    c: Sequence[float],
    A: Sequence[Sequence[float]],
    b: Sequence[float],
    maximize: bool,
    var_names: Sequence[str],
) -> StandardForm:
    m, n = len(A), len(c)
    # Convert to maximization
    c_max = np.array(c, dtype=float)
    if not maximize:
        c_max = -c_max

    A_ext = np.hstack([np.array(A, dtype=float).reshape(m, n), np.eye(m)])
    c_ext = np.concatenate([c_max, np.zeros(m)])
    slack_names = [f"s{i+1}" for i in range(m)]
    clash = set(var_names) & set(slack_names)
    if clash:
        raise ValidationError(f"variable names clash with slack names: {sorted(clash)}")

    return StandardForm(
        c=c_ext,
        A=A_ext,
        b=np.array(b, dtype=float),
        var_names=list(var_names) + slack_names,
        original_names=list(var_names),
        slack_names=slack_names,
        maximize=maximize,
    )


def to_standard_form(lp: LinearProgrammingProblem) -> StandardForm:
    return convert(lp.objective, lp.A, lp.b, lp.maximize, lp.variables)
