from __future__ import annotations

"""
Problem description for the solvers.

A problem is built once from structured input and never mutated:
- maximize: bool (True for max, False for min)
- objective: one coefficient per decision variable
- constraints: rows of coefficients with a sense in {"<=", ">=", "="} and a RHS
- variables: decision-variable names (default x1..xn)

`from_dict` accepts the JSON model layout used by the CLI and the web page:
{"c": [...], "A": [[...]], "b": [...], "senses": [...], "maximize": true}
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Sequence

LE, GE, EQ = "<=", ">=", "="

# Accept the typographic operators as well
SENSE_ALIASES = {
    "<=": LE, "≤": LE, "=<": LE,
    ">=": GE, "≥": GE, "=>": GE,
    "=": EQ, "==": EQ,
}


class ValidationError(ValueError):
    """Raised for malformed problems or shapes a solver does not support."""


def normalize_sense(sense: str) -> str:
    try:
        return SENSE_ALIASES[str(sense).strip()]
    except KeyError:
        raise ValidationError(f"sense must be one of <=, >=, = (got {sense!r})") from None


@dataclass(frozen=True)
class Constraint:
    coefficients: Tuple[float, ...]
    sense: str
    rhs: float

    def __post_init__(self):
        object.__setattr__(self, "coefficients", tuple(float(v) for v in self.coefficients))
        object.__setattr__(self, "sense", normalize_sense(self.sense))
        object.__setattr__(self, "rhs", float(self.rhs))

    def lhs(self, values: Sequence[float]) -> float:
        return sum(a * v for a, v in zip(self.coefficients, values))

    def is_satisfied(self, values: Sequence[float], tol: float = 1e-8) -> bool:
        lhs = self.lhs(values)
        if self.sense == LE:
            return lhs <= self.rhs + tol
        if self.sense == GE:
            return lhs >= self.rhs - tol
        return abs(lhs - self.rhs) <= tol


@dataclass(frozen=True)
class LinearProgrammingProblem:
    objective: Tuple[float, ...]
    constraints: Tuple[Constraint, ...]
    variables: Tuple[str, ...] = field(default=())
    maximize: bool = True

    def __post_init__(self):
        objective = tuple(float(v) for v in self.objective)
        constraints = tuple(
            c if isinstance(c, Constraint) else Constraint(*c) for c in self.constraints
        )
        variables = tuple(self.variables) or tuple(f"x{j+1}" for j in range(len(objective)))
        object.__setattr__(self, "objective", objective)
        object.__setattr__(self, "constraints", constraints)
        object.__setattr__(self, "variables", variables)
        object.__setattr__(self, "maximize", bool(self.maximize))
        self.validate()

    @property
    def num_vars(self) -> int:
        return len(self.variables)

    @property
    def num_constraints(self) -> int:
        return len(self.constraints)

    @property
    def A(self) -> List[List[float]]:
        return [list(c.coefficients) for c in self.constraints]

    @property
    def b(self) -> List[float]:
        return [c.rhs for c in self.constraints]

    @property
    def senses(self) -> List[str]:
        return [c.sense for c in self.constraints]

    def validate(self) -> None:
        n = len(self.variables)
        if n == 0:
            raise ValidationError("problem has no decision variables")
        if not self.constraints:
            raise ValidationError("problem has no constraints")
        if len(set(self.variables)) != n:
            raise ValidationError(f"variable names must be unique: {list(self.variables)}")
        if len(self.objective) != n:
            raise ValidationError(
                f"objective has {len(self.objective)} coefficients for {n} variables"
            )
        for i, c in enumerate(self.constraints):
            if len(c.coefficients) != n:
                raise ValidationError(
                    f"constraint {i+1} has {len(c.coefficients)} coefficients for {n} variables"
                )

    def require_origin_feasible(self) -> None:
        """Reject shapes that need artificial variables (any >=, = or negative RHS)."""
        for i, c in enumerate(self.constraints):
            if c.sense != LE:
                raise ValidationError(
                    f"constraint {i+1} uses '{c.sense}'; only '<=' constraints are supported "
                    "by the tableau solver (no phase 1)"
                )
            if c.rhs < 0:
                raise ValidationError(
                    f"constraint {i+1} has negative right-hand side {c.rhs:g}; "
                    "the origin must be feasible"
                )

    def objective_value(self, values: Sequence[float]) -> float:
        return sum(c * v for c, v in zip(self.objective, values))

    @classmethod
    def from_dict(cls, cfg: Dict[str, object], maximize: Optional[bool] = None) -> "LinearProgrammingProblem":
        try:
            c = cfg["c"]
            A = cfg["A"]
            b = cfg["b"]
        except KeyError as e:
            raise ValidationError(f"missing field {e.args[0]!r}") from None
        senses = cfg.get("senses") or [LE] * len(A)
        if len(A) != len(b) or len(A) != len(senses):
            raise ValidationError("A, b and senses must have the same number of rows")
        if maximize is None:
            maximize = bool(cfg.get("maximize", True))
        try:
            constraints = tuple(Constraint(row, s, rhs) for row, s, rhs in zip(A, senses, b))
        except (TypeError, ValueError) as e:
            if isinstance(e, ValidationError):
                raise
            raise ValidationError(f"invalid constraint data: {e}") from e
        return cls(
            objective=tuple(c),
            constraints=constraints,
            variables=tuple(cfg.get("variables") or ()),
            maximize=maximize,
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "c": list(self.objective),
            "A": self.A,
            "b": self.b,
            "senses": self.senses,
            "maximize": self.maximize,
            "variables": list(self.variables),
        }
