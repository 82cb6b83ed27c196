"""Numeric comparison and equality built-ins.

Arguments are evaluated left to right, each at most once. Evaluation stops at
the first pair that fails the relation, like a chained `and`.
"""

from __future__ import annotations

import operator
from typing import Callable

from artlang import EvaluatorFn
from artlang.errors import ArtlangArityError, ArtlangTypeError
from artlang.types.environment import Environment
from artlang.types.expr import Boolean, Expr, Number, String, type_name

COMPARISONS: dict[str, tuple[str, Callable[[float, float], bool]]] = {
    ">": ("Greater than", operator.gt),
    ">=": ("Greater than or equal", operator.ge),
    "<": ("Less than", operator.lt),
    "<=": ("Less than or equal", operator.le),
}


def _comparison_form(op: str):
    label, relation = COMPARISONS[op]

    def form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Boolean:
        if len(tail) < 2:
            raise ArtlangArityError(f"{label} ({op}) requires at least 2 arguments")

        left = evaluate_fn(env, tail[0])
        for i in range(1, len(tail)):
            right = evaluate_fn(env, tail[i])
            if not isinstance(left, Number) or not isinstance(right, Number):
                bad = tail[i - 1] if not isinstance(left, Number) else tail[i]
                raise ArtlangTypeError(
                    f"Comparison requires numbers, got {type_name(left)} and {type_name(right)}",
                    bad.location,
                )
            if not relation(left.value, right.value):
                return Boolean(False)
            left = right
        return Boolean(True)

    form.__name__ = f"compare_{label.lower().replace(' ', '_')}_form"
    return form


greater_than_form = _comparison_form(">")
greater_equal_form = _comparison_form(">=")
less_than_form = _comparison_form("<")
less_equal_form = _comparison_form("<=")


def equal_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Boolean:
    if len(tail) < 2:
        raise ArtlangArityError("Equality (=) requires at least 2 arguments")

    first = evaluate_fn(env, tail[0])
    if not isinstance(first, (Number, String, Boolean)):
        raise ArtlangTypeError(
            f"Equality comparison not supported for type {type_name(first)}", tail[0].location
        )

    for arg in tail[1:]:
        other = evaluate_fn(env, arg)
        if other is None:
            raise ArtlangTypeError(
                f"Equality comparison not supported for type {type_name(other)}", arg.location
            )
        if type(other) is not type(first):
            return Boolean(False)
        if other.value != first.value:
            return Boolean(False)
    return Boolean(True)
