"""Argument helpers shared by the built-in forms."""

from __future__ import annotations

from typing import Optional

from artlang import EvaluatorFn
from artlang.errors import ArtlangArityError, ArtlangEvaluationError, ArtlangTypeError
from artlang.types.environment import Environment
from artlang.types.expr import Boolean, Expr, Number, String, type_name


def expect_arity(name: str, tail: list[Expr], count: int) -> None:
    if len(tail) != count:
        plural = "argument" if count == 1 else "arguments"
        raise ArtlangArityError(f"{name} requires exactly {count} {plural}")


def eval_number(
    arg: Expr, env: Environment, evaluate_fn: EvaluatorFn, what: str
) -> float:
    """Evaluate `arg` and insist on a number; `what` prefixes the error."""
    value = evaluate_fn(env, arg)
    if not isinstance(value, Number):
        raise ArtlangTypeError(f"{what} requires numbers, got {type_name(value)}", arg.location)
    return value.value


def eval_numbers(
    tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn, what: str
) -> list[float]:
    return [eval_number(arg, env, evaluate_fn, what) for arg in tail]


CONDITION_FORMS = {"if": "if statement", "while": "while loop"}


def truthiness(value: Optional[Expr], keyword: str, location: Optional[int]) -> bool:
    """Number != 0, String != "", Boolean as is; anything else is an error."""
    match value:
        case Boolean(value=b):
            return b
        case Number(value=n):
            return n != 0
        case String(value=s):
            return s != ""
        case None:
            raise ArtlangEvaluationError(f"Cannot evaluate condition for {CONDITION_FORMS[keyword]}", location)
    raise ArtlangTypeError(f"Unsupported condition type for {keyword}: {type_name(value)}", location)
