from __future__ import annotations

from artlang import EvaluatorFn
from artlang.errors import ArtlangArityError, ArtlangZeroDivisionError
from artlang.evaluation.builtins.common import eval_number
from artlang.types.environment import Environment
from artlang.types.expr import Expr, Number


def add_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
    total = 0.0
    for arg in tail:
        total += eval_number(arg, env, evaluate_fn, "Addition")
    return Number(total)


def subtract_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
    if not tail:
        return Number(0.0)
    first = eval_number(tail[0], env, evaluate_fn, "Subtraction")
    if len(tail) == 1:
        return Number(-first)
    result = first
    for arg in tail[1:]:
        result -= eval_number(arg, env, evaluate_fn, "Subtraction")
    return Number(result)


def multiply_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
    product = 1.0
    for arg in tail:
        product *= eval_number(arg, env, evaluate_fn, "Multiplication")
    return Number(product)


def divide_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Number:
    if not tail:
        raise ArtlangArityError("Division requires at least one argument")

    def divisor(arg: Expr) -> float:
        value = eval_number(arg, env, evaluate_fn, "Division")
        if value == 0:
            raise ArtlangZeroDivisionError("Division by zero", arg.location)
        return value

    if len(tail) == 1:
        return Number(1 / divisor(tail[0]))

    result = eval_number(tail[0], env, evaluate_fn, "Division")
    for arg in tail[1:]:
        result /= divisor(arg)
    return Number(result)
