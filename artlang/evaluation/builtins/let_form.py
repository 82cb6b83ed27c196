from __future__ import annotations

from typing import Optional

from artlang import EvaluatorFn
from artlang.errors import ArtlangArityError, ArtlangEvaluationError, ArtlangTypeError
from artlang.types.environment import Environment
from artlang.types.expr import Expr, List, Symbol


def let_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Optional[Expr]:
    """(let ((sym expr) ...) body...)

    Bindings are evaluated in order inside the new scope, so later bindings
    see earlier ones. The scope is dropped when the form returns.
    """
    if len(tail) < 2:
        raise ArtlangArityError(
            "Not enough arguments to `let` statement", tail[0].location if tail else None
        )

    bindings, *body = tail
    if not isinstance(bindings, List):
        raise ArtlangTypeError("First argument to `let` must be a list", bindings.location)

    scoped = env.child()
    for binding in bindings.elements:
        if (
            not isinstance(binding, List)
            or len(binding.elements) != 2
            or not isinstance(binding.elements[0], Symbol)
        ):
            raise ArtlangTypeError("Bindings must be of form (symbol expr)", binding.location)

        sym, expr = binding.elements
        value = evaluate_fn(scoped, expr)
        if value is None:
            raise ArtlangEvaluationError(
                "Expression did not evaluate to an expression", expr.location
            )
        scoped.symbol_table.set(sym, value)

    result: Optional[Expr] = None
    for expr in body:
        result = evaluate_fn(scoped, expr)
    return result
