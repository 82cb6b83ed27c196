from artlang import EvaluatorFn
from artlang.errors import ArtlangArityError, ArtlangEvaluationError, ArtlangUnboundSymbol
from artlang.types.environment import Environment
from artlang.types.expr import Expr, Symbol


def set_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Expr:
    """(set sym expr): rebind `sym` in the scope that already holds it."""
    if len(tail) != 2:
        raise ArtlangArityError("set requires 2 arguments", tail[0].location if tail else None)

    var_sym, val_expr = tail
    owner = env.symbol_table.find(var_sym) if isinstance(var_sym, Symbol) else None
    if owner is None:
        raise ArtlangUnboundSymbol(
            "The first argument to set must be a symbol in scope", var_sym.location
        )

    value = evaluate_fn(env, val_expr)
    if value is None:
        raise ArtlangEvaluationError(
            "The second argument to set must be an expression", val_expr.location
        )
    owner.set(var_sym, value)
    return value
