from artlang import EvaluatorFn
from artlang.errors import ArtlangArityError, ArtlangEvaluationError
from artlang.evaluation.builtins.common import truthiness
from artlang.types.environment import Environment
from artlang.types.expr import Expr


def if_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Expr:
    if len(tail) != 3:
        raise ArtlangArityError(
            "if requires exactly 3 arguments: (if condition true_expr false_expr)"
        )

    cond_expr, true_expr, false_expr = tail
    cond = evaluate_fn(env, cond_expr)

    # Only the chosen branch is evaluated
    if truthiness(cond, "if", cond_expr.location):
        branch, label = true_expr, "true"
    else:
        branch, label = false_expr, "false"

    result = evaluate_fn(env, branch)
    if result is None:
        raise ArtlangEvaluationError(f"if {label} branch produced no result", branch.location)
    return result
