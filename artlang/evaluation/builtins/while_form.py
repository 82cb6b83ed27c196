from artlang import EvaluatorFn, config
from artlang.errors import ArtlangArityError, ArtlangLoopLimitError
from artlang.evaluation.builtins.common import truthiness
from artlang.types.environment import Environment
from artlang.types.expr import Boolean, Expr


def while_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> Boolean:
    """(while test body...): runs body until test is falsy, then returns false.

    The body runs in the current scope. Exceeding the iteration cap is an
    error rather than a silent stop.
    """
    if not tail:
        raise ArtlangArityError("while requires a condition")

    test_expr, *body = tail
    limit = env.max_iterations if env.max_iterations is not None else config.MAX_LOOP_ITERATIONS
    iterations = 0
    while True:
        cond = evaluate_fn(env, test_expr)
        if not truthiness(cond, "while", test_expr.location):
            return Boolean(False)
        if iterations >= limit:
            raise ArtlangLoopLimitError(f"Loop exceeded maximum of {limit} iterations")
        iterations += 1
        for expr in body:
            evaluate_fn(env, expr)
