"""Core tree-walking evaluator for artlang.

`evaluate0` does the work and raises ArtlangError subclasses; `evaluate` and
`run` are the boundary where those become Err(LocatedError) values, so each
top-level expression fails on its own without affecting the others.
"""

from __future__ import annotations

import logging
from typing import Optional

from artlang import ArtValue
from artlang.errors import ArtlangError, ArtlangEvaluationError, ArtlangNotImplemented, ArtlangUnboundSymbol
from artlang.evaluation.builtins import BUILTINS, RESERVED
from artlang.surface import DrawingSurface
from artlang.types.environment import Environment
from artlang.types.expr import Boolean, Expr, List, Number, Program, String, Symbol, debug_print
from artlang.types.result import Err, LocatedError, Ok, Result

logger = logging.getLogger(__name__)

# Literals that are never looked up in the environment.
RESERVED_LITERALS = {
    "true": True,
    "false": False,
}


def run(
    program: Program,
    surface: DrawingSurface,
    width: Optional[float] = None,
    height: Optional[float] = None,
) -> list[Result[ArtValue, LocatedError]]:
    """Evaluate each top-level expression in order against one root Environment.

    The root scope is seeded with `width` and `height` (defaulting to the
    surface's own size). Root-level `set` persists from one expression to the
    next, and surface changes accumulate over the whole run.
    """
    env = root_environment(surface, width, height)
    results = [evaluate(env, expr) for expr in program]
    if logger.isEnabledFor(logging.DEBUG):
        failures = sum(1 for r in results if isinstance(r, Err))
        logger.debug("Evaluated %d expression(s), %d failed", len(results), failures)
    return results


def root_environment(
    surface: DrawingSurface,
    width: Optional[float] = None,
    height: Optional[float] = None,
    max_iterations: Optional[int] = None,
) -> Environment:
    env = Environment(surface, max_iterations=max_iterations)
    env.symbol_table.set("width", Number(float(surface.width if width is None else width)))
    env.symbol_table.set("height", Number(float(surface.height if height is None else height)))
    return env


def evaluate(env: Environment, expr: Expr) -> Result[ArtValue, LocatedError]:
    try:
        return Ok(evaluate0(env, expr))
    except ArtlangError as ex:
        return Err(ex.to_located())
    except RecursionError:
        return Err(LocatedError("Expression is nested too deeply", expr.location))


def evaluate0(env: Environment, expr: Expr) -> ArtValue:
    """Evaluate `expr` in `env`, raising ArtlangError on failure."""
    match expr:
        case Number() | String() | Boolean():
            return expr

        case Symbol(value=name):
            if name in RESERVED_LITERALS:
                return Boolean(RESERVED_LITERALS[name], expr.location)
            value = env.symbol_table.lookup(name)
            if value is None:
                raise ArtlangUnboundSymbol(f"Symbol {name} undefined", expr.location)
            return value

        case List(elements=()):
            raise ArtlangEvaluationError("Cannot evaluate empty list", expr.location)

        case List(elements=(Symbol(value=name), *tail)) if name in BUILTINS:
            try:
                return BUILTINS[name](list(tail), env, evaluate0)
            except ArtlangError as ex:
                # Attribute errors without a position to the enclosing form
                if ex.location is None:
                    ex.location = expr.location
                raise

        case List(elements=(Symbol(value=name), *_)) if name in RESERVED:
            raise ArtlangNotImplemented(f"Unimplemented built-in function {name}", expr.location)

        case List():
            raise ArtlangEvaluationError(f"Cannot evaluate list {debug_print(expr)}", expr.location)

    raise TypeError(f"Not an expression: {expr!r}")
