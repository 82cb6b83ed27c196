# Core type aliases and public entry points for artlang.
#
# Source text is read into immutable Expr values (Number, String, Boolean,
# Symbol, List) defined in artlang.types.expr. Runtime values are the same
# Expr values; drawing built-ins that only have side effects produce None.
#
# Naming guidance:
# - Expr:        syntactic forms as read by the parser (code-as-data).
# - ArtValue:    evaluated values; an Expr, or None for "no value".

from typing import Any, Callable, Optional

from artlang.types.expr import Expr

# Runtime value alias
ArtValue = Optional[Expr]

# Evaluator function type handed to built-in forms: (env, expr) -> ArtValue
EvaluatorFn = Callable[..., Any]

from artlang.reader.parser import parse  # noqa: E402
from artlang.evaluation.evaluator import evaluate, run  # noqa: E402
from artlang.interpreter import Interpreter  # noqa: E402

__all__ = ["ArtValue", "EvaluatorFn", "Expr", "Interpreter", "evaluate", "parse", "run"]
