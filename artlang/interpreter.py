from __future__ import annotations

from typing import Optional

from artlang import ArtValue
from artlang.evaluation.evaluator import evaluate, root_environment
from artlang.reader.parser import parse
from artlang.surface import DrawingSurface, RecordingSurface
from artlang.types.result import Err, LocatedError, Ok, Result


class Interpreter:
    """
    A session that keeps one root Environment and surface alive across feeds.
    Each call to `eval` parses the whole chunk first; if it does not parse,
    nothing in it is evaluated.
    """
    def __init__(
        self,
        surface: Optional[DrawingSurface] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
        max_iterations: Optional[int] = None,
    ):
        self.surface = surface if surface is not None else RecordingSurface()
        self.env = root_environment(self.surface, width, height, max_iterations)

    def eval(self, code: str) -> Result[list[Result[ArtValue, LocatedError]], list[LocatedError]]:
        parsed = parse(code)
        if isinstance(parsed, Err):
            return parsed
        return Ok([evaluate(self.env, expr) for expr in parsed.value])
