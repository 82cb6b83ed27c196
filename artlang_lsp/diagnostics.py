"""
Convert artlang LocatedErrors into LSP diagnostics.

Parse errors are reported as errors. When the buffer parses, each top-level
expression is evaluated against a NullSurface with the lower language server
loop cap, and evaluation failures are reported as warnings, prefixed with the
expression's 1-based index.
"""

from __future__ import annotations

from typing import List, Optional

from lsprotocol.types import Diagnostic, DiagnosticSeverity, Position, Range

from artlang.config import get_canvas_size, lsp_evaluates, lsp_max_iterations
from artlang.interpreter import Interpreter
from artlang.surface import NullSurface
from artlang.types.result import Err, LocatedError, line_column

SOURCE = "artlang-ls"


def offset_to_position(text: str, offset: int) -> Position:
    line, column = line_column(text, offset)
    return Position(line=line - 1, character=column - 1)


def error_range(text: str, location: Optional[int], length: Optional[int]) -> Range:
    start = location or 0
    end = min(len(text), start + (length or 1))
    return Range(start=offset_to_position(text, start), end=offset_to_position(text, max(end, start)))


def _to_diagnostic(text: str, err: LocatedError, severity: DiagnosticSeverity, prefix: str = "") -> Diagnostic:
    return Diagnostic(
        range=error_range(text, err.location, err.length),
        message=prefix + err.message,
        severity=severity,
        source=SOURCE,
    )


def build_diagnostics(text: str, evaluate: Optional[bool] = None) -> List[Diagnostic]:
    if evaluate is None:
        evaluate = lsp_evaluates()

    width, height = get_canvas_size()
    interp = Interpreter(NullSurface(width=width, height=height), max_iterations=lsp_max_iterations())
    outcome = interp.eval(text)
    if isinstance(outcome, Err):
        return [_to_diagnostic(text, err, DiagnosticSeverity.Error) for err in outcome.value]
    if not evaluate:
        return []

    diags: List[Diagnostic] = []
    for index, res in enumerate(outcome.value, start=1):
        if isinstance(res, Err):
            diags.append(_to_diagnostic(text, res.value, DiagnosticSeverity.Warning, f"Expression {index}: "))
    return diags
