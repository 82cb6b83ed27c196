from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from artlang.surface import DrawingSurface
from artlang.types.symbol_table import SymbolTable


@dataclass
class Environment:
    """Evaluation context threaded through every call.

    Pairs the current scope with the drawing surface. `child` opens a new
    scope for `let` while keeping the same surface. `max_iterations`
    overrides the global `while` cap when set.
    """

    surface: DrawingSurface
    symbol_table: SymbolTable = field(default_factory=SymbolTable)
    max_iterations: Optional[int] = None

    def child(self) -> Environment:
        return Environment(self.surface, self.symbol_table.enter_scope(), self.max_iterations)
