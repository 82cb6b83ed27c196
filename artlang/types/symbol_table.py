"""Scoped name bindings for artlang.

A SymbolTable maps names to evaluated expressions and links to the table of
the enclosing scope through `outer`. Lookups walk from the innermost table
outwards, so inner bindings shadow outer ones. Child tables are created by
`enter_scope` for each `let` and simply dropped when the `let` returns.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from artlang.types.expr import Expr, Symbol, debug_print


def _name_of(name: str | Symbol) -> str:
    return name.value if isinstance(name, Symbol) else name


class SymbolTable:
    """Hierarchical mapping from names to artlang values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[SymbolTable] = None):
        self.vars: dict[str, Expr] = {}
        self.outer: SymbolTable | None = outer

    def set(self, name: str | Symbol, value: Expr) -> None:
        """Bind `name` to `value` in this table only.

        The parent chain is not consulted; callers that want to update an
        existing binding use `find` first.
        """
        self.vars[_name_of(name)] = value

    def find(self, name: str | Symbol) -> Optional[SymbolTable]:
        """Find the nearest table in the chain that binds `name`."""
        key = _name_of(name)
        table: Optional[SymbolTable] = self
        while table is not None:
            if key in table.vars:
                return table
            table = table.outer
        return None

    def lookup(self, name: str | Symbol) -> Optional[Expr]:
        table = self.find(name)
        if table is None:
            return None
        return table.vars[_name_of(name)]

    def has_local(self, name: str | Symbol) -> bool:
        return _name_of(name) in self.vars

    def get_local_symbols(self) -> list[str]:
        return list(self.vars)

    def enter_scope(self) -> SymbolTable:
        return SymbolTable(outer=self)

    def exit_scope(self) -> Optional[SymbolTable]:
        return self.outer

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {debug_print(v)}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<SymbolTable chain: ")
            chain = []
            table = self
            while table is not None:
                with StringIO() as frame:
                    table._write_vars(frame)
                    chain.append(frame.getvalue())
                table = table.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
