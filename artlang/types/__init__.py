from artlang.types.expr import Boolean, Expr, List, Number, Program, String, Symbol, debug_print, type_name
from artlang.types.result import Err, LocatedError, Ok, Result, line_column
from artlang.types.symbol_table import SymbolTable
