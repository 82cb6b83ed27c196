"""Expression model for artlang.

Source is read into a closed set of immutable variants. Every variant carries
the offset of its first character in the source text (`location`), which the
evaluator reuses to attribute errors. Locations are metadata: they do not take
part in equality, so `Number(1.0, location=0) == Number(1.0, location=7)`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Union


@dataclass(frozen=True)
class Number:
    value: float
    location: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class String:
    value: str
    location: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class Boolean:
    value: bool
    location: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class Symbol:
    value: str
    location: Optional[int] = field(default=None, compare=False)


@dataclass(frozen=True)
class List:
    elements: tuple[Expr, ...] = ()
    location: Optional[int] = field(default=None, compare=False)


Expr = Union[Number, String, Boolean, Symbol, List]

Program = list[Expr]


def type_name(expr: Optional[Expr]) -> str:
    """Lower-case tag name used in error messages."""
    match expr:
        case Number():
            return "number"
        case String():
            return "string"
        case Boolean():
            return "boolean"
        case Symbol():
            return "symbol"
        case List():
            return "list"
        case None:
            return "undefined"
    raise TypeError(f"Not an expression: {expr!r}")


def format_number(value: float) -> str:
    """Render a number the way a JavaScript number literal prints.

    Shortest round-trip digits; plain notation for magnitudes in [1e-7, 1e21),
    exponent notation like `1e+21` or `1.5e-7` outside it.
    """
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # value == 0.<digits> * 10**point
    point = len(digits) + exponent

    if len(digits) <= point <= 21:
        return sign + digits + "0" * (point - len(digits))
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits

    e = point - 1
    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def debug_print(expr: Expr) -> str:
    match expr:
        case String(value=value):
            return f'"{value}"'
        case Number(value=value):
            return format_number(value)
        case Boolean(value=value):
            return "true" if value else "false"
        case Symbol(value=value):
            return value
        case List(elements=elements):
            return "(" + " ".join(debug_print(e) for e in elements) + ")"
    raise TypeError(f"Not an expression: {expr!r}")
