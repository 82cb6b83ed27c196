"""
  artlang reader: recursive-descent parser with error recovery.

Grammar:

    program := (ws* expr)* ws*
    expr    := list | string | number | symbol
    list    := '(' (ws* expr)* ws* ')'
    string  := '"' char* '"'              no escape sequences
    number  := '-'? digit+ ('.' digit+)?
    symbol  := run of chars excluding whitespace, '(', ')', '"'

Each production returns a Result. Errors found while reading one top-level
expression are collected together; the driver then resumes after it so that
independent errors further on are reported in the same pass.
"""

from __future__ import annotations

import re

from artlang.reader.cursor import Cursor
from artlang.types.expr import Expr, List, Number, Program, String, Symbol
from artlang.types.result import Err, LocatedError, Ok, Result

ParseResult = Result[Expr, list[LocatedError]]

DIGITS = frozenset("0123456789")
DELIMITERS = frozenset('()"')
NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")

MISSING_CLOSE_PAREN = "Unexpected end of input - missing closing parenthesis"
UNEXPECTED_CLOSE_PAREN = "Unexpected closing parenthesis"
UNTERMINATED_STRING = "Unterminated string literal"


def parse(source: str) -> Result[Program, list[LocatedError]]:
    """Parse `source` into a Program, or every syntax error found in it."""
    cursor = Cursor(source)
    program: Program = []
    errors: list[LocatedError] = []

    while True:
        cursor.skip_whitespace()
        if not cursor.has_next():
            break
        start = cursor.pos()
        try:
            res = parse_expr(cursor)
        except RecursionError:
            errors.append(LocatedError("Expression is nested too deeply", start))
            break
        if isinstance(res, Err):
            errors.extend(res.value)
            if cursor.pos() == start:
                cursor.next()
        else:
            program.append(res.value)

    if errors:
        return Err(errors)
    return Ok(program)


def parse_expr(cursor: Cursor) -> ParseResult:
    ch = cursor.peek()
    if ch is None:
        return Err([LocatedError("Unexpected end of input", cursor.pos())])
    if ch == "(":
        return parse_list(cursor)
    if ch == ")":
        location = cursor.pos()
        cursor.next()
        return Err([LocatedError(UNEXPECTED_CLOSE_PAREN, location, 1)])
    if ch == '"':
        return parse_string(cursor)
    if ch in DIGITS or (ch == "-" and cursor.peek(1) in DIGITS):
        return parse_number(cursor)
    return parse_symbol(cursor)


def parse_list(cursor: Cursor) -> ParseResult:
    location = cursor.pos()
    cursor.next()  # (
    elements: list[Expr] = []
    errors: list[LocatedError] = []

    while True:
        cursor.skip_whitespace()
        ch = cursor.peek()
        if ch is None:
            errors.append(LocatedError(MISSING_CLOSE_PAREN, location, 1))
            return Err(errors)
        if ch == ")":
            cursor.next()
            break
        res = parse_expr(cursor)
        if isinstance(res, Err):
            errors.extend(res.value)
        else:
            elements.append(res.value)

    if errors:
        return Err(errors)
    return Ok(List(tuple(elements), location))


def parse_string(cursor: Cursor) -> ParseResult:
    location = cursor.pos()
    cursor.next()  # opening quote
    chars: list[str] = []
    while True:
        ch = cursor.next()
        if ch is None:
            return Err([LocatedError(UNTERMINATED_STRING, location, len(chars) + 1)])
        if ch == '"':
            return Ok(String("".join(chars), location))
        chars.append(ch)


def parse_number(cursor: Cursor) -> ParseResult:
    location = cursor.pos()
    token: list[str] = []
    if cursor.peek() == "-":
        token.append(cursor.next())
    while cursor.peek() is not None and (cursor.peek() in DIGITS or cursor.peek() == "."):
        token.append(cursor.next())

    text = "".join(token)
    if not NUMBER_RE.fullmatch(text):
        return Err([LocatedError(f"Invalid number format '{text}'", location, len(text))])
    return Ok(Number(float(text), location))


def parse_symbol(cursor: Cursor) -> ParseResult:
    location = cursor.pos()
    token: list[str] = []
    while True:
        ch = cursor.peek()
        if ch is None or ch.isspace() or ch in DELIMITERS:
            break
        token.append(cursor.next())
    return Ok(Symbol("".join(token), location))
