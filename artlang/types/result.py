"""Success/failure values used at the parse and evaluate boundaries.

Parsing returns ``Result[Program, list[LocatedError]]`` so that several
independent syntax errors can be reported at once; evaluation returns
``Result[Expr | None, LocatedError]``, one per top-level expression.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class LocatedError:
    """An error message plus the source span it pertains to."""

    message: str
    location: Optional[int] = None
    length: Optional[int] = None


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    value: E


Result = Union[Ok[T], Err[E]]


def line_column(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of `offset` within `source`."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column
