from __future__ import annotations

from typing import Callable, Optional


class Cursor:
    """Peekable walk over the characters of a source string.

    `pos()` is always the offset of the next character to be consumed, which
    is what the parser records as an expression's location.
    """

    __slots__ = ("chars", "position")

    def __init__(self, source: str):
        self.chars: list[str] = list(source)
        self.position = 0

    def peek(self, offset: int = 0) -> Optional[str]:
        i = self.position + offset
        if i >= len(self.chars):
            return None
        return self.chars[i]

    def next(self) -> Optional[str]:
        if self.position >= len(self.chars):
            return None
        ch = self.chars[self.position]
        self.position += 1
        return ch

    def skip_while(self, pred: Callable[[str], bool]) -> None:
        while self.position < len(self.chars) and pred(self.chars[self.position]):
            self.position += 1

    def skip_whitespace(self) -> None:
        self.skip_while(str.isspace)

    def has_next(self) -> bool:
        return self.position < len(self.chars)

    def pos(self) -> int:
        return self.position
