from __future__ import annotations

from typing import Optional

from artlang.types.result import LocatedError


class ArtlangError(Exception):
    """ Base class for all artlang errors"""

    def __init__(self, message: str, location: Optional[int] = None, length: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.location = location
        self.length = length

    def to_located(self) -> LocatedError:
        return LocatedError(self.message, self.location, self.length)


class ArtlangUnboundSymbol(ArtlangError):
    """ Raised when a symbol is used before it is bound"""

class ArtlangArityError(ArtlangError):
    """ Raised when a built-in receives the wrong number of arguments"""

class ArtlangTypeError(ArtlangError):
    """ Raised when the types of arguments passed to a built-in are incorrect"""

class ArtlangZeroDivisionError(ArtlangError):
    """ Raised when dividing by zero"""

class ArtlangLoopLimitError(ArtlangError):
    """ Raised when a while loop runs past the iteration cap"""

class ArtlangNotImplemented(ArtlangError):
    """ Raised for reserved built-in names with no implementation"""

class ArtlangEvaluationError(ArtlangError):
    """ Raised when a form cannot be evaluated at all"""
