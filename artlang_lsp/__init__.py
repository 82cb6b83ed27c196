"""artlang Language Server package.

This package provides a pygls-based Language Server for artlang that reports
parse errors and, optionally, evaluation errors as diagnostics, and offers
hover and completion for the built-in forms.
"""

__all__ = [
    "diagnostics",
    "server",
]
