"""Drawing built-ins: colour state and shape primitives.

Colour forms only change the surface's fill/stroke style. Shape forms read
the current styles at draw time and skip the fill or stroke whose style is
the "none" sentinel.
"""

from __future__ import annotations

import math

from artlang import EvaluatorFn
from artlang.errors import ArtlangArityError, ArtlangTypeError
from artlang.evaluation.builtins.common import eval_numbers, expect_arity
from artlang.surface import NONE_COLOR, DrawingSurface
from artlang.types.environment import Environment
from artlang.types.expr import Expr, String, type_name


def _channel(value: float) -> int:
    return math.floor(min(255.0, max(0.0, value)))


def rgb_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> String:
    expect_arity("rgb", tail, 3)
    r, g, b = (_channel(v) for v in eval_numbers(tail, env, evaluate_fn, "rgb"))
    return String(f"rgb({r},{g},{b})")


def _color_setter(name: str, attr: str):
    def form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> None:
        expect_arity(name, tail, 1)
        value = evaluate_fn(env, tail[0])
        if not isinstance(value, String):
            raise ArtlangTypeError(
                f"{name} requires a color string, got {type_name(value)}", tail[0].location
            )
        setattr(env.surface, attr, value.value)
        return None

    form.__name__ = f"{name}_form"
    return form


def _color_clearer(name: str, attr: str):
    def form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> None:
        if tail:
            raise ArtlangArityError(f"{name} takes no arguments", tail[0].location)
        setattr(env.surface, attr, NONE_COLOR)
        return None

    form.__name__ = f"{name}_form"
    return form


stroke_form = _color_setter("stroke", "stroke_style")
fill_form = _color_setter("fill", "fill_style")
no_stroke_form = _color_clearer("noStroke", "stroke_style")
no_fill_form = _color_clearer("noFill", "fill_style")


def _paint(surface: DrawingSurface, fill: bool = True) -> None:
    if fill and surface.fill_style != NONE_COLOR:
        surface.fill()
    if surface.stroke_style != NONE_COLOR:
        surface.stroke()


def rect_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> None:
    expect_arity("rect", tail, 4)
    x, y, w, h = eval_numbers(tail, env, evaluate_fn, "rect")
    surface = env.surface
    surface.begin_path()
    surface.rect(x, y, w, h)
    _paint(surface)
    return None


def line_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> None:
    expect_arity("line", tail, 4)
    x1, y1, x2, y2 = eval_numbers(tail, env, evaluate_fn, "line")
    surface = env.surface
    surface.begin_path()
    surface.move_to(x1, y1)
    surface.line_to(x2, y2)
    # A line has no interior.
    _paint(surface, fill=False)
    return None


def circle_form(tail: list[Expr], env: Environment, evaluate_fn: EvaluatorFn) -> None:
    expect_arity("circle", tail, 3)
    x, y, radius = eval_numbers(tail, env, evaluate_fn, "circle")
    surface = env.surface
    surface.begin_path()
    surface.arc(x, y, radius, 0, 2 * math.pi)
    _paint(surface)
    return None
