import math

import pytest

from artlang import Interpreter
from artlang.surface import NONE_COLOR, DrawingSurface, NullSurface, Operation, RecordingSurface
from artlang.types.expr import Number, String
from artlang.types.result import Ok, Err


def _kinds(surface):
    return [op.type for op in surface.get_operations()]


def test_rect_uses_width_and_height(eval_one, surface):
    assert eval_one("(rect 0 0 width height)") == Ok(None)
    rects = surface.get_operations("rect")
    assert rects == [Operation("rect", (0, 0, 300, 300))]


def test_rect_fills_then_strokes_by_default(eval_one, surface):
    eval_one("(rect 10 20 30 40)")
    assert _kinds(surface) == ["begin_path", "rect", "fill", "stroke"]


def test_no_fill_suppresses_fill(run_source, surface):
    run_source("(noFill) (rect 1 2 3 4)")
    assert _kinds(surface) == ["begin_path", "rect", "stroke"]
    assert surface.fill_style == NONE_COLOR


def test_no_stroke_suppresses_stroke(run_source, surface):
    run_source("(noStroke) (rect 1 2 3 4)")
    assert _kinds(surface) == ["begin_path", "rect", "fill"]


def test_no_fill_and_no_stroke_still_builds_path(run_source, surface):
    run_source("(noFill) (noStroke) (rect 1 2 3 4)")
    assert _kinds(surface) == ["begin_path", "rect"]


def test_line_never_fills(eval_one, surface):
    eval_one("(line 0 0 100 50)")
    assert surface.get_operations() == [
        Operation("begin_path"),
        Operation("move_to", (0, 0)),
        Operation("line_to", (100, 50)),
        Operation("stroke", ("#000000",)),
    ]


def test_line_with_no_stroke_draws_nothing_visible(run_source, surface):
    run_source("(noStroke) (line 0 0 1 1)")
    assert "stroke" not in _kinds(surface)
    assert "fill" not in _kinds(surface)


def test_colors_apply_to_later_draws(run_source, surface):
    run_source('(fill "red") (stroke "blue") (rect 0 0 1 1) (fill "green") (rect 0 0 1 1)')
    fills = [op.args[0] for op in surface.get_operations("fill")]
    strokes = [op.args[0] for op in surface.get_operations("stroke")]
    assert fills == ["red", "green"]
    assert strokes == ["blue", "blue"]


def test_fill_after_no_fill_reenables_filling(run_source, surface):
    run_source('(noFill) (fill "red") (rect 0 0 1 1)')
    assert "fill" in _kinds(surface)


def test_color_forms_return_no_value(run_source):
    assert run_source('(fill "red") (stroke "red") (noFill) (noStroke)') == [Ok(None)] * 4


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(rgb 255 0 0)", "rgb(255,0,0)"),
        ("(rgb 12.7 300 -5)", "rgb(12,255,0)"),
        ("(rgb (* 2 50) 0.5 254.99)", "rgb(100,0,254)"),
    ],
)
def test_rgb(eval_one, source, expected):
    assert eval_one(source) == Ok(String(expected))


def test_rgb_feeds_fill(run_source, surface):
    run_source("(fill (rgb 10 20 30)) (rect 0 0 1 1)")
    assert surface.get_operations("fill")[0].args == ("rgb(10,20,30)",)


def test_circle(eval_one, surface):
    eval_one("(circle 50 60 10)")
    assert surface.get_operations("arc") == [Operation("arc", (50, 60, 10, 0, 2 * math.pi, False))]
    assert _kinds(surface) == ["begin_path", "arc", "fill", "stroke"]


def test_drawing_accumulates_across_expressions_and_failures(run_source, surface):
    results = run_source("(rect 0 0 1 1) (rect 0 0 nope 1) (line 0 0 1 1)")
    assert isinstance(results[1], Err)
    assert len(surface.get_operations("begin_path")) == 2


def test_let_scopes_share_the_surface(eval_one, surface):
    eval_one('(let ((c "red")) (fill c) (rect 0 0 1 1))')
    assert surface.fill_style == "red"
    assert surface.get_operations("fill")[0].args == ("red",)


@pytest.mark.parametrize(
    "source, message, location",
    [
        ("(rect 0 0 1)", "rect requires exactly 4 arguments", 0),
        ('(rect 0 0 1 "x")', "rect requires numbers, got string", 12),
        ("(line 0 0 1)", "line requires exactly 4 arguments", 0),
        ("(line 0 true 1 1)", "line requires numbers, got boolean", 8),
        ("(circle 0 0)", "circle requires exactly 3 arguments", 0),
        ("(rgb 1 2)", "rgb requires exactly 3 arguments", 0),
        ('(rgb 1 2 "3")', "rgb requires numbers, got string", 9),
        ("(fill)", "fill requires exactly 1 argument", 0),
        ("(fill 1)", "fill requires a color string, got number", 6),
        ("(stroke true)", "stroke requires a color string, got boolean", 8),
        ("(noFill 1)", "noFill takes no arguments", 8),
        ('(noStroke "x")', "noStroke takes no arguments", 10),
    ],
)
def test_drawing_errors(eval_one, source, message, location):
    result = eval_one(source)
    assert isinstance(result, Err)
    assert result.value.message == message
    assert result.value.location == location


def test_type_error_does_not_touch_surface(eval_one, surface):
    eval_one('(rect 0 0 1 "x")')
    assert surface.get_operations() == []


def test_recording_surface_defaults(monkeypatch):
    monkeypatch.delenv("ARTLANG_CANVAS_SIZE", raising=False)
    s = RecordingSurface()
    assert (s.width, s.height) == (800, 600)
    assert s.get_operations() == []


def test_recording_surface_size_from_environment(monkeypatch):
    monkeypatch.setenv("ARTLANG_CANVAS_SIZE", "1200x900")
    s = RecordingSurface()
    assert (s.width, s.height) == (1200, 900)


def test_clear_operations(surface):
    surface.begin_path()
    surface.clear_operations()
    assert surface.get_operations() == []


def test_null_surface_discards_drawing_but_tracks_styles():
    surface = NullSurface(width=50, height=40)
    assert isinstance(surface, DrawingSurface)
    results = Interpreter(surface).eval(
        '(fill (rgb 1 2 3)) (stroke "red") (rect 0 0 width height) (line 0 0 1 1) (circle 5 5 2) width'
    ).value
    assert all(isinstance(r, Ok) for r in results)
    assert results[-1] == Ok(Number(50))
    assert surface.fill_style == "rgb(1,2,3)"
    assert surface.stroke_style == "red"
    assert not hasattr(surface, "operations")
