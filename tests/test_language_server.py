import time

import pytest

pytest.importorskip("pygls")

from lsprotocol.types import DiagnosticSeverity, Position

from artlang_lsp.diagnostics import build_diagnostics, error_range, offset_to_position
from artlang_lsp.server import completion_items, extract_word_at, hover_text


def test_clean_buffer_has_no_diagnostics():
    assert build_diagnostics("(rect 0 0 width height)\n(fill (rgb 1 2 3))", evaluate=True) == []


def test_parse_errors_become_error_diagnostics():
    diags = build_diagnostics('(+ 1 2)\n"oops', evaluate=True)
    assert len(diags) == 1
    d = diags[0]
    assert d.message == "Unterminated string literal"
    assert d.severity == DiagnosticSeverity.Error
    assert d.source == "artlang-ls"
    assert (d.range.start.line, d.range.start.character) == (1, 0)
    assert (d.range.end.line, d.range.end.character) == (1, 5)


def test_evaluation_errors_are_warnings_with_expression_index():
    diags = build_diagnostics("(+ 1 2)\n(* invalid)", evaluate=True)
    assert len(diags) == 1
    d = diags[0]
    assert d.message == "Expression 2: Symbol invalid undefined"
    assert d.severity == DiagnosticSeverity.Warning
    assert (d.range.start.line, d.range.start.character) == (1, 3)


def test_loop_heavy_buffer_stops_at_language_server_cap(monkeypatch):
    monkeypatch.setenv("ARTLANG_LSP_MAX_ITERATIONS", "100")
    start = time.perf_counter()
    diags = build_diagnostics(
        "(while true)\n(let ((i 0)) (while (< i 900000) (rect 0 0 1 1) (set i (+ i 1))))", evaluate=True
    )
    assert time.perf_counter() - start < 5
    assert [d.message for d in diags] == [
        "Expression 1: Loop exceeded maximum of 100 iterations",
        "Expression 2: Loop exceeded maximum of 100 iterations",
    ]


def test_short_loops_evaluate_cleanly_under_default_cap(monkeypatch):
    monkeypatch.delenv("ARTLANG_LSP_MAX_ITERATIONS", raising=False)
    source = "(let ((i 0)) (while (< i 500) (rect i i 1 1) (set i (+ i 1))))"
    assert build_diagnostics(source, evaluate=True) == []


def test_evaluation_can_be_disabled():
    assert build_diagnostics("(* invalid)", evaluate=False) == []


def test_evaluation_toggle_from_environment(monkeypatch):
    monkeypatch.setenv("ARTLANG_LSP_EVALUATE", "0")
    assert build_diagnostics("(* invalid)") == []
    monkeypatch.setenv("ARTLANG_LSP_EVALUATE", "1")
    assert len(build_diagnostics("(* invalid)")) == 1


def test_offset_to_position_is_zero_based():
    assert offset_to_position("ab\ncd", 4) == Position(line=1, character=1)


def test_error_range_defaults_to_one_character():
    rng = error_range("abc", None, None)
    assert (rng.start.character, rng.end.character) == (0, 1)


def test_hover_text():
    assert hover_text("rect") == "(rect x y width height)"
    assert hover_text("width").startswith("width")
    assert hover_text("unknown") is None


def test_extract_word_at():
    text = "(rect 0 0 width height)"
    assert extract_word_at(text, Position(line=0, character=3)) == "rect"
    assert extract_word_at(text, Position(line=0, character=12)) == "width"
    assert extract_word_at(text, Position(line=3, character=0)) is None


def test_completion_lists_builtins_and_root_symbols():
    labels = {item.label for item in completion_items()}
    assert {"rect", "line", "while", "noFill", "width", "height"} <= labels
