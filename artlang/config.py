from __future__ import annotations
import os


# Hard cap on `while` iterations; fails closed instead of truncating.
MAX_LOOP_ITERATIONS = 1_000_000

# Lower cap used when the language server evaluates a buffer on every edit.
LSP_MAX_LOOP_ITERATIONS = 10_000

_DEFAULT_CANVAS_SIZE = (800, 600)


def _parse_size(raw: str) -> tuple[int, int]:
    w, sep, h = raw.lower().partition('x')
    if not sep:
        raise ValueError(f"Canvas size must look like WIDTHxHEIGHT, got {raw!r}")
    return int(w.strip()), int(h.strip())


def get_canvas_size() -> tuple[int, int]:
    raw = os.environ.get('ARTLANG_CANVAS_SIZE')
    if not raw:
        return _DEFAULT_CANVAS_SIZE
    return _parse_size(raw)


def lsp_evaluates() -> bool:
    raw = os.environ.get('ARTLANG_LSP_EVALUATE', '1')
    return raw.strip().lower() not in ('0', 'false', 'no', 'off', '')


def lsp_max_iterations() -> int:
    raw = os.environ.get('ARTLANG_LSP_MAX_ITERATIONS')
    if not raw:
        return LSP_MAX_LOOP_ITERATIONS
    return int(raw.strip())
