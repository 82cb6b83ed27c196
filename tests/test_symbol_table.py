import pytest

from artlang.surface import RecordingSurface
from artlang.types.environment import Environment
from artlang.types.expr import Number, String, Symbol, List
from artlang.types.symbol_table import SymbolTable


@pytest.fixture
def table():
    return SymbolTable()


def test_set_and_lookup(table):
    table.set(Symbol("x"), Number(1))
    assert table.lookup(Symbol("x")) == Number(1)
    assert table.lookup("x") == Number(1)


def test_lookup_missing_returns_none(table):
    assert table.lookup("missing") is None


def test_lookup_does_not_create_bindings(table):
    table.lookup("x")
    assert not table.has_local("x")
    assert table.get_local_symbols() == []


def test_set_overwrites_local_binding(table):
    table.set("x", Number(1))
    table.set("x", Number(2))
    assert table.lookup("x") == Number(2)
    assert table.get_local_symbols() == ["x"]


def test_child_sees_parent_bindings(table):
    table.set("x", Number(1))
    child = table.enter_scope()
    assert child.lookup("x") == Number(1)
    assert not child.has_local("x")


def test_innermost_binding_wins(table):
    table.set("x", Number(1))
    child = table.enter_scope()
    child.set("x", Number(2))
    grandchild = child.enter_scope()
    assert grandchild.lookup("x") == Number(2)
    assert child.lookup("x") == Number(2)
    assert table.lookup("x") == Number(1)


def test_set_on_child_never_touches_parent(table):
    table.set("x", Number(1))
    child = table.enter_scope()
    child.set("x", Number(5))
    assert table.lookup("x") == Number(1)


def test_find_returns_owning_table(table):
    table.set("x", Number(1))
    child = table.enter_scope().enter_scope()
    assert child.find("x") is table
    assert child.find("y") is None


def test_exit_scope(table):
    child = table.enter_scope()
    assert child.exit_scope() is table
    assert table.exit_scope() is None


def test_local_symbols_only_cover_local_scope(table):
    table.set("a", Number(1))
    child = table.enter_scope()
    child.set("b", String("s"))
    child.set("c", List((Number(1),)))
    assert child.get_local_symbols() == ["b", "c"]
    assert child.has_local("b")
    assert not child.has_local("a")


def test_str_and_repr(table):
    table.set("x", Number(1))
    child = table.enter_scope()
    child.set("s", String("hi"))
    assert str(table) == "{x: 1}"
    assert str(child) == '{s: "hi"} -> ...'
    assert repr(child) == '<SymbolTable chain: {s: "hi"} -> {x: 1}>'


def test_environment_child_shares_surface():
    surface = RecordingSurface(width=10, height=10)
    env = Environment(surface)
    env.symbol_table.set("x", Number(1))
    child = env.child()
    assert child.surface is surface
    assert child.symbol_table is not env.symbol_table
    assert child.symbol_table.lookup("x") == Number(1)

    grandchild = child.child()
    assert grandchild.surface is surface
    assert grandchild.symbol_table.exit_scope() is child.symbol_table
