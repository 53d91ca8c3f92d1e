"""Tests for render() and to_literal()."""

import pytest

from kvs_core.parser import parse_value
from kvs_core.render import render, to_literal
from kvs_core.values import VBool, VInteger, VList, VMap, VSet, VText


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------

def test_render_scalars():
    assert render(VText("hello")) == 'Text("hello")'
    assert render(VInteger(-3)) == "Integer(-3)"
    assert render(VBool(True)) == "Boolean(true)"
    assert render(VBool(False)) == "Boolean(false)"


def test_render_map_sorted():
    m = VMap({"subkey2": VInteger(100), "subkey1": VText("value1")})
    assert render(m) == '{"subkey1": Text("value1"), "subkey2": Integer(100)}'


def test_render_list_insertion_order():
    assert render(VList([VInteger(2), VInteger(1)])) == "[Integer(2), Integer(1)]"


def test_render_set_canonical_order():
    s = VSet([VBool(True), VInteger(1), VText("a")])
    assert render(s) == '{Text("a"), Integer(1), Boolean(true)}'


def test_render_empty_aggregates():
    assert render(VMap({})) == "{}"
    assert render(VList([])) == "[]"
    assert render(VSet([])) == "{}"


def test_render_stable():
    v = parse_value('{"x":[1,2,<true,false>]}')
    assert render(v) == render(v)
    assert render(v) == '{"x": [Integer(1), Integer(2), {Boolean(false), Boolean(true)}]}'


def test_render_rejects_non_value():
    with pytest.raises(TypeError):
        render(1)


# ---------------------------------------------------------------------------
# to_literal / round trip
# ---------------------------------------------------------------------------

def test_to_literal_forms():
    assert to_literal(VText("hi")) == '"hi"'
    assert to_literal(VInteger(4)) == "4"
    assert to_literal(VBool(False)) == "false"
    assert to_literal(VSet([VInteger(2), VInteger(1)])) == "<1, 2>"


@pytest.mark.parametrize(
    "literal",
    [
        "42",
        "true",
        '"42"',
        '"true"',
        "plain words",
        '{"b": 2, "a": {"c": [1, <x, y, x>]}}',
        "[1, [2, [3, []]], <>, {}]",
        "<[1, 2], [1, 2], {k: v}, false, -1>",
    ],
)
def test_round_trip(literal):
    value = parse_value(literal)
    assert value is not None
    canonical = to_literal(value)
    assert parse_value(canonical) == value
    assert to_literal(parse_value(canonical)) == canonical
