"""Canonical text forms of a Value."""

from __future__ import annotations

from .values import Value, VBool, VInteger, VList, VMap, VSet, VText


def render(value: Value) -> str:
    """Debug form used in command output, e.g. ``{"a": [Integer(1)]}``."""
    if isinstance(value, VText):
        return f'Text("{value.value}")'
    if isinstance(value, VInteger):
        return f"Integer({value.value})"
    if isinstance(value, VBool):
        return f"Boolean({_bool(value.value)})"
    if isinstance(value, VMap):
        return "{" + ", ".join(f'"{k}": {render(v)}' for k, v in value.entries.items()) + "}"
    if isinstance(value, VList):
        return "[" + ", ".join(render(v) for v in value.items) + "]"
    if isinstance(value, VSet):
        return "{" + ", ".join(render(v) for v in value.items) + "}"
    raise TypeError(f"not a Value: {value!r}")


def to_literal(value: Value) -> str:
    """Literal form accepted by the parser, e.g. ``{"a": [1]}``.

    ``parse_value(to_literal(v)) == v`` holds as long as no text inside *v*
    contains quote, comma, colon or bracket characters.
    """
    if isinstance(value, VText):
        return f'"{value.value}"'
    if isinstance(value, VInteger):
        return str(value.value)
    if isinstance(value, VBool):
        return _bool(value.value)
    if isinstance(value, VMap):
        return "{" + ", ".join(f'"{k}": {to_literal(v)}' for k, v in value.entries.items()) + "}"
    if isinstance(value, VList):
        return "[" + ", ".join(to_literal(v) for v in value.items) + "]"
    if isinstance(value, VSet):
        return "<" + ", ".join(to_literal(v) for v in value.items) + ">"
    raise TypeError(f"not a Value: {value!r}")


def _bool(flag: bool) -> str:
    return "true" if flag else "false"
