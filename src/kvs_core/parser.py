"""Literal parser: converts the right-hand side of set/update into a Value."""

from __future__ import annotations

import re

import structlog

from .errors import LiteralError, Reason
from .values import INT32_MAX, INT32_MIN, Value, VBool, VInteger, VList, VMap, VSet, VText

logger = structlog.get_logger(__name__)

_INTEGER_RE = re.compile(r"^-?[0-9]+$")

_OPENERS = "{[<"
_CLOSERS = "}]>"


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse_value(fragment: str) -> Value | None:
    """Decode *fragment*, returning ``None`` when it is malformed or unsupported.

    Both failure kinds collapse into ``None``; the underlying
    :class:`~kvs_core.errors.Reason` is only logged.
    """
    try:
        return decode(fragment)
    except LiteralError as exc:
        logger.debug("literal rejected", fragment=fragment, reason=exc.reason.name)
        return None


def decode(fragment: str) -> Value:
    """Decode *fragment* into a Value or raise :class:`LiteralError`.

    Rules are tried in order, first match wins:

    1. signed 32-bit decimal integer
    2. ``true`` / ``false`` (any case)
    3. ``"quoted text"`` (no escape processing)
    4. ``{key: value, ...}`` map
    5. ``[value, ...]`` list
    6. ``<value, ...>`` set
    7. bare text, unless it reads as a float (floats are rejected)
    """
    text = fragment.strip()
    if not text:
        raise LiteralError(fragment, Reason.EMPTY)

    integer = _as_integer(text)
    if integer is not None:
        return VInteger(integer)

    lowered = text.lower()
    if lowered in ("true", "false"):
        return VBool(lowered == "true")

    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return VText(text[1:-1])

    if text[0] == "{" and text[-1] == "}":
        return _decode_map(text[1:-1])
    if text[0] == "[" and text[-1] == "]":
        return VList([decode(item) for item in split_top_level(text[1:-1])])
    if text[0] == "<" and text[-1] == ">":
        return VSet([decode(item) for item in split_top_level(text[1:-1])])

    # Decimal-looking input is rejected rather than kept as text.
    if _is_float(text):
        raise LiteralError(fragment, Reason.FLOAT)

    return VText(strip_quotes(text))


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------

def split_top_level(interior: str) -> list[str]:
    """Split *interior* on commas that are not nested inside brackets.

    Any of ``{[<`` opens a level and any of ``}]>`` closes one; bracket kinds
    need not match, and only the final depth must be zero. Segments are
    returned stripped. A blank interior has no segments.
    """
    if not interior.strip():
        return []

    segments: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(interior):
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
        elif ch == "," and depth == 0:
            segments.append(interior[start:i].strip())
            start = i + 1
    if depth != 0:
        raise LiteralError(interior, Reason.UNBALANCED)
    segments.append(interior[start:].strip())

    if not all(segments):
        raise LiteralError(interior, Reason.EMPTY_ELEMENT)
    return segments


def strip_quotes(text: str) -> str:
    """Remove any leading and trailing double quotes."""
    return text.strip('"')


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _decode_map(interior: str) -> VMap:
    entries: dict[str, Value] = {}
    for pair in split_top_level(interior):
        key, sep, rest = pair.partition(":")
        if not sep:
            raise LiteralError(pair, Reason.MISSING_COLON)
        # Later duplicates overwrite earlier ones.
        entries[strip_quotes(key.strip())] = decode(rest)
    return VMap(entries)


def _as_integer(text: str) -> int | None:
    if not _INTEGER_RE.match(text):
        return None
    number = int(text)
    if not INT32_MIN <= number <= INT32_MAX:
        return None
    return number


def _is_float(text: str) -> bool:
    if "_" in text:
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True
