"""Exceptions for KVS Core."""

from __future__ import annotations

from enum import Enum


class KVSCoreError(Exception):
    """Base class for every error raised by kvs_core."""


class Reason(Enum):
    """Why a literal was rejected.

    Callers of :func:`kvs_core.parser.parse_value` only ever see ``None``;
    the reason is kept for logging and for :func:`kvs_core.parser.decode`.
    """

    EMPTY = "empty literal"
    UNBALANCED = "unbalanced brackets"
    EMPTY_ELEMENT = "empty element"
    MISSING_COLON = "map entry without ':'"
    FLOAT = "floating-point numbers are not supported"


class LiteralError(KVSCoreError):
    """A literal could not be decoded into a Value."""

    def __init__(self, fragment: str, reason: Reason) -> None:
        super().__init__(f"{reason.value}: {fragment!r}")
        self.fragment = fragment
        self.reason = reason
