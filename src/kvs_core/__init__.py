"""KVS Core — typed value model, literal parser and store for an interactive key-value shell."""

__version__ = "0.1.0"

from .config.logging import install_quiet_default

install_quiet_default()

from .commands import apply
from .errors import KVSCoreError, LiteralError, Reason
from .parser import decode, parse_value
from .render import render, to_literal
from .store import Store
from .values import (
    Value,
    VBool,
    VInteger,
    VList,
    VMap,
    VSet,
    VText,
    sort_key,
)
from .repl import KVRepl

__all__ = [
    "apply",
    "decode",
    "parse_value",
    "render",
    "to_literal",
    "sort_key",
    "Store",
    "Value",
    "VBool",
    "VInteger",
    "VList",
    "VMap",
    "VSet",
    "VText",
    "KVSCoreError",
    "LiteralError",
    "Reason",
    "KVRepl",
]
