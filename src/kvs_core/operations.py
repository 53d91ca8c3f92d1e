"""Store operations: each takes the store and raw arguments, returns a response."""

from __future__ import annotations

from .parser import parse_value
from .render import render
from .store import Store

UNSUPPORTED_VALUE = (
    "Unsupported value type. Supported types: String, Integer, Boolean, Map, List, Set"
)
EMPTY_STORE = "Store is empty"


def _usage(verb: str, key: str, literal: str) -> str | None:
    """Return a usage message when *key* or *literal* is missing."""
    if not key and not literal:
        return f"Usage: {verb} <key> <value> (missing key and value)"
    if not key:
        return f"Usage: {verb} <key> <value> (missing key)"
    if not literal:
        return f"Usage: {verb} <key> <value> (missing value)"
    return None


def _not_found(key: str) -> str:
    return f"Key '{key}' not found"


def set_value(store: Store, key: str, literal: str) -> str:
    """Insert or overwrite *key* with the value decoded from *literal*."""
    key, literal = key.strip(), literal.strip()
    usage = _usage("set", key, literal)
    if usage:
        return usage
    value = parse_value(literal)
    if value is None:
        return UNSUPPORTED_VALUE
    store.put(key, value)
    return f"Set key '{key}' with value '{render(value)}'"


def update_value(store: Store, key: str, literal: str) -> str:
    """Replace an existing *key*; the literal is not parsed when *key* is absent."""
    key, literal = key.strip(), literal.strip()
    usage = _usage("update", key, literal)
    if usage:
        return usage
    if key not in store:
        return f"Key '{key}' does not exist. Use 'set' to create it."
    value = parse_value(literal)
    if value is None:
        return UNSUPPORTED_VALUE
    store.put(key, value)
    return f"Updated key '{key}' with value '{render(value)}'"


def get_value(store: Store, key: str) -> str:
    key = key.strip()
    if not key:
        return "Usage: get <key>"
    value = store.get(key)
    if value is None:
        return _not_found(key)
    return f"Value for key '{key}': '{render(value)}'"


def delete_value(store: Store, key: str) -> str:
    key = key.strip()
    if not key:
        return "Usage: delete <key>"
    if not store.remove(key):
        return _not_found(key)
    return f"Deleted key '{key}'"


def list_keys(store: Store, *extra: str) -> str:
    """List keys in ascending order; any argument is a usage error."""
    if any(arg.strip() for arg in extra):
        return "Usage: list"
    if not len(store):
        return EMPTY_STORE
    return "Keys: " + ", ".join(store.keys())
