"""Command dispatch: one raw command line in, one response string out."""

from __future__ import annotations

from typing import Callable, Sequence

from .operations import delete_value, get_value, list_keys, set_value, update_value
from .store import Store

HELP_TEXT = """\
Commands:
  set <key> <value>     store a value under key (creates or overwrites)
  update <key> <value>  replace the value of an existing key
  get <key>             show the value stored under key
  delete <key>          remove key
  list                  show all keys in sorted order
  history               show previously entered commands
  help                  show this message
  exit                  leave the session

Values:
  42, -7                integer (signed 32-bit)
  true, false           boolean
  "text", text          text
  {"k": v, ...}         map (keys sorted)
  [v, ...]              list
  <v, ...>              set (duplicates removed)"""

EXIT_MESSAGE = "Exiting..."
NO_HISTORY = "No commands in history"

Handler = Callable[[Store, list[str], Sequence[str]], str]


def _key(args: list[str]) -> str:
    return args[0] if args else ""


def _literal(args: list[str]) -> str:
    return args[1] if len(args) > 1 else ""


def _history(history: Sequence[str]) -> str:
    if not history:
        return NO_HISTORY
    return "\n".join(f"{i}: {line}" for i, line in enumerate(history, 1))


_HANDLERS: dict[str, Handler] = {
    "set": lambda store, args, _: set_value(store, _key(args), _literal(args)),
    "update": lambda store, args, _: update_value(store, _key(args), _literal(args)),
    "get": lambda store, args, _: get_value(store, _key(args)),
    "delete": lambda store, args, _: delete_value(store, _key(args)),
    "list": lambda store, args, _: list_keys(store, *args),
    "history": lambda store, args, history: _history(history),
    "help": lambda store, args, _: HELP_TEXT,
    "exit": lambda store, args, _: EXIT_MESSAGE,
}


def split_command(command_line: str) -> tuple[str, list[str]]:
    """Split into the verb, the key, and the untouched rest of the line."""
    parts = command_line.strip().split(maxsplit=2)
    if not parts:
        return "", []
    return parts[0], parts[1:]


def apply(store: Store, command_line: str, history: Sequence[str] = ()) -> str:
    """Run *command_line* against *store* and return the response text.

    *history* holds previously submitted lines and is only read by the
    ``history`` verb.
    """
    verb, args = split_command(command_line)
    if not verb:
        return "Unknown command"
    handler = _HANDLERS.get(verb)
    if handler is None:
        return f"Unknown command: '{verb}'"
    return handler(store, args, history)
