"""KVRepl: interactive session over a single Store.

Also provides the ``kvs-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import click
import structlog

from . import __version__
from .commands import apply, split_command
from .config.logging import configure_logging
from .config.settings import KVSettings
from .store import Store

logger = structlog.get_logger(__name__)

BANNER = "KVS REPL  (help for commands  |  exit to quit)"


# ---------------------------------------------------------------------------
# KVRepl class (programmatic use)
# ---------------------------------------------------------------------------

class KVRepl:
    """Stateful session that owns one store and the command history.

    Usage::

        repl = KVRepl()
        repl.eval('set user {"name": "joe", "tags": <a, b>}')
        repl.eval("get user")
        repl.eval("history")
        repl.finished   # True once "exit" has been entered
    """

    def __init__(self, settings: KVSettings | None = None) -> None:
        self.settings = settings or KVSettings()
        self.store = Store()
        self.history: list[str] = []
        self.finished = False

    def eval(self, line: str) -> str | None:
        """Run one command line and return its response.

        Blank lines are ignored and return ``None``.
        """
        line = line.strip()
        if not line:
            return None

        response = apply(self.store, line, self.history)
        self._remember(line)

        verb, _ = split_command(line)
        logger.debug("command", verb=verb, keys=len(self.store))
        if verb == "exit":
            self.finished = True
        return response

    def reset(self) -> None:
        """Clear the store and the history."""
        self.store = Store()
        self.history = []
        self.finished = False

    def _remember(self, line: str) -> None:
        self.history.append(line)
        limit = self.settings.history_size
        if limit and len(self.history) > limit:
            del self.history[: len(self.history) - limit]


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

@click.command()
@click.version_option(version=__version__, prog_name="kvs-repl")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--prompt", default=None, help="Input prompt text.")
@click.option("--no-banner", is_flag=True, help="Do not print the greeting line.")
def main(verbose: bool, log_json: bool, prompt: str | None, no_banner: bool) -> None:
    """Interactive key-value store (``kvs-repl`` / ``python -m kvs_core.repl``)."""
    settings = KVSettings.from_cli(
        verbose=verbose or None,
        log_json=log_json or None,
        prompt=prompt,
        banner=False if no_banner else None,
    )
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    repl = KVRepl(settings)

    if settings.banner:
        click.echo(BANNER)

    while not repl.finished:
        try:
            line = input(settings.prompt)
        except EOFError:
            click.echo()
            break
        except KeyboardInterrupt:
            click.echo()
            continue

        response = repl.eval(line)
        if response is not None:
            click.echo(response)


if __name__ == "__main__":
    main()
