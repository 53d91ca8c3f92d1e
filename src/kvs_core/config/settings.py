"""Session settings: CLI flags over ``KVS_*`` environment variables over defaults."""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings


class KVSettings(BaseSettings):
    """Settings for one interactive session.

    Attributes:
        prompt: Text shown before each input line.
        banner: Print the greeting line when the session starts.
        verbose: Enable DEBUG logging for ``kvs_core``.
        log_json: Emit JSON log lines instead of console output.
        history_size: Maximum remembered commands, 0 for no limit.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "KVS_",
    }

    prompt: str = "kvs> "
    banner: bool = True
    verbose: bool = False
    log_json: bool = False
    history_size: int = Field(default=0, ge=0)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> KVSettings:
        """Build settings, letting flags that were actually given win.

        Flags left at ``None`` are dropped so that environment variables
        still apply.
        """
        given = {k: v for k, v in cli_flags.items() if v is not None}
        return cls(**given)
