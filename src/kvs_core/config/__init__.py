"""Settings and logging configuration."""

from .logging import configure_logging, install_quiet_default
from .settings import KVSettings

__all__ = ["KVSettings", "configure_logging", "install_quiet_default"]
