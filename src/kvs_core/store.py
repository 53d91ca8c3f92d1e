"""The session's key-value store."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from .values import Value

logger = structlog.get_logger(__name__)


@dataclass
class Store:
    """Map from text key to Value; entries are replaced and removed wholesale."""

    entries: dict[str, Value] = field(default_factory=dict)

    def put(self, key: str, value: Value) -> None:
        replaced = key in self.entries
        self.entries[key] = value
        logger.debug("store put", key=key, replaced=replaced)

    def get(self, key: str) -> Value | None:
        return self.entries.get(key)

    def remove(self, key: str) -> bool:
        if key not in self.entries:
            return False
        del self.entries[key]
        logger.debug("store remove", key=key)
        return True

    def keys(self) -> list[str]:
        return sorted(self.entries)

    def clear(self) -> None:
        self.entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)
