"""Value types for KVS Core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


# ---------------------------------------------------------------------------
# Ordering mixin
# ---------------------------------------------------------------------------

class _Ordered:
    """Total order over every Value variant, delegated to :func:`sort_key`."""

    __slots__ = ()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _Ordered):
            return NotImplemented
        return sort_key(self) < sort_key(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, _Ordered):
            return NotImplemented
        return sort_key(self) <= sort_key(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, _Ordered):
            return NotImplemented
        return sort_key(self) > sort_key(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, _Ordered):
            return NotImplemented
        return sort_key(self) >= sort_key(other)


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VText(_Ordered):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"VText expects str, got {type(self.value).__name__}")


@dataclass(slots=True)
class VInteger(_Ordered):
    value: int  # signed 32-bit

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"VInteger expects int, got {type(self.value).__name__}")
        if not INT32_MIN <= self.value <= INT32_MAX:
            raise ValueError(f"{self.value} does not fit in a signed 32-bit integer")


@dataclass(slots=True)
class VBool(_Ordered):
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"VBool expects bool, got {type(self.value).__name__}")


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VMap(_Ordered):
    """Text keys to Values, always enumerated in ascending key order."""

    entries: dict[str, Value]

    def __post_init__(self) -> None:
        for key, item in self.entries.items():
            if not isinstance(key, str):
                raise TypeError(f"VMap keys must be str, got {type(key).__name__}")
            _check_value(item)
        self.entries = dict(sorted(self.entries.items()))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __getitem__(self, key: str) -> Value:
        return self.entries[key]


@dataclass(slots=True)
class VList(_Ordered):
    """Values in insertion order; duplicates allowed."""

    items: list[Value]

    def __post_init__(self) -> None:
        self.items = list(self.items)
        for item in self.items:
            _check_value(item)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)


@dataclass(slots=True)
class VSet(_Ordered):
    """Structurally unique Values kept in the total order of :func:`sort_key`.

    Insertion order is discarded on construction, so two sets holding the
    same elements compare equal regardless of how they were built.
    """

    items: list[Value]

    def __post_init__(self) -> None:
        unique: list[Value] = []
        last = None
        for item in sorted(self.items, key=_checked_sort_key):
            key = sort_key(item)
            if key != last:
                unique.append(item)
                last = key
        self.items = unique

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __contains__(self, item: object) -> bool:
        return any(item == member for member in self.items)


Value = Union[VText, VInteger, VBool, VMap, VList, VSet]


# ---------------------------------------------------------------------------
# Total order
# ---------------------------------------------------------------------------

def sort_key(value: Value) -> tuple:
    """Return a key realising the total order over Values.

    Variants rank Text < Integer < Boolean < Map < List < Set; within a
    variant the natural order applies, recursively for aggregates.
    """
    if isinstance(value, VText):
        return (0, value.value)
    if isinstance(value, VInteger):
        return (1, value.value)
    if isinstance(value, VBool):
        return (2, value.value)
    if isinstance(value, VMap):
        return (3, tuple((k, sort_key(v)) for k, v in value.entries.items()))
    if isinstance(value, VList):
        return (4, tuple(sort_key(v) for v in value.items))
    if isinstance(value, VSet):
        return (5, tuple(sort_key(v) for v in value.items))
    raise TypeError(f"not a Value: {value!r}")


def _check_value(item: object) -> None:
    if not isinstance(item, _Ordered):
        raise TypeError(f"not a Value: {item!r}")


def _checked_sort_key(item: Value) -> tuple:
    _check_value(item)
    return sort_key(item)
