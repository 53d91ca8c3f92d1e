"""Shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from kvs_core import Store


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    kvs = logging.getLogger("kvs_core")
    kvs_level = kvs.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    kvs.setLevel(kvs_level)


@pytest.fixture
def store() -> Store:
    return Store()
