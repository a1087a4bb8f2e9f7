"""Global pytest fixtures for pocketutils."""

from __future__ import annotations

import itertools
from collections.abc import Callable

import pytest
from loguru import logger


def cycling_source(values: list[int]) -> Callable[[int], bytes]:
    """Return a byte source that repeats ``values`` forever.

    Each call consumes the next ``n`` values of the cycle, so consecutive calls
    keep advancing (like a real random source would).
    """
    stream = itertools.cycle(values)
    return lambda n: bytes(next(stream) for _ in range(n))


@pytest.fixture
def byte_source() -> Callable[[list[int]], Callable[[int], bytes]]:
    """Factory fixture for deterministic byte sources."""
    return cycling_source


@pytest.fixture
def log_records():
    """Capture pocketutils debug records emitted through loguru."""
    records: list[str] = []
    logger.enable("pocketutils")
    handler_id = logger.add(lambda message: records.append(message.record["message"]), level="DEBUG")
    yield records
    logger.remove(handler_id)
    logger.disable("pocketutils")
