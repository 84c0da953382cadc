"""Shared fixtures for caretrack tests."""

import itertools
from typing import Callable

import pendulum
import pytest

from caretrack.model.entity_id import IdFactory
from caretrack.repository.store import MemoryStore
from caretrack.session import Session


@pytest.fixture
def store() -> MemoryStore:
    """Return an empty in-memory key-value store."""
    return MemoryStore()


@pytest.fixture
def clock() -> Callable[[], pendulum.DateTime]:
    """Return a clock frozen at noon on 2024-03-01 local time."""
    frozen = pendulum.local(2024, 3, 1, 12, 0)
    return lambda: frozen


@pytest.fixture
def id_factory() -> IdFactory:
    """Return a factory producing predictable ids (id-1, id-2, ...)."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def session(
    store: MemoryStore,
    clock: Callable[[], pendulum.DateTime],
    id_factory: IdFactory,
) -> Session:
    """Return a session wired to the in-memory store."""
    return Session(store, clock=clock, id_factory=id_factory)
