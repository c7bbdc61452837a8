"""
Shared pytest fixtures and configuration for selector_subscribe tests.
"""

from types import SimpleNamespace
from unittest.mock import Mock

import pytest


@pytest.fixture
def changing_state():
    """A get_state spy returning 1, 2, 3, ... on successive calls."""
    state = 0

    def next_state():
        nonlocal state
        state += 1
        return state

    return Mock(side_effect=next_state)


@pytest.fixture
def store_that_changes_once(changing_state):
    """A store whose subscribe immediately calls the listener exactly once."""
    return SimpleNamespace(
        get_state=changing_state, subscribe=lambda listener: listener()
    )


@pytest.fixture
def capturing_store(changing_state):
    """A store that keeps its listener so tests can fire notifications by hand."""
    store = SimpleNamespace(get_state=changing_state, listeners=[])
    store.subscribe = store.listeners.append
    return store


@pytest.fixture
def static_store():
    """A store whose state is None and which never notifies."""
    return SimpleNamespace(get_state=lambda: None, subscribe=lambda listener: None)


@pytest.fixture
def noop_subscriber():
    """A subscriber whose functions do nothing."""
    return SimpleNamespace(selector=lambda state: None, on_change=lambda new, old: None)
