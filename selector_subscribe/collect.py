"""
Selector Subscriptions - Change Detection Over Store Snapshots
==============================================================

This module lets code outside an application observe values derived from a
centralized, immutable-snapshot store without touching raw state-change events.

Each subscriber pairs a ``selector`` (snapshot -> derived value) with an
``on_change`` handler. ``collect_subscribers`` gathers any number of them into a
binder; calling the binder with a store evaluates every selector once, then
registers a single listener on the store. Whenever the store notifies, every
selector runs again against the fresh snapshot and each handler whose value
changed is called with ``(new_value, old_value)``.

Basic Usage
-----------

```python
from selector_subscribe import collect_subscribers, create_store

def reducer(state, action):
    if action["type"] == "rename":
        return {**state, "name": action["name"]}
    return state

store = create_store(reducer, {"name": "Alice", "age": 30})

bind = collect_subscribers(
    {
        "selector": lambda state: state["name"],
        "on_change": lambda new, old: print(f"name: {old} -> {new}"),
    },
)
bind(store)

store.dispatch({"type": "rename", "name": "Bob"})  # name: Alice -> Bob
```

Change Detection
----------------

Values are compared by identity, never structurally. Immutable scalars
(``None``, ``bool``, numbers, ``str``, ``bytes``) of exactly the same type count
as unchanged when equal, so a selector returning ``x * 2`` does not fire just
because Python built a new ``int`` object. Anything else (lists, dicts, custom
objects) fires whenever the selector returns a different object, even if it is
structurally equal to the previous one. Memoize selectors if that matters.

Binding Lifecycle
-----------------

Nothing happens until the binder is called with a store. Binding then:

1. Rejects an empty subscriber list (``NoSubscribersError``).
2. Rejects a missing store (``MissingStoreError``) or one without callable
   ``get_state`` and ``subscribe`` (``InvalidStoreError``).
3. Reads the snapshot once, then for each subscriber in order checks its
   ``selector`` (``MissingSelectorError``) and ``on_change``
   (``MissingOnChangeError``) and records the selector's initial value.
4. Calls ``store.subscribe`` exactly once.

Handlers are never called during binding. Each call of the binder creates an
independent ``Binding`` with its own slots.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Tuple

from .base import StoreProtocol
from .exceptions import (
    InvalidStoreError,
    MissingOnChangeError,
    MissingSelectorError,
    MissingStoreError,
    NoSubscribersError,
)

# Types compared by value when both sides have exactly the same type.
IMMUTABLE_SCALARS = frozenset({type(None), bool, int, float, complex, str, bytes})

_MISSING = object()


def is_same(new_value: Any, old_value: Any) -> bool:
    """Strict identity: same object, or equal immutable scalars of one type."""
    if new_value is old_value:
        return True
    value_type = type(new_value)
    return (
        value_type is type(old_value)
        and value_type in IMMUTABLE_SCALARS
        and new_value == old_value
    )


def _lookup(obj: Any, *names: str) -> Any:
    """Return the first attribute (or mapping key) found among ``names``."""
    is_mapping = isinstance(obj, Mapping)
    for name in names:
        value = getattr(obj, name, _MISSING)
        if value is _MISSING and is_mapping:
            value = obj.get(name, _MISSING)
        if value is not _MISSING:
            return value
    return None


def _resolve_store(store: Any) -> Tuple[Callable[[], Any], Callable[..., Any]]:
    if store is None:
        raise MissingStoreError()

    get_state = _lookup(store, "get_state", "getState")
    subscribe = _lookup(store, "subscribe")
    if not callable(get_state) or not callable(subscribe):
        raise InvalidStoreError()
    return get_state, subscribe


def _resolve_subscriber(subscription: Any, index: int) -> Tuple[Callable, Callable]:
    selector = _lookup(subscription, "selector")
    if not callable(selector):
        raise MissingSelectorError(index)

    on_change = _lookup(subscription, "on_change", "onChange")
    if not callable(on_change):
        raise MissingOnChangeError(index)
    return selector, on_change


class Binding:
    """
    One live binding of a subscriber list to a store.

    Holds one slot per subscriber with the last value its selector produced.
    Slots are positional, so a subscriber passed twice is tracked twice.
    ``notify`` is the listener registered on the store.
    """

    __slots__ = ("store", "subscriptions", "_get_state", "_handlers", "_values")

    def __init__(self, store: StoreProtocol, subscriptions: Tuple[Any, ...]):
        get_state, subscribe = _resolve_store(store)

        self.store = store
        self.subscriptions = subscriptions
        self._get_state = get_state
        self._handlers: List[Tuple[Callable, Callable]] = []
        self._values: List[Any] = []

        state = get_state()
        for index, subscription in enumerate(subscriptions):
            selector, on_change = _resolve_subscriber(subscription, index)
            self._handlers.append((selector, on_change))
            self._values.append(selector(state))

        subscribe(self.notify)
        logging.debug(f"Bound {len(subscriptions)} selector subscriber(s) to {store!r}")

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Binding(subscribers={len(self)}, store={self.store!r})"

    @property
    def values(self) -> Tuple[Any, ...]:
        """Current slot values, in subscriber order."""
        return tuple(self._values)

    def notify(self, *_args: Any) -> None:
        """Re-run every selector against a fresh snapshot and fire changed handlers."""
        state = self._get_state()
        values = self._values
        changed = 0
        for index, (selector, on_change) in enumerate(self._handlers):
            new_value = selector(state)
            old_value = values[index]
            if not is_same(new_value, old_value):
                on_change(new_value, old_value)
                values[index] = new_value
                changed += 1

        if changed:
            logging.debug(f"{changed} of {len(values)} selector value(s) changed")


class SubscriberCollection:
    """
    Subscribers gathered for binding.

    The collection is the binder: call it (or ``bind``) with a store to start
    observing. Subscribers are not inspected until then.
    """

    __slots__ = ("subscriptions",)

    def __init__(self, subscriptions):
        self.subscriptions = tuple(subscriptions or ())

    def __len__(self) -> int:
        return len(self.subscriptions)

    def __repr__(self) -> str:
        return f"SubscriberCollection({len(self)} subscriber(s))"

    def __call__(self, store: Optional[StoreProtocol] = None) -> Binding:
        return self.bind(store)

    def bind(self, store: Optional[StoreProtocol]) -> Binding:
        """Validate, capture initial selector values and subscribe to ``store``."""
        if not self.subscriptions:
            raise NoSubscribersError()
        return Binding(store, self.subscriptions)


def collect_subscribers(*subscriptions: Any) -> SubscriberCollection:
    """Gather selector subscribers into a binder to be called with a store."""
    return SubscriberCollection(subscriptions)


collectSubscribers = collect_subscribers
