"""
Minimal reference store.

A reducer-driven, immutable-snapshot store with the ``get_state`` /
``subscribe`` interface the binder expects. Real applications usually bring
their own store; this one is enough to drive subscribers in scripts and tests.

```python
from selector_subscribe import create_store

def counter(state, action):
    return state + 1 if action == "increment" else state

store = create_store(counter, 0)
store.dispatch("increment")
store.get_state()  # 1
```
"""

from typing import Any, Callable, Generic, List, Optional

from .base import Listener, S

Reducer = Callable[[S, Any], S]


class Store(Generic[S]):
    """State container updated only through ``dispatch``."""

    def __init__(self, reducer: Reducer, initial_state: Optional[S] = None):
        if not callable(reducer):
            raise TypeError("Expected the reducer to be a function.")
        self._reducer = reducer
        self._state = initial_state
        self._listeners: List[Listener] = []
        self._is_dispatching = False

    def __repr__(self) -> str:
        return f"Store(listeners={len(self._listeners)})"

    def get_state(self) -> S:
        """Return the current snapshot."""
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register ``listener`` to be called after every dispatch.

        Returns a function that removes the listener again. Changes to the
        listener list made while listeners are being notified take effect on
        the next dispatch.
        """
        if not callable(listener):
            raise TypeError("Expected the listener to be a function.")

        self._listeners.append(listener)
        subscribed = True

        def unsubscribe() -> None:
            nonlocal subscribed
            if not subscribed:
                return
            subscribed = False
            self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Any) -> Any:
        """Reduce ``action`` into a new snapshot and notify listeners."""
        if self._is_dispatching:
            raise RuntimeError("Reducers may not dispatch actions.")

        self._is_dispatching = True
        try:
            self._state = self._reducer(self._state, action)
        finally:
            self._is_dispatching = False

        for listener in list(self._listeners):
            listener()
        return action


def create_store(reducer: Reducer, initial_state: Optional[S] = None) -> Store[S]:
    """Create a ``Store`` driven by ``reducer``."""
    return Store(reducer, initial_state)
