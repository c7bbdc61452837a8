"""
Structural types for the selector subscription engine.

This module describes the two collaborators the engine talks to: the store it
binds to and the subscription descriptors it drives.

Architecture:
    StoreProtocol: anything exposing get_state() and subscribe(listener)
    SubscriberProtocol: anything exposing selector(state) and on_change(new, old)

Protocols (TYPE CHECKING only):
    The protocols are documented but not checked with isinstance() at runtime.
    The engine resolves capabilities with getattr() at the bind boundary
    instead, so duck-typed stores and plain mappings work as well as classes
    that explicitly implement these protocols.
"""

from typing import Any, Callable, Optional, Protocol, TypeVar

S = TypeVar("S")
V = TypeVar("V")

Listener = Callable[[], None]
Selector = Callable[[S], V]
ChangeHandler = Callable[[V, Optional[V]], None]


class StoreProtocol(Protocol[S]):
    """Protocol for immutable-snapshot stores.

    NOTE: This is for TYPE CHECKING ONLY. Do not use isinstance() at runtime.
    """

    def get_state(self) -> S:
        """Return the current state snapshot."""
        ...

    def subscribe(self, listener: Listener) -> Any:
        """Register a listener called with no arguments after each transition."""
        ...


class SubscriberProtocol(Protocol[S, V]):
    """Protocol for a (selector, change handler) pair.

    NOTE: This is for TYPE CHECKING ONLY. Do not use isinstance() at runtime.
    """

    def selector(self, state: S) -> V:
        """Map a state snapshot to a derived value."""
        ...

    def on_change(self, new_value: V, old_value: Optional[V]) -> None:
        """React to the derived value changing."""
        ...
