"""
selector_subscribe - Selector Subscriptions for Snapshot Stores

Observe values derived from an immutable-snapshot store from outside the
application: pair a selector with a change handler and get called only when
the selected value changes.
"""

# Binding engine
from .collect import (
    Binding,
    SubscriberCollection,
    collect_subscribers,
    collectSubscribers,
    is_same,
)

# Exceptions
from .exceptions import (
    InvalidStoreError,
    MissingCapabilityError,
    MissingOnChangeError,
    MissingSelectorError,
    MissingStoreError,
    NoSubscribersError,
    SubscriptionError,
)

# Reference store
from .store import Store, create_store

# Convenience subscriber type
from .subscriber import SelectorSubscriber, subscriber

__all__ = [
    # Binding engine
    "collect_subscribers",
    "collectSubscribers",
    "SubscriberCollection",
    "Binding",
    "is_same",
    # Subscribers
    "SelectorSubscriber",
    "subscriber",
    # Store
    "Store",
    "create_store",
    # Exceptions
    "SubscriptionError",
    "NoSubscribersError",
    "MissingStoreError",
    "InvalidStoreError",
    "MissingCapabilityError",
    "MissingSelectorError",
    "MissingOnChangeError",
]
