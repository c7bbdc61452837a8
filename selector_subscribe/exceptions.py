"""
Errors raised while binding selector subscribers to a store.

All of them are raised synchronously from the bind call, before any listener is
registered on the store.
"""


class SubscriptionError(Exception):
    """Base class for selector subscription binding errors."""

    pass


class NoSubscribersError(SubscriptionError):
    """Raised when a collection is bound without any subscribers."""

    def __init__(self):
        super().__init__("No selector subscribers provided.")


class MissingStoreError(SubscriptionError):
    """Raised when the binder is called without a store."""

    def __init__(self):
        super().__init__(
            "Store was not supplied to the function returned from collect_subscribers."
        )


class InvalidStoreError(SubscriptionError):
    """Raised when the store lacks a callable get_state or subscribe."""

    def __init__(self):
        super().__init__(
            "Supplied store does not implement the store interface "
            "(get_state and subscribe)."
        )


class MissingCapabilityError(SubscriptionError):
    """A subscriber at a given position is missing one of its functions."""

    capability = ""
    article = "a"

    def __init__(self, index: int):
        self.index = index
        super().__init__(
            f"Subscription (index {index}) does not have {self.article} "
            f"{self.capability} function defined."
        )


class MissingSelectorError(MissingCapabilityError):
    """Raised when a subscriber has no callable selector."""

    capability = "selector"


class MissingOnChangeError(MissingCapabilityError):
    """Raised when a subscriber has no callable on_change."""

    capability = "on_change"
    article = "an"
