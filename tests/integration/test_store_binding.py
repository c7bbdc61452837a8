"""Integration tests binding selector subscribers to the reference Store."""

from unittest.mock import Mock, call

import pytest

from selector_subscribe import (
    SelectorSubscriber,
    collect_subscribers,
    create_store,
    subscriber,
)


def profile_reducer(state, action):
    kind = action["type"]
    if kind == "rename":
        return {**state, "name": action["name"]}
    if kind == "birthday":
        return {**state, "age": state["age"] + 1}
    if kind == "tag":
        return {**state, "tags": state["tags"] + (action["tag"],)}
    return state


@pytest.fixture
def profile_store():
    return create_store(profile_reducer, {"name": "Alice", "age": 30, "tags": ()})


@pytest.mark.integration
def test_only_the_changed_slice_fires(profile_store):
    """Dispatching one change fires only the handler watching that slice"""
    on_name = Mock()
    on_age = Mock()

    collect_subscribers(
        SelectorSubscriber(lambda state: state["name"], on_name),
        SelectorSubscriber(lambda state: state["age"], on_age),
    )(profile_store)

    profile_store.dispatch({"type": "rename", "name": "Bob"})
    profile_store.dispatch({"type": "birthday"})
    profile_store.dispatch({"type": "noop"})

    on_name.assert_called_once_with("Bob", "Alice")
    on_age.assert_called_once_with(31, 30)


@pytest.mark.integration
def test_binding_values_follow_the_store(profile_store):
    """Slots track the latest selected values"""
    binding = collect_subscribers(
        {"selector": lambda state: state["tags"], "on_change": lambda new, old: None}
    )(profile_store)

    profile_store.dispatch({"type": "tag", "tag": "admin"})
    profile_store.dispatch({"type": "tag", "tag": "owner"})

    assert binding.values == (("admin", "owner"),)


@pytest.mark.integration
def test_unchanged_tuple_slice_does_not_fire(profile_store):
    """Reducers that keep a slice's object keep its handler quiet"""
    on_tags = Mock()
    collect_subscribers({"selector": lambda state: state["tags"], "on_change": on_tags})(
        profile_store
    )

    profile_store.dispatch({"type": "rename", "name": "Carol"})

    on_tags.assert_not_called()


@pytest.mark.integration
def test_binding_registers_a_single_store_listener(profile_store):
    """Many subscribers share one listener on the store"""
    subscribers = [
        SelectorSubscriber(lambda state: state["age"], Mock()) for _ in range(5)
    ]

    collect_subscribers(*subscribers)(profile_store)

    assert len(profile_store._listeners) == 1


@pytest.mark.integration
def test_handler_dispatch_is_processed_recursively():
    """A handler that dispatches causes nested notification over the same slots"""
    store = create_store(lambda state, action: state + 1, 0)
    seen = []

    @subscriber(lambda state: state)
    def on_count(new, old):
        seen.append((new, old))
        if new < 3:
            store.dispatch("increment")

    binding = collect_subscribers(on_count)(store)
    store.dispatch("increment")

    assert seen == [(1, 0), (2, 0), (3, 0)]
    assert store.get_state() == 3
    assert binding.values == (1,)


@pytest.mark.integration
def test_counter_with_many_subscribers():
    """Each transform fires once per dispatch when every value is new"""
    store = create_store(lambda state, action: state + 1, 0)
    on_change = Mock()

    collect_subscribers(
        *(
            SelectorSubscriber(lambda state, factor=factor: state * factor, on_change)
            for factor in range(1, 11)
        )
    )(store)
    for _ in range(10):
        store.dispatch("increment")

    assert on_change.call_count == 100
    assert on_change.call_args_list[:2] == [call(1, 0), call(2, 0)]
