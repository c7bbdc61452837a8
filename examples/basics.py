from selector_subscribe import collect_subscribers, create_store, subscriber

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Creating a store")
print("-" * 100)
print()


# Stores hold an immutable snapshot that only a reducer can replace.
def cart_reducer(state, action):
    if action["type"] == "add":
        return {**state, "items": state["items"] + (action["item"],)}
    if action["type"] == "discount":
        return {**state, "discount": action["percent"]}
    return state


store = create_store(cart_reducer, {"items": (), "discount": 0})
print(f"Initial state: {store.get_state()}")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Subscribing to selected values")
print("-" * 100)
print()


# A subscriber pairs a selector with a handler called as (new_value, old_value).
@subscriber(lambda state: len(state["items"]))
def log_item_count(count, previous):
    print(f"Item count: {previous} -> {count}")


# Plain mappings work too.
log_discount = {
    "selector": lambda state: state["discount"],
    "on_change": lambda percent, previous: print(f"Discount: {previous}% -> {percent}%"),
}

# Nothing runs until the binder is called with a store.
bind = collect_subscribers(log_item_count, log_discount)
bind(store)

store.dispatch({"type": "add", "item": "apple"})  # Item count: 0 -> 1
store.dispatch({"type": "discount", "percent": 10})  # Discount: 0% -> 10%
store.dispatch({"type": "unknown"})  # Nothing changed, nothing printed
