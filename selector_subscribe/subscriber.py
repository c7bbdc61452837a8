"""
Convenience subscriber type.

Any object with callable ``selector`` and ``on_change`` attributes (or a mapping
with those keys) can be handed to ``collect_subscribers``. ``SelectorSubscriber``
is the ready-made version, and ``subscriber`` builds one from a decorated
change handler:

```python
from selector_subscribe import subscriber

@subscriber(lambda state: state["user"]["name"])
def on_name_change(new_name, old_name):
    print(f"{old_name} -> {new_name}")
```
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional

from .base import S, V


@dataclass(frozen=True)
class SelectorSubscriber(Generic[S, V]):
    """Immutable (selector, on_change) pair."""

    selector: Callable[[S], V]
    on_change: Callable[[V, Optional[V]], None]


def subscriber(
    selector: Callable[[S], V],
) -> Callable[[Callable[[V, Optional[V]], None]], SelectorSubscriber[S, V]]:
    """Decorator factory pairing ``selector`` with the decorated change handler."""

    def decorator(on_change):
        return SelectorSubscriber(selector, on_change)

    return decorator
