"""
Reducer Store - a small reducer-driven state container.

A Store pairs an immutable state value with a pure reducer. Actions go in
through ``dispatch``; listeners registered with ``subscribe`` are told
after each one. Selectors derive values from state and only recompute when
their dependencies change.

Key Features:
- create_store: Independent, explicitly constructed stores
- create_selector: Memoized derived values with explicit dependencies
- watch_selector: Callbacks when a derived value changes
- StoreProvider / use_store: Share a store across a Textual widget tree
- @effect: Decorator to react to store changes in widgets

Example:
    ```python
    from reducer_store import create_store
    from reducer_store.cart import (
        AddItem, ApplyDiscount, CartState, Product, cart_reducer,
        make_discounted_total,
    )

    cart = create_store(cart_reducer, CartState(), name="cart")
    total = make_discounted_total()

    cart.subscribe(lambda: print(f"Total: {total(cart.state):.2f}"))

    book = Product(id=1, name="Python Book", unit_price=10)
    cart.dispatch(AddItem(book))
    cart.dispatch(AddItem(book))
    cart.dispatch(ApplyDiscount(10))   # Total: 18.00
    ```
"""

# Store
from .store import (
    Store,
    create_store,
)

# Selectors
from .selectors import (
    Selector,
    create_selector,
    watch_selector,
)

# Effects
from .effects import (
    effect,
    connect_effects,
)

# Textual bridge
from .widgets import (
    StoreChanged,
    StoreHandle,
    StoreProvider,
    connect_widget,
    find_store,
    use_store,
)

# Configuration and logging
from .config import StoreConfig
from .log import configure_logging

# Id factories
from .ids import counter_ids, uuid_ids

# Errors
from .errors import (
    StoreError,
    StoreClosedError,
    ReentrantDispatchError,
    StoreNotFoundError,
)

# Types
from .types import (
    Reducer,
    EffectCallback,
    Listener,
    Unsubscribe,
    IdFactory,
    ItemId,
)

__version__ = "0.1.0a1"

__all__ = [
    # Store
    "Store",
    "create_store",
    # Selectors
    "Selector",
    "create_selector",
    "watch_selector",
    # Effects
    "effect",
    "connect_effects",
    # Textual bridge
    "StoreChanged",
    "StoreHandle",
    "StoreProvider",
    "connect_widget",
    "find_store",
    "use_store",
    # Configuration and logging
    "StoreConfig",
    "configure_logging",
    # Id factories
    "counter_ids",
    "uuid_ids",
    # Errors
    "StoreError",
    "StoreClosedError",
    "ReentrantDispatchError",
    "StoreNotFoundError",
    # Types
    "Reducer",
    "EffectCallback",
    "Listener",
    "Unsubscribe",
    "IdFactory",
    "ItemId",
]
