"""Textual bridge - provide stores to widget trees and repaint on change."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from textual.containers import Container
from textual.message import Message
from textual.widget import Widget

from .effects import connect_effects
from .errors import StoreNotFoundError
from .store import Store
from .types import Unsubscribe

T = TypeVar("T")
A = TypeVar("A")


class StoreChanged(Message, Generic[T]):
    """Message posted to connected widgets after each dispatch."""

    def __init__(self, store: Store[T, Any], old_value: T, new_value: T) -> None:
        super().__init__()
        self.store = store
        self.old_value = old_value
        self.new_value = new_value


def connect_widget(widget: Any, store: Store[T, Any]) -> Unsubscribe:
    """
    Subscribe a widget to a store.

    The widget receives a StoreChanged message after every dispatch and its
    ``@effect`` methods naming this store are connected.

    Args:
        widget: Anything with ``post_message``, normally a Textual widget.
        store: The store to watch.

    Returns:
        A function that disconnects the widget and its effects.
    """
    last = store.state

    def on_dispatch() -> None:
        nonlocal last
        old, last = last, store.state
        widget.post_message(StoreChanged(store, old, last))

    unsubscribes = [store.subscribe(on_dispatch), *connect_effects(widget, store)]

    def disconnect() -> None:
        for unsubscribe in unsubscribes:
            unsubscribe()

    return disconnect


class StoreProvider(Container, Generic[T, A]):
    """
    Widget that makes a store available to its descendants.

    Example:
        ```python
        class CartApp(App):
            def __init__(self):
                super().__init__()
                self.cart = create_store(cart_reducer, CartState(), name="cart")

            def compose(self):
                yield StoreProvider(self.cart, ProductList(), CartSummary())
        ```
    """

    DEFAULT_CSS = """
    StoreProvider {
        width: 100%;
        height: auto;
    }
    """

    def __init__(
        self,
        store: Store[T, A],
        *children: Widget,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self._store = store
        self._compose_children = children

    @property
    def store(self) -> Store[T, A]:
        """Get the provided store."""
        return self._store

    def compose(self):
        yield from self._compose_children


def find_store(widget: Widget, name: str | None = None) -> Store[Any, Any] | None:
    """Find the store of the nearest provider above a widget."""
    current: Widget | None = widget

    while current is not None:
        if isinstance(current, StoreProvider) and (
            name is None or current.store.name == name
        ):
            return current.store

        if hasattr(current, "parent") and current.parent is not None:
            current = current.parent
        else:
            break

    return None


class StoreHandle(Generic[T, A]):
    """
    Handle returned by use_store() - access to state, dispatch and disconnect.

    Call ``disconnect()`` when the widget goes away, typically from
    ``on_unmount``, so the store stops posting to it.
    """

    __slots__ = ("_store", "_disconnect")

    def __init__(self, store: Store[T, A], disconnect: Unsubscribe | None = None) -> None:
        self._store = store
        self._disconnect = disconnect

    @property
    def store(self) -> Store[T, A]:
        """Get the store this handle belongs to."""
        return self._store

    @property
    def state(self) -> T:
        """Get the current state value."""
        return self._store.state

    @property
    def connected(self) -> bool:
        """Whether the widget is still subscribed."""
        return self._disconnect is not None

    def dispatch(self, action: A) -> None:
        """Dispatch an action to the store."""
        self._store.dispatch(action)

    def disconnect(self) -> None:
        """Unsubscribe the widget and its effects. Safe to call twice."""
        if self._disconnect is not None:
            self._disconnect()
            self._disconnect = None

    def __call__(self) -> T:
        """Shorthand to get current state."""
        return self._store.state


def use_store(
    widget: Widget,
    name: str | None = None,
    *,
    subscribe: bool = True,
) -> StoreHandle[Any, Any]:
    """
    Consume a store from the nearest StoreProvider.

    Args:
        widget: The widget consuming the store.
        name: Store name to look for. ``None`` accepts the nearest provider.
        subscribe: Whether to connect the widget (default True).

    Returns:
        A StoreHandle with .state, .dispatch() and .disconnect().

    Raises:
        StoreNotFoundError: If no matching provider is mounted above the widget.
    """
    store = find_store(widget, name)

    if store is None:
        raise StoreNotFoundError(name, widget)

    disconnect = connect_widget(widget, store) if subscribe else None
    return StoreHandle(store, disconnect)
