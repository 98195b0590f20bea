"""Effect decorator for reacting to store changes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

from .types import Unsubscribe

if TYPE_CHECKING:
    from .store import Store

F = TypeVar("F", bound=Callable[..., Any])

# Attribute name to store effect metadata on methods
EFFECT_ATTR = "__reducer_store_effects__"


class EffectRegistration:
    """Stores effect registration info on a method."""

    __slots__ = ("targets",)

    def __init__(self) -> None:
        self.targets: list[str] = []

    def add(self, target: str) -> None:
        self.targets.append(target)


def get_effect_registration(method: Callable[..., Any]) -> EffectRegistration | None:
    """Get effect registration from a method, if any."""
    return getattr(method, EFFECT_ATTR, None)


def effect(*store_names: str) -> Callable[[F], F]:
    """
    Decorator to mark a method as an effect that responds to store changes.

    Args:
        *store_names: Names of the stores to watch.

    Example:
        ```python
        class CartSummary(Static):
            def on_mount(self):
                self.cart = use_store(self, "cart")

            @effect("cart")
            def on_cart_change(self, old: CartState, new: CartState):
                self.update(f"{len(new.items)} items")
        ```
    """
    if not store_names:
        raise ValueError("@effect requires at least one target")

    def decorator(method: F) -> F:
        registration = get_effect_registration(method)
        if registration is None:
            registration = EffectRegistration()
            setattr(method, EFFECT_ATTR, registration)

        for name in store_names:
            registration.add(name)

        return method

    return decorator


def connect_effects(target: Any, store: Store[Any, Any]) -> list[Unsubscribe]:
    """
    Connect ``@effect`` methods on ``target`` that watch ``store``.

    Each method is called with ``(old, new)`` after a dispatch that
    produced a different state object.

    Args:
        target: Any object, usually a widget.
        store: The store being watched. Unnamed stores have no effects.

    Returns:
        One unsubscribe function per connected method.
    """
    if store.name is None:
        return []

    unsubscribes: list[Unsubscribe] = []

    for attr_name in dir(type(target)):
        if attr_name.startswith("_"):
            continue

        # Look on the class first so properties are not evaluated
        class_attr = getattr(type(target), attr_name, None)
        if class_attr is None:
            continue

        registration = get_effect_registration(class_attr)
        if registration is None or store.name not in registration.targets:
            continue

        method = getattr(target, attr_name)
        if callable(method):
            unsubscribes.append(_watch(store, method))

    return unsubscribes


def _watch(store: Store[Any, Any], callback: Callable[[Any, Any], None]) -> Unsubscribe:
    last = store.state

    def on_dispatch() -> None:
        nonlocal last
        current = store.state
        if current is last:
            return
        old, last = last, current
        callback(old, current)

    return store.subscribe(on_dispatch)
