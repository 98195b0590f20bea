"""Memoized selectors - derived values recomputed only when their inputs change."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from .types import EffectCallback, Unsubscribe

if TYPE_CHECKING:
    from .store import Store

T = TypeVar("T")

_UNSET: Any = object()


class Selector(Generic[T]):
    """
    A derived value over store state with an explicit dependency list.

    Each dependency maps a state to a key. When every key equals the key
    from the previous call, the cached result is returned; otherwise
    ``compute`` runs once with the new keys.
    """

    __slots__ = ("_dependencies", "_compute", "_name", "_keys", "_result", "recomputations")

    def __init__(
        self,
        dependencies: tuple[Callable[[Any], Any], ...],
        compute: Callable[..., T],
        *,
        name: str | None = None,
    ) -> None:
        if not dependencies:
            raise ValueError("Selector requires at least one dependency")
        self._dependencies = dependencies
        self._compute = compute
        self._name = name
        self._keys: tuple[Any, ...] = _UNSET
        self._result: T = _UNSET
        self.recomputations = 0

    @property
    def name(self) -> str | None:
        """Get selector name."""
        return self._name

    def __call__(self, state: Any) -> T:
        keys = tuple(dependency(state) for dependency in self._dependencies)
        if self._keys is not _UNSET and keys == self._keys:
            return self._result

        self._result = self._compute(*keys)
        self._keys = keys
        self.recomputations += 1
        return self._result

    def reset(self) -> None:
        """Forget the cached result."""
        self._keys = _UNSET
        self._result = _UNSET

    def __repr__(self) -> str:
        name = f" name={self._name!r}" if self._name else ""
        return f"Selector(recomputations={self.recomputations}{name})"


def create_selector(
    *dependencies: Callable[[Any], Any],
    compute: Callable[..., T],
    name: str | None = None,
) -> Selector[T]:
    """
    Create a memoized selector.

    Args:
        *dependencies: Functions state -> key. Keys are compared with ``==``.
        compute: Function receiving one argument per dependency.
        name: Optional name for debugging.

    Returns:
        A Selector. Call it with a state to read the derived value.

    Example:
        ```python
        subtotal = create_selector(
            lambda s: s.items,
            compute=lambda items: sum(i.unit_price * i.quantity for i in items),
        )
        subtotal(cart.state)
        ```
    """
    return Selector(dependencies, compute, name=name)


def watch_selector(
    store: Store[Any, Any],
    selector: Selector[T],
    callback: EffectCallback[T],
) -> Unsubscribe:
    """
    Call ``callback(old, new)`` whenever a selector's value changes.

    The store notifies on every dispatch; this only forwards the ones where
    the derived value differs from the last one seen.

    Returns:
        A function that stops watching.
    """
    last = selector(store.state)

    def on_dispatch() -> None:
        nonlocal last
        current = selector(store.state)
        if current == last:
            return
        old, last = last, current
        callback(old, current)

    return store.subscribe(on_dispatch)
