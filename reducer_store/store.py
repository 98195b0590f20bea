"""Store - owns the current state, applies the reducer, notifies listeners."""

from __future__ import annotations

from collections import deque
from typing import Any, Generic, TypeVar

from .config import StoreConfig
from .errors import ReentrantDispatchError, StoreClosedError
from .log import get_logger
from .types import Listener, Reducer, Unsubscribe

T = TypeVar("T")
A = TypeVar("A")

logger = get_logger(__name__)


class _Subscription:
    """One registered listener; identity lets the same callable subscribe twice."""

    __slots__ = ("listener", "active")

    def __init__(self, listener: Listener) -> None:
        self.listener = listener
        self.active = True


class Store(Generic[T, A]):
    """
    A state container driven by a reducer.

    Every store is constructed explicitly and owned by whoever created it;
    nothing in this package keeps a store at module level.

    Usage:
        ```python
        store = create_store(todo_reducer, TodoState(), name="todos")

        unsubscribe = store.subscribe(lambda: print(store.state))
        store.dispatch(AddTodo(id=1, text="buy milk"))
        unsubscribe()
        ```
    """

    __slots__ = (
        "_reducer",
        "_state",
        "_config",
        "_subscriptions",
        "_dispatching",
        "_pending",
        "_closed",
        "_log_name",
    )

    def __init__(
        self,
        reducer: Reducer[T, A],
        initial: T,
        *,
        config: StoreConfig | None = None,
    ) -> None:
        self._reducer = reducer
        self._state: T = initial
        self._config = config or StoreConfig()
        self._subscriptions: list[_Subscription] = []
        self._dispatching = False
        self._pending: deque[A] = deque()
        self._closed = False
        self._log_name = self._config.name or "unnamed"
        logger.debug("store_created", store=self._log_name, state_type=type(initial).__name__)

    @property
    def name(self) -> str | None:
        """Get store name."""
        return self._config.name

    @property
    def config(self) -> StoreConfig:
        """Get the store configuration."""
        return self._config

    @property
    def state(self) -> T:
        """Get the current state snapshot."""
        return self._state

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._closed

    def get_state(self) -> T:
        """Get the current state snapshot."""
        return self._state

    def dispatch(self, action: A) -> None:
        """
        Apply an action and notify every listener.

        Listeners run synchronously in subscription order, whether or not
        the reducer returned a new state.

        Args:
            action: The action to apply.

        Raises:
            StoreClosedError: If the store has been closed.
            ReentrantDispatchError: If called mid-dispatch and the store is
                configured with ``reentrant_dispatch="reject"``.
        """
        if self._closed:
            raise StoreClosedError(self.name)

        if self._dispatching:
            if self._config.reentrant_dispatch == "reject":
                raise ReentrantDispatchError(self.name, action)
            self._pending.append(action)
            logger.debug("action_queued", store=self._log_name, kind=_kind(action))
            return

        self._dispatching = True
        try:
            self._run(action)
            while self._pending and not self._closed:
                self._run(self._pending.popleft())
        finally:
            self._dispatching = False
            if self._pending:
                logger.warning(
                    "queued_actions_dropped", store=self._log_name, count=len(self._pending)
                )
                self._pending.clear()

    def _run(self, action: A) -> None:
        current = self._state
        new_state = self._reducer(current, action)
        self._state = new_state

        if self._config.log_actions:
            logger.debug(
                "action_dispatched",
                store=self._log_name,
                kind=_kind(action),
                changed=new_state is not current,
            )

        # Snapshot so listeners may (un)subscribe while being notified
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.listener()

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """
        Register a listener called with no arguments after each dispatch.

        Args:
            listener: Zero-argument callback. Read ``store.state`` inside it.

        Returns:
            A function that removes the listener. Calling it again is a no-op.
        """
        subscription = _Subscription(listener)
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            if not subscription.active:
                return
            subscription.active = False
            self._subscriptions.remove(subscription)

        return unsubscribe

    def close(self) -> None:
        """Drop all listeners and refuse further dispatches."""
        if self._closed:
            return
        for subscription in self._subscriptions:
            subscription.active = False
        self._subscriptions.clear()
        self._closed = True
        logger.debug("store_closed", store=self._log_name)

    def __repr__(self) -> str:
        name = f" name={self.name!r}" if self.name else ""
        return f"Store({self._state!r}{name})"


def _kind(action: Any) -> str:
    return getattr(action, "kind", type(action).__name__)


def create_store(
    reducer: Reducer[T, A],
    initial: T,
    *,
    name: str | None = None,
    config: StoreConfig | None = None,
) -> Store[T, A]:
    """
    Create a new store.

    Args:
        reducer: Pure function (state, action) -> new_state. It must handle
            every action, returning ``state`` unchanged for unknown ones.
        initial: Initial state value.
        name: Optional name for logging and ``@effect`` matching. Overrides
            ``config.name`` when both are given.
        config: Optional StoreConfig.

    Returns:
        A Store instance.

    Example:
        ```python
        from reducer_store.cart import CartState, cart_reducer

        cart = create_store(cart_reducer, CartState(), name="cart")
        ```
    """
    config = config or StoreConfig()
    if name is not None:
        config = config.model_copy(update={"name": name})
    return Store(reducer, initial, config=config)
