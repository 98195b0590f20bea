"""Tests for Store."""

from dataclasses import dataclass

import pytest
from pydantic import BaseModel, ConfigDict

from reducer_store import (
    Reducer,
    ReentrantDispatchError,
    Store,
    StoreClosedError,
    StoreConfig,
    create_store,
)


class CounterState(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = 0


@dataclass(frozen=True)
class Increment:
    amount: int = 1


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class Unknown:
    pass


def counter_reducer(state: CounterState, action) -> CounterState:
    match action:
        case Increment(amount):
            return state.model_copy(update={"count": state.count + amount})
        case Reset():
            return CounterState()
    return state


class TestCreateStore:
    """Tests for create_store."""

    def test_creates_store(self):
        store = create_store(counter_reducer, CounterState())

        assert isinstance(store, Store)
        assert store.state == CounterState()
        assert store.get_state() is store.state

    def test_store_with_name(self):
        store = create_store(counter_reducer, CounterState(), name="counter")

        assert store.name == "counter"
        assert "counter" in repr(store)

    def test_name_overrides_config(self):
        config = StoreConfig(name="config-name", reentrant_dispatch="reject")
        store = create_store(counter_reducer, CounterState(), name="counter", config=config)

        assert store.name == "counter"
        assert store.config.reentrant_dispatch == "reject"

    def test_stores_are_independent(self):
        a = create_store(counter_reducer, CounterState())
        b = create_store(counter_reducer, CounterState())

        a.dispatch(Increment(5))

        assert a.state.count == 5
        assert b.state.count == 0

    def test_accepts_callable_object_reducer(self):
        class Scaled:
            def __init__(self, factor: int) -> None:
                self.factor = factor

            def __call__(self, state: CounterState, action) -> CounterState:
                return counter_reducer(state, Increment(action.amount * self.factor))

        reducer: Reducer[CounterState, Increment] = Scaled(10)
        store = create_store(reducer, CounterState())

        store.dispatch(Increment(2))

        assert store.state.count == 20


class TestDispatch:
    """Tests for Store.dispatch."""

    def test_applies_reducer(self):
        store = create_store(counter_reducer, CounterState())

        store.dispatch(Increment(5))
        store.dispatch(Increment(3))

        assert store.state.count == 8

    def test_does_not_mutate_previous_state(self):
        store = create_store(counter_reducer, CounterState())
        before = store.state

        store.dispatch(Increment())

        assert before.count == 0
        assert store.state is not before

    def test_unknown_action_keeps_state(self):
        store = create_store(counter_reducer, CounterState(count=3))
        before = store.state

        store.dispatch(Unknown())

        assert store.state is before

    def test_notifies_even_when_unchanged(self):
        calls = []
        store = create_store(counter_reducer, CounterState())
        store.subscribe(lambda: calls.append(store.state.count))

        store.dispatch(Unknown())
        store.dispatch(Unknown())

        assert calls == [0, 0]

    def test_reducer_error_propagates_and_keeps_state(self):
        def broken(state, action):
            raise RuntimeError("boom")

        store = create_store(broken, CounterState())

        with pytest.raises(RuntimeError, match="boom"):
            store.dispatch(Increment())

        assert store.state == CounterState()
        # Store is usable again after the failure
        store._reducer = counter_reducer
        store.dispatch(Increment())
        assert store.state.count == 1


class TestSubscribe:
    """Tests for Store.subscribe."""

    def test_fan_out_in_registration_order(self):
        calls = []
        store = create_store(counter_reducer, CounterState())
        for i in range(3):
            store.subscribe(lambda i=i: calls.append(i))

        store.dispatch(Increment())

        assert calls == [0, 1, 2]

    def test_listener_sees_new_state(self):
        seen = []
        store = create_store(counter_reducer, CounterState())
        store.subscribe(lambda: seen.append(store.get_state().count))

        store.dispatch(Increment(2))

        assert seen == [2]

    def test_unsubscribe_before_dispatch(self):
        calls = []
        store = create_store(counter_reducer, CounterState())
        store.subscribe(lambda: calls.append("a"))
        unsubscribe = store.subscribe(lambda: calls.append("b"))

        unsubscribe()
        store.dispatch(Increment())

        assert calls == ["a"]

    def test_unsubscribe_is_idempotent(self):
        store = create_store(counter_reducer, CounterState())
        unsubscribe = store.subscribe(lambda: None)

        unsubscribe()
        unsubscribe()

    def test_same_listener_twice(self):
        calls = []
        store = create_store(counter_reducer, CounterState())

        def listener():
            calls.append(1)

        first = store.subscribe(listener)
        store.subscribe(listener)
        first()
        store.dispatch(Increment())

        assert calls == [1]

    def test_unsubscribe_during_notification(self):
        calls = []
        store = create_store(counter_reducer, CounterState())
        unsubscribes = {}

        def first():
            calls.append("first")
            unsubscribes["second"]()

        store.subscribe(first)
        unsubscribes["second"] = store.subscribe(lambda: calls.append("second"))
        store.subscribe(lambda: calls.append("third"))

        store.dispatch(Increment())
        store.dispatch(Increment())

        assert calls == ["first", "third", "first", "third"]

    def test_subscribe_during_notification_waits_for_next_round(self):
        calls = []
        store = create_store(counter_reducer, CounterState())

        def first():
            calls.append("first")
            if len(calls) == 1:
                store.subscribe(lambda: calls.append("late"))

        store.subscribe(first)

        store.dispatch(Increment())
        assert calls == ["first"]

        store.dispatch(Increment())
        assert calls == ["first", "first", "late"]


class TestReentrantDispatch:
    """Tests for dispatching from inside a dispatch."""

    def test_queued_by_default(self):
        seen = []
        store = create_store(counter_reducer, CounterState())

        def listener():
            seen.append(store.state.count)
            if store.state.count == 1:
                store.dispatch(Increment(10))
                # Not applied until the current round finishes
                seen.append(store.state.count)

        store.subscribe(listener)
        store.dispatch(Increment())

        assert seen == [1, 1, 11]
        assert store.state.count == 11

    def test_rejected_when_configured(self):
        store = create_store(
            counter_reducer,
            CounterState(),
            config=StoreConfig(reentrant_dispatch="reject"),
        )
        store.subscribe(lambda: store.dispatch(Increment()))

        with pytest.raises(ReentrantDispatchError):
            store.dispatch(Increment())

        assert store.state.count == 1

    def test_listener_error_drops_queued_actions(self):
        store = create_store(counter_reducer, CounterState())

        def listener():
            if store.state.count == 1:
                store.dispatch(Increment(10))
                raise RuntimeError("listener failed")

        store.subscribe(listener)

        with pytest.raises(RuntimeError, match="listener failed"):
            store.dispatch(Increment())

        assert store.state.count == 1
        store.dispatch(Reset())
        assert store.state.count == 0


class TestClose:
    """Tests for Store.close."""

    def test_dispatch_after_close_raises(self):
        store = create_store(counter_reducer, CounterState(), name="counter")
        store.close()

        assert store.closed
        with pytest.raises(StoreClosedError, match="counter"):
            store.dispatch(Increment())

    def test_state_readable_after_close(self):
        store = create_store(counter_reducer, CounterState())
        store.dispatch(Increment(4))
        store.close()

        assert store.get_state().count == 4

    def test_close_drops_listeners(self):
        calls = []
        store = create_store(counter_reducer, CounterState())
        unsubscribe = store.subscribe(lambda: calls.append(1))

        store.close()
        store.close()
        unsubscribe()

        assert calls == []

    def test_close_inside_listener_stops_queue(self):
        store = create_store(counter_reducer, CounterState())

        def listener():
            if store.state.count == 1:
                store.dispatch(Increment(10))
                store.close()

        store.subscribe(listener)
        store.dispatch(Increment())

        assert store.state.count == 1
