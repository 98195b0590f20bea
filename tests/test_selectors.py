"""Tests for selectors and watch_selector."""

import pytest

from reducer_store import create_selector, create_store, watch_selector
from reducer_store.cart import (
    AddItem,
    ApplyDiscount,
    CartState,
    Product,
    cart_reducer,
    make_discounted_total,
    make_subtotal,
)


BOOK = Product(id=1, name="Book", unit_price=10)
PEN = Product(id=2, name="Pen", unit_price=2.5)


class TestCreateSelector:
    """Tests for create_selector."""

    def test_computes_value(self):
        double = create_selector(lambda s: s, compute=lambda x: x * 2)

        assert double(4) == 8

    def test_caches_on_equal_dependencies(self):
        subtotal = make_subtotal()
        state = cart_reducer(CartState(), AddItem(BOOK))

        assert subtotal(state) == 10
        assert subtotal(state) == 10
        assert subtotal.recomputations == 1

    def test_ignores_unrelated_changes(self):
        subtotal = make_subtotal()
        state = cart_reducer(CartState(), AddItem(BOOK))
        subtotal(state)

        discounted = cart_reducer(state, ApplyDiscount(50))
        assert subtotal(discounted) == 10
        assert subtotal.recomputations == 1

    def test_recomputes_once_on_change(self):
        subtotal = make_subtotal()
        state = cart_reducer(CartState(), AddItem(BOOK))
        subtotal(state)

        state = cart_reducer(state, AddItem(PEN))
        assert subtotal(state) == 12.5
        assert subtotal(state) == 12.5
        assert subtotal.recomputations == 2

    def test_multiple_dependencies(self):
        calls = []

        def compute(a, b):
            calls.append((a, b))
            return a + b

        add = create_selector(lambda s: s["a"], lambda s: s["b"], compute=compute)

        assert add({"a": 1, "b": 2}) == 3
        assert add({"a": 1, "b": 2, "c": 9}) == 3
        assert add({"a": 1, "b": 5}) == 6
        assert calls == [(1, 2), (1, 5)]

    def test_reset_forces_recompute(self):
        double = create_selector(lambda s: s, compute=lambda x: x * 2, name="double")
        double(1)
        double.reset()
        double(1)

        assert double.recomputations == 2
        assert "double" in repr(double)

    def test_requires_dependency(self):
        with pytest.raises(ValueError, match="at least one dependency"):
            create_selector(compute=lambda: 1)


class TestWatchSelector:
    """Tests for watch_selector."""

    def test_calls_back_on_change_only(self):
        changes = []
        store = create_store(cart_reducer, CartState())
        watch_selector(store, make_subtotal(), lambda old, new: changes.append((old, new)))

        store.dispatch(AddItem(BOOK))
        store.dispatch(ApplyDiscount(10))
        store.dispatch(AddItem(BOOK))

        assert changes == [(0.0, 10.0), (10.0, 20.0)]

    def test_unsubscribe(self):
        changes = []
        store = create_store(cart_reducer, CartState())
        stop = watch_selector(store, make_subtotal(), lambda old, new: changes.append(new))

        stop()
        store.dispatch(AddItem(BOOK))

        assert changes == []

    def test_subtotal_tracks_items_at_full_discount(self):
        subtotals = []
        totals = []
        store = create_store(cart_reducer, CartState())
        store.dispatch(ApplyDiscount(100))
        watch_selector(store, make_subtotal(), lambda old, new: subtotals.append(new))
        watch_selector(store, make_discounted_total(), lambda old, new: totals.append(new))

        store.dispatch(AddItem(BOOK))
        store.dispatch(AddItem(PEN))

        assert subtotals == [10.0, 12.5]
        assert totals == []
