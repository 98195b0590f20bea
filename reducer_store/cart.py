"""Shopping cart: state, actions, reducer and selectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .selectors import Selector, create_selector
from .types import ItemId

if TYPE_CHECKING:
    from .store import Store


# --- Models ---


class Product(BaseModel):
    """Something that can be put in the cart."""

    model_config = ConfigDict(frozen=True)

    id: ItemId
    name: str = ""
    unit_price: float = Field(default=0.0, ge=0)


class CartItem(Product):
    quantity: int = 1


class CartState(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: tuple[CartItem, ...] = ()
    discount_percent: float = 0.0


# --- Actions ---


@dataclass(frozen=True)
class AddItem:
    product: Product

    kind: ClassVar[str] = "ADD_ITEM"


@dataclass(frozen=True)
class RemoveItem:
    id: ItemId

    kind: ClassVar[str] = "REMOVE_ITEM"


@dataclass(frozen=True)
class UpdateQuantity:
    id: ItemId
    quantity: int

    kind: ClassVar[str] = "UPDATE_QUANTITY"


@dataclass(frozen=True)
class ClearCart:
    kind: ClassVar[str] = "CLEAR_CART"


@dataclass(frozen=True)
class ApplyDiscount:
    percent: float

    kind: ClassVar[str] = "APPLY_DISCOUNT"


CartAction = AddItem | RemoveItem | UpdateQuantity | ClearCart | ApplyDiscount


# --- Reducer ---


def cart_reducer(state: CartState, action: Any) -> CartState:
    match action:
        case AddItem(product=product):
            if any(item.id == product.id for item in state.items):
                items = tuple(
                    item.model_copy(update={"quantity": item.quantity + 1})
                    if item.id == product.id else item
                    for item in state.items
                )
            else:
                new_item = CartItem(
                    id=product.id,
                    name=product.name,
                    unit_price=product.unit_price,
                    quantity=1,
                )
                items = (*state.items, new_item)
            return state.model_copy(update={"items": items})

        case RemoveItem(id=item_id):
            items = tuple(item for item in state.items if item.id != item_id)
            return state.model_copy(update={"items": items})

        # Zero or negative quantities are kept; see change_quantity()
        case UpdateQuantity(id=item_id, quantity=quantity):
            items = tuple(
                item.model_copy(update={"quantity": quantity})
                if item.id == item_id else item
                for item in state.items
            )
            return state.model_copy(update={"items": items})

        case ClearCart():
            return state.model_copy(update={"items": ()})

        case ApplyDiscount(percent=percent):
            return state.model_copy(update={"discount_percent": percent})

    return state


def change_quantity(store: Store[CartState, Any], item_id: ItemId, quantity: int) -> None:
    """Set an item's quantity, removing it once the quantity drops to zero."""
    if quantity <= 0:
        store.dispatch(RemoveItem(id=item_id))
    else:
        store.dispatch(UpdateQuantity(id=item_id, quantity=quantity))


# --- Selectors ---


def cart_subtotal(items: tuple[CartItem, ...]) -> float:
    return sum((item.unit_price * item.quantity for item in items), 0.0)


def apply_discount(subtotal: float, discount_percent: float) -> float:
    return subtotal * (100 - discount_percent) / 100


def make_subtotal() -> Selector[float]:
    return create_selector(lambda s: s.items, compute=cart_subtotal, name="subtotal")


def make_discounted_total() -> Selector[float]:
    return create_selector(
        lambda s: s.items,
        lambda s: s.discount_percent,
        compute=lambda items, percent: apply_discount(cart_subtotal(items), percent),
        name="discounted_total",
    )


def make_item_count() -> Selector[int]:
    return create_selector(
        lambda s: s.items,
        compute=lambda items: sum(item.quantity for item in items),
        name="item_count",
    )
