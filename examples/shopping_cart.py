"""
Shopping Cart - a cart store with derived totals.

Demonstrates:
- change_quantity: removing items when the quantity reaches zero
- watch_selector: update the totals only when they change
- on_store_changed: repaint on every dispatch
"""

from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Label, Static

from reducer_store import (
    StoreChanged,
    configure_logging,
    connect_widget,
    create_store,
    watch_selector,
)
from reducer_store.cart import (
    AddItem,
    ApplyDiscount,
    CartState,
    ClearCart,
    Product,
    RemoveItem,
    cart_reducer,
    change_quantity,
    make_discounted_total,
    make_subtotal,
)

PRODUCTS = (
    Product(id=1, name="Python Book", unit_price=29.99),
    Product(id=2, name="Textual Course", unit_price=49.99),
    Product(id=3, name="Editor Plugin", unit_price=9.99),
)


class ShoppingCart(App):
    """Cart app using a reducer store."""

    CSS = """
    Screen {
        layout: vertical;
        padding: 1 2;
    }
    #cart {
        height: auto;
        border: solid $secondary;
        padding: 1;
    }
    #totals {
        height: 3;
        text-style: bold;
    }
    Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.cart = create_store(cart_reducer, CartState(), name="cart")
        self.subtotal = make_subtotal()
        self.total = make_discounted_total()

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            for product in PRODUCTS:
                yield Button(f"{product.name} ${product.unit_price:.2f}", id=f"add-{product.id}")
        yield Vertical(id="cart")
        with Horizontal():
            yield Button("10% off", id="discount-10")
            yield Button("20% off", id="discount-20")
            yield Button("Clear", id="clear", variant="warning")
        yield Static("", id="totals")
        yield Footer()

    def on_mount(self) -> None:
        connect_widget(self, self.cart)
        watch_selector(self.cart, self.subtotal, lambda old, new: self._show_totals())
        watch_selector(self.cart, self.total, lambda old, new: self._show_totals())
        self._show_cart()
        self._show_totals()

    def on_store_changed(self, event: StoreChanged[CartState]) -> None:
        self._show_cart()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        action, _, arg = (event.button.name or event.button.id or "").partition("-")
        match action:
            case "add":
                product = next(p for p in PRODUCTS if p.id == int(arg))
                self.cart.dispatch(AddItem(product))
            case "inc" | "dec":
                item = next(i for i in self.cart.state.items if i.id == int(arg))
                step = 1 if action == "inc" else -1
                change_quantity(self.cart, item.id, item.quantity + step)
            case "remove":
                self.cart.dispatch(RemoveItem(int(arg)))
            case "discount":
                self.cart.dispatch(ApplyDiscount(float(arg)))
            case "clear":
                self.cart.dispatch(ClearCart())

    def _show_cart(self) -> None:
        cart = self.query_one("#cart", Vertical)
        cart.remove_children()
        items = self.cart.state.items
        if not items:
            cart.mount(Label("Your cart is empty"))
            return
        for item in items:
            cart.mount(
                Horizontal(
                    Label(f"{item.name} ${item.unit_price:.2f} x {item.quantity}"),
                    Button("-", name=f"dec-{item.id}"),
                    Button("+", name=f"inc-{item.id}"),
                    Button("Remove", name=f"remove-{item.id}", variant="error"),
                )
            )

    def _show_totals(self) -> None:
        state = self.cart.state
        text = f"Subtotal: ${self.subtotal(state):.2f}"
        if state.discount_percent > 0:
            text += f"   Total: ${self.total(state):.2f} ({state.discount_percent:g}% off)"
        self.query_one("#totals", Static).update(text)


if __name__ == "__main__":
    configure_logging()
    ShoppingCart().run()
