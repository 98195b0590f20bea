"""
Todo App - a todo list driven by a Store.

Demonstrates:
- create_store: one store instance, owned by the app
- StoreProvider / use_store: provider/consumer pattern
- @effect: React to state changes
- Selectors: filtered view and stats
"""

from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Footer, Header, Input, Label, Static

from reducer_store import StoreProvider, configure_logging, create_store, effect, use_store
from reducer_store.todos import (
    TodoActions,
    TodoItem,
    TodoState,
    make_todo_stats,
    make_visible_todos,
    todo_reducer,
)

ACTIONS = TodoActions()


class TodoInput(Static):
    """Input for adding new todos."""

    DEFAULT_CSS = """
    TodoInput {
        height: 3;
        margin: 1;
    }
    TodoInput Input {
        width: 1fr;
    }
    TodoInput Button {
        width: 12;
    }
    """

    def on_mount(self) -> None:
        self.todos = use_store(self, "todos", subscribe=False)

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Input(placeholder="What needs to be done?", id="new-todo")
            yield Button("Add", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self._add_todo()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._add_todo()

    def _add_todo(self) -> None:
        input_widget = self.query_one("#new-todo", Input)
        text = input_widget.value.strip()
        if text:
            self.todos.dispatch(ACTIONS.add(text))
            input_widget.value = ""


class TodoItemView(Static):
    """Single todo item view."""

    DEFAULT_CSS = """
    TodoItemView {
        height: 3;
        padding: 0 1;
    }
    TodoItemView .completed {
        text-style: strike;
        color: $text-muted;
    }
    TodoItemView Label {
        width: 1fr;
    }
    """

    def __init__(self, item: TodoItem) -> None:
        super().__init__()
        self.item = item

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Button("✓" if self.item.completed else "○", id="toggle")
            label = Label(self.item.text)
            if self.item.completed:
                label.add_class("completed")
            yield label
            yield Button("×", id="delete", variant="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        todos = use_store(self, "todos", subscribe=False)
        if event.button.id == "toggle":
            todos.dispatch(ACTIONS.toggle(self.item.id))
        elif event.button.id == "delete":
            todos.dispatch(ACTIONS.delete(self.item.id))


class TodoList(Static):
    """List of todos under the current filter."""

    DEFAULT_CSS = """
    TodoList {
        height: auto;
        max-height: 15;
        margin: 1;
        border: solid $primary;
        padding: 1;
    }
    """

    def on_mount(self) -> None:
        self.visible = make_visible_todos()
        self.todos = use_store(self, "todos")
        self._rebuild_list(self.todos.state)

    def on_unmount(self) -> None:
        self.todos.disconnect()

    @effect("todos")
    def on_todos_change(self, old: TodoState, new: TodoState) -> None:
        self._rebuild_list(new)

    def _rebuild_list(self, state: TodoState) -> None:
        self.remove_children()
        items = self.visible(state)
        if not items:
            self.mount(Label("No items to show"))
        else:
            self.mount(*(TodoItemView(item) for item in items))


class FilterBar(Static):
    """Filter buttons and stats."""

    DEFAULT_CSS = """
    FilterBar {
        height: 3;
        margin: 1;
    }
    FilterBar Button {
        margin: 0 1;
    }
    FilterBar #stats {
        width: 1fr;
    }
    """

    def on_mount(self) -> None:
        self.stats = make_todo_stats()
        self.todos = use_store(self, "todos")
        self._show_stats(self.todos.state)

    def on_unmount(self) -> None:
        self.todos.disconnect()

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Label("", id="stats")
            yield Button("All", id="all")
            yield Button("Active", id="active")
            yield Button("Completed", id="completed")

    @effect("todos")
    def on_todos_change(self, old: TodoState, new: TodoState) -> None:
        self._show_stats(new)

    def _show_stats(self, state: TodoState) -> None:
        stats = self.stats(state)
        self.query_one("#stats", Label).update(
            f"{stats.active} active / {stats.total} total"
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id in ("all", "active", "completed"):
            self.todos.dispatch(ACTIONS.set_filter(event.button.id))


class TodoApp(App):
    """Main todo application."""

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.todos = create_store(todo_reducer, TodoState(), name="todos")
        for text in ("Learn reducers", "Write selectors", "Build a TUI"):
            self.todos.dispatch(ACTIONS.add(text))

    def compose(self) -> ComposeResult:
        yield Header()
        yield StoreProvider(
            self.todos,
            TodoInput(),
            TodoList(),
            FilterBar(),
        )
        yield Footer()


if __name__ == "__main__":
    configure_logging()
    TodoApp().run()
