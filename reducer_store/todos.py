"""Todo list: state, actions, reducer and selectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict

from .ids import counter_ids
from .selectors import Selector, create_selector
from .types import IdFactory, ItemId

TodoFilter = Literal["all", "active", "completed"]


# --- Models ---


class TodoItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: ItemId
    text: str
    completed: bool = False


class TodoState(BaseModel):
    model_config = ConfigDict(frozen=True)

    todos: tuple[TodoItem, ...] = ()
    filter: TodoFilter = "all"


class TodoStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int
    completed: int
    active: int


# --- Actions ---


@dataclass(frozen=True)
class AddTodo:
    id: ItemId
    text: str

    kind: ClassVar[str] = "ADD_TODO"


@dataclass(frozen=True)
class ToggleTodo:
    id: ItemId

    kind: ClassVar[str] = "TOGGLE_TODO"


@dataclass(frozen=True)
class DeleteTodo:
    id: ItemId

    kind: ClassVar[str] = "DELETE_TODO"


@dataclass(frozen=True)
class SetFilter:
    filter: TodoFilter

    kind: ClassVar[str] = "SET_FILTER"


TodoAction = AddTodo | ToggleTodo | DeleteTodo | SetFilter


# --- Reducer ---


def todo_reducer(state: TodoState, action: Any) -> TodoState:
    match action:
        case AddTodo(id=todo_id, text=text):
            new_item = TodoItem(id=todo_id, text=text)
            return state.model_copy(update={"todos": (*state.todos, new_item)})

        case ToggleTodo(id=todo_id):
            todos = tuple(
                todo.model_copy(update={"completed": not todo.completed})
                if todo.id == todo_id else todo
                for todo in state.todos
            )
            return state.model_copy(update={"todos": todos})

        case DeleteTodo(id=todo_id):
            todos = tuple(todo for todo in state.todos if todo.id != todo_id)
            return state.model_copy(update={"todos": todos})

        case SetFilter(filter=todo_filter):
            return state.model_copy(update={"filter": todo_filter})

    return state


class TodoActions:
    """
    Action creator that supplies ids for new todos.

    Example:
        ```python
        actions = TodoActions(uuid_ids())
        store.dispatch(actions.add("buy milk"))
        ```
    """

    def __init__(self, id_factory: IdFactory | None = None) -> None:
        self._next_id = id_factory or counter_ids()

    def add(self, text: str) -> AddTodo:
        return AddTodo(id=self._next_id(), text=text)

    def toggle(self, todo_id: ItemId) -> ToggleTodo:
        return ToggleTodo(id=todo_id)

    def delete(self, todo_id: ItemId) -> DeleteTodo:
        return DeleteTodo(id=todo_id)

    def set_filter(self, todo_filter: TodoFilter) -> SetFilter:
        return SetFilter(filter=todo_filter)


# --- Selectors ---


def filter_todos(todos: tuple[TodoItem, ...], todo_filter: TodoFilter) -> tuple[TodoItem, ...]:
    """Return the todos visible under a filter."""
    match todo_filter:
        case "active":
            return tuple(todo for todo in todos if not todo.completed)
        case "completed":
            return tuple(todo for todo in todos if todo.completed)
    return todos


def make_visible_todos() -> Selector[tuple[TodoItem, ...]]:
    return create_selector(
        lambda s: s.todos,
        lambda s: s.filter,
        compute=filter_todos,
        name="visible_todos",
    )


def make_todo_stats() -> Selector[TodoStats]:
    def compute(todos: tuple[TodoItem, ...]) -> TodoStats:
        completed = sum(1 for todo in todos if todo.completed)
        return TodoStats(total=len(todos), completed=completed, active=len(todos) - completed)

    return create_selector(lambda s: s.todos, compute=compute, name="todo_stats")
