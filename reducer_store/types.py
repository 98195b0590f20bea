"""Type definitions for reducer-store."""

from typing import Callable, TypeVar, Protocol

# Type variables
T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)
A_contra = TypeVar("A_contra", contravariant=True)


class Reducer(Protocol[T, A_contra]):
    """Protocol for transition functions."""

    def __call__(self, state: T, action: A_contra) -> T:
        """Process an action and return the next state."""
        ...


class EffectCallback(Protocol[T_contra]):
    """Protocol for state change callbacks."""

    def __call__(self, old_value: T_contra, new_value: T_contra) -> None:
        """Called when state changes."""
        ...


Listener = Callable[[], None]
Unsubscribe = Callable[[], None]
ItemId = int | str
IdFactory = Callable[[], ItemId]
