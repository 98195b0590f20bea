"""Exceptions raised by stores and the widget bridge."""

from __future__ import annotations

from typing import Any


class StoreError(Exception):
    """Base class for store misuse."""


class StoreClosedError(StoreError):
    """Raised when dispatching to a store that has been closed."""

    def __init__(self, name: str | None) -> None:
        self.name = name
        super().__init__(f"Store '{name or 'unnamed'}' is closed.")


class ReentrantDispatchError(StoreError):
    """Raised when a store configured to reject reentrancy is dispatched to mid-cycle."""

    def __init__(self, name: str | None, action: Any) -> None:
        self.name = name
        self.action = action
        super().__init__(
            f"Store '{name or 'unnamed'}' is already dispatching; "
            f"cannot dispatch {type(action).__name__} from a reducer or listener."
        )


class StoreNotFoundError(Exception):
    """Raised when no store provider is found above a widget."""

    def __init__(self, name: str | None, widget: Any) -> None:
        self.name = name
        self.widget = widget
        super().__init__(
            f"Store '{name or 'any'}' not found in widget tree for {widget.__class__.__name__}. "
            f"Make sure a StoreProvider is mounted above this widget."
        )
