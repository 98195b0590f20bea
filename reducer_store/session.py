"""Signed-in user and notification centre: state, actions, reducer and selectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from .selectors import Selector, create_selector
from .types import ItemId


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    is_logged_in: bool = False


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: ItemId
    message: str
    read: bool = False


class SessionState(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: User = User()
    notifications: tuple[Notification, ...] = ()


# --- Actions ---


@dataclass(frozen=True)
class Login:
    name: str
    email: str

    kind: ClassVar[str] = "LOGIN"


@dataclass(frozen=True)
class Logout:
    kind: ClassVar[str] = "LOGOUT"


@dataclass(frozen=True)
class AddNotification:
    id: ItemId
    message: str

    kind: ClassVar[str] = "ADD_NOTIFICATION"


@dataclass(frozen=True)
class MarkNotificationRead:
    id: ItemId

    kind: ClassVar[str] = "MARK_NOTIFICATION_READ"


SessionAction = Login | Logout | AddNotification | MarkNotificationRead


# --- Reducer ---


def session_reducer(state: SessionState, action: Any) -> SessionState:
    match action:
        case Login(name=name, email=email):
            user = User(name=name, email=email, is_logged_in=True)
            return state.model_copy(update={"user": user})

        case Logout():
            return state.model_copy(update={"user": User()})

        case AddNotification(id=notification_id, message=message):
            notification = Notification(id=notification_id, message=message)
            return state.model_copy(
                update={"notifications": (*state.notifications, notification)}
            )

        case MarkNotificationRead(id=notification_id):
            notifications = tuple(
                n.model_copy(update={"read": True}) if n.id == notification_id else n
                for n in state.notifications
            )
            return state.model_copy(update={"notifications": notifications})

    return state


def make_unread_count() -> Selector[int]:
    return create_selector(
        lambda s: s.notifications,
        compute=lambda notifications: sum(1 for n in notifications if not n.read),
        name="unread_count",
    )
