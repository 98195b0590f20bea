"""User preferences: state, actions and reducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict

Theme = Literal["light", "dark", "auto"]
Language = Literal["en", "es", "fr", "de"]
FontSize = Literal["small", "medium", "large"]


class Preferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    theme: Theme = "light"
    language: Language = "en"
    notifications_enabled: bool = True
    font_size: FontSize = "medium"


DEFAULT_PREFERENCES = Preferences()


# --- Actions ---


@dataclass(frozen=True)
class SetTheme:
    theme: Theme

    kind: ClassVar[str] = "SET_THEME"


@dataclass(frozen=True)
class SetLanguage:
    language: Language

    kind: ClassVar[str] = "SET_LANGUAGE"


@dataclass(frozen=True)
class SetFontSize:
    font_size: FontSize

    kind: ClassVar[str] = "SET_FONT_SIZE"


@dataclass(frozen=True)
class ToggleNotifications:
    kind: ClassVar[str] = "TOGGLE_NOTIFICATIONS"


@dataclass(frozen=True)
class ResetPreferences:
    kind: ClassVar[str] = "RESET_PREFERENCES"


PreferencesAction = SetTheme | SetLanguage | SetFontSize | ToggleNotifications | ResetPreferences


# --- Reducer ---


def preferences_reducer(state: Preferences, action: Any) -> Preferences:
    match action:
        case SetTheme(theme=theme):
            return state.model_copy(update={"theme": theme})
        case SetLanguage(language=language):
            return state.model_copy(update={"language": language})
        case SetFontSize(font_size=font_size):
            return state.model_copy(update={"font_size": font_size})
        case ToggleNotifications():
            return state.model_copy(
                update={"notifications_enabled": not state.notifications_enabled}
            )
        case ResetPreferences():
            return DEFAULT_PREFERENCES
    return state
